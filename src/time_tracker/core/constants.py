"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

RECENT_ACTIVITY_LIMIT = 10
WEEK_FILTER_DAYS = 7
MISSING_PLACEHOLDER = "-"
ALL_EMPLOYEES_LABEL = "All Employees"
DEFAULT_CHANGE_FEED_HISTORY = 500

CSV_HEADER = (
    "Date",
    "Employee",
    "Check In",
    "Break Start",
    "Break End",
    "Check Out",
    "Total Hours",
    "Break Duration",
)
