from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Who is signed in."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class LogType(str, Enum):
    """The four time-log events an employee can emit."""

    CHECK_IN = "check-in"
    BREAK_START = "break-start"
    BREAK_END = "break-end"
    CHECK_OUT = "check-out"

    @property
    def label(self) -> str:
        return {
            LogType.CHECK_IN: "Checked In",
            LogType.BREAK_START: "Break Started",
            LogType.BREAK_END: "Returned from Break",
            LogType.CHECK_OUT: "Checked Out",
        }[self]


class DateFilter(str, Enum):
    """Time period choices on the reports page."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    CUSTOM = "custom"


class ChangeType(str, Enum):
    INSERT = "INSERT"
    DELETE = "DELETE"
