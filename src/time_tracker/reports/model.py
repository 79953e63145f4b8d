from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import format_report_date
from ..core.enums import DateFilter


@dataclass
class DailyReport:
    """One summary row per date: last-seen event of each type plus durations."""

    date: str
    check_in: Optional[str] = None
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    check_out: Optional[str] = None
    total_hours: Optional[str] = None
    break_duration: Optional[str] = None

    @property
    def display_date(self) -> str:
        return format_report_date(self.date)


@dataclass(frozen=True)
class ReportFilter:
    employee_id: Optional[int] = None
    period: DateFilter = DateFilter.ALL
    custom_date: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> "ReportFilter":
        """Build from request query args; unknown values fall back to defaults."""
        employee_s = (args.get("employee_id") or "").strip()
        employee_id = int(employee_s) if employee_s.isdecimal() else None

        try:
            period = DateFilter(args.get("period") or DateFilter.ALL.value)
        except ValueError:
            period = DateFilter.ALL

        custom_date = (args.get("date") or "").strip() or None
        return cls(employee_id=employee_id, period=period, custom_date=custom_date)

    def to_args(self) -> dict:
        out = {"period": self.period.value}
        if self.employee_id is not None:
            out["employee_id"] = self.employee_id
        if self.custom_date:
            out["date"] = self.custom_date
        return out
