"""Daily report aggregation.

Reduces the raw time-log stream into one row per date. Later events of the
same type overwrite earlier ones on that date; durations are computed by
re-reading the clock strings onto a shared reference day.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional

from ..common.datetime_utils import parse_clock
from ..core.constants import WEEK_FILTER_DAYS
from ..core.enums import DateFilter, LogType
from ..time_logs.model import TimeLog
from .model import DailyReport, ReportFilter

_FIELD_BY_TYPE = {
    LogType.CHECK_IN: "check_in",
    LogType.BREAK_START: "break_start",
    LogType.BREAK_END: "break_end",
    LogType.CHECK_OUT: "check_out",
}


def filter_logs(logs: Iterable[TimeLog], flt: ReportFilter, *, today: date) -> List[TimeLog]:
    out = list(logs)

    if flt.employee_id is not None:
        out = [log for log in out if log.employee_id == flt.employee_id]

    today_s = today.isoformat()
    if flt.period == DateFilter.TODAY:
        out = [log for log in out if log.date == today_s]
    elif flt.period == DateFilter.WEEK:
        week_ago = (today - timedelta(days=WEEK_FILTER_DAYS)).isoformat()
        out = [log for log in out if log.date >= week_ago]
    elif flt.period == DateFilter.CUSTOM and flt.custom_date:
        out = [log for log in out if log.date == flt.custom_date]

    return out


def elapsed_seconds(start: Optional[str], end: Optional[str]) -> Optional[int]:
    """Seconds from `start` to `end` clock strings on the same day.

    None when either side is missing or unreadable, or when `end` is earlier
    than `start`.
    """
    if not start or not end:
        return None
    t0, t1 = parse_clock(start), parse_clock(end)
    if t0 is None or t1 is None:
        return None

    diff = (t1.hour * 3600 + t1.minute * 60 + t1.second) - (t0.hour * 3600 + t0.minute * 60 + t0.second)
    if diff < 0:
        return None
    return diff


def format_total_hours(seconds: int) -> str:
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"


def format_break_duration(seconds: int) -> str:
    return f"{seconds // 60}m"


def build_daily_reports(logs: Iterable[TimeLog]) -> List[DailyReport]:
    by_date: Dict[str, DailyReport] = {}

    for log in logs:
        report = by_date.get(log.date)
        if report is None:
            report = DailyReport(date=log.date)
            by_date[log.date] = report
        setattr(report, _FIELD_BY_TYPE[log.type], log.timestamp)

    for report in by_date.values():
        worked = elapsed_seconds(report.check_in, report.check_out)
        if worked is not None:
            report.total_hours = format_total_hours(worked)

        paused = elapsed_seconds(report.break_start, report.break_end)
        if paused is not None:
            report.break_duration = format_break_duration(paused)

    return sorted(by_date.values(), key=lambda r: r.date, reverse=True)


def generate_daily_reports(logs: Iterable[TimeLog], flt: ReportFilter, *, today: date) -> List[DailyReport]:
    return build_daily_reports(filter_logs(logs, flt, today=today))
