from __future__ import annotations

import csv
import io
from typing import Iterable, Optional

from ..core.constants import ALL_EMPLOYEES_LABEL, CSV_HEADER, MISSING_PLACEHOLDER
from .model import DailyReport


def _or_placeholder(value: Optional[str]) -> str:
    return value or MISSING_PLACEHOLDER


def write_reports_csv(reports: Iterable[DailyReport], *, employee_name: Optional[str] = None) -> str:
    """Flatten daily reports into CSV text, one line per date."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADER)

    who = employee_name or ALL_EMPLOYEES_LABEL
    for r in reports:
        writer.writerow(
            [
                r.display_date,
                who,
                _or_placeholder(r.check_in),
                _or_placeholder(r.break_start),
                _or_placeholder(r.break_end),
                _or_placeholder(r.check_out),
                _or_placeholder(r.total_hours),
                _or_placeholder(r.break_duration),
            ]
        )
    return out.getvalue()
