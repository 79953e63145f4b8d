from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..time_logs.repository import TimeLogRepository
from .aggregator import generate_daily_reports
from .csv_export import write_reports_csv
from .model import DailyReport, ReportFilter


@dataclass(frozen=True)
class ReportData:
    reports: list[DailyReport]
    employee: Optional[Employee]
    filter: ReportFilter


class ReportService:
    def __init__(self, time_logs: TimeLogRepository, employees: EmployeeRepository):
        self._time_logs = time_logs
        self._employees = employees

    def build_daily_report(self, flt: ReportFilter, *, today: Optional[date] = None) -> ReportData:
        today = today or now_local().date()
        employee = self._employees.get_by_id(flt.employee_id) if flt.employee_id is not None else None
        reports = generate_daily_reports(self._time_logs.list_all(), flt, today=today)
        return ReportData(reports=reports, employee=employee, filter=flt)

    def export_csv(self, flt: ReportFilter, *, today: Optional[date] = None) -> tuple[str, str]:
        """Return (filename, csv_text) for the filtered report."""
        today = today or now_local().date()
        data = self.build_daily_report(flt, today=today)
        text = write_reports_csv(data.reports, employee_name=data.employee.name if data.employee else None)
        return f"attendance-report-{today.isoformat()}.csv", text
