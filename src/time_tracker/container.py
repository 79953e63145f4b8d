from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.service import AuthService
from .core.constants import DEFAULT_CHANGE_FEED_HISTORY
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .realtime.feed import ChangeFeed
from .reports.service import ReportService
from .time_logs.mysql_time_log_repository import MySQLTimeLogRepository
from .time_logs.repository import TimeLogRepository
from .time_logs.service import TimeTrackingService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    time_logs_repo: TimeLogRepository
    change_feed: ChangeFeed

    auth_service: AuthService
    employee_service: EmployeeService
    time_tracking_service: TimeTrackingService
    report_service: ReportService

    conn: Optional[DatabaseConnection] = None


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    time_logs_repo: TimeLogRepository,
    admin_email: str,
    admin_password: str,
    change_feed: Optional[ChangeFeed] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    feed = change_feed or ChangeFeed()

    return Container(
        employees_repo=employees_repo,
        time_logs_repo=time_logs_repo,
        change_feed=feed,
        auth_service=AuthService(employees_repo, admin_email=admin_email, admin_password=admin_password),
        employee_service=EmployeeService(employees_repo, feed),
        time_tracking_service=TimeTrackingService(time_logs_repo, employees_repo, feed),
        report_service=ReportService(time_logs_repo, employees_repo),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    admin_email: str,
    admin_password: str,
    change_feed_history: int = DEFAULT_CHANGE_FEED_HISTORY,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        time_logs_repo=MySQLTimeLogRepository(conn),
        admin_email=admin_email,
        admin_password=admin_password,
        change_feed=ChangeFeed(history_size=change_feed_history),
        conn=conn,
    )
