from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_clock, now_local, today_iso
from ..core.constants import RECENT_ACTIVITY_LIMIT
from ..core.enums import ChangeType, LogType
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..realtime.feed import ChangeFeed
from .model import TimeLog
from .repository import TimeLogRepository

logger = logging.getLogger(__name__)


class TimeTrackingService:
    def __init__(
        self,
        time_logs: TimeLogRepository,
        employees: EmployeeRepository,
        feed: Optional[ChangeFeed] = None,
    ):
        self._time_logs = time_logs
        self._employees = employees
        self._feed = feed

    def record(self, employee_id: Optional[int], log_type: LogType, *, now: Optional[datetime] = None) -> TimeLog:
        if not employee_id:
            raise ValidationError("Please select an employee")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise ValidationError("Employee not found")

        now = now or now_local()
        timestamp = format_clock(now)
        work_date = today_iso(now)

        log_id = self._time_logs.create(
            employee_id=employee.id,
            employee_name=employee.name,
            log_type=log_type,
            timestamp=timestamp,
            work_date=work_date,
        )
        log = TimeLog(
            id=log_id,
            employee_id=employee.id,
            employee_name=employee.name,
            type=log_type,
            timestamp=timestamp,
            date=work_date,
        )
        logger.info("%s logged %s at %s %s", employee.name, log_type.value, work_date, timestamp)

        if self._feed:
            self._feed.publish("time_logs", ChangeType.INSERT, new=log.to_dict())
        return log

    def today_activity(
        self,
        *,
        employee_id: Optional[int] = None,
        now: Optional[datetime] = None,
        limit: int = RECENT_ACTIVITY_LIMIT,
    ) -> Sequence[TimeLog]:
        """Today's logs, newest first.

        `employee_id` narrows to one employee's own logs (employee view);
        None shows everyone (admin view).
        """
        logs = self._time_logs.list_for_date(today_iso(now), employee_id=employee_id)
        return list(reversed(logs))[:limit]

    def all_logs(self) -> Sequence[TimeLog]:
        return self._time_logs.list_all()
