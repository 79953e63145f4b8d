from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import LogType
from .model import TimeLog


class TimeLogRepository(Protocol):
    def list_all(self) -> Sequence[TimeLog]:
        """All logs in insertion order."""
        raise NotImplementedError

    def list_for_date(self, work_date: str, *, employee_id: Optional[int] = None) -> Sequence[TimeLog]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        log_type: LogType,
        timestamp: str,
        work_date: str,
    ) -> int:
        raise NotImplementedError
