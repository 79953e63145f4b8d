from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LogType


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: one append-only time-tracking event.

    `timestamp` is the 12-hour clock string shown to users ('09:05:03 AM'),
    `date` the ISO day it was logged on.
    """

    id: int
    employee_id: int
    employee_name: str
    type: LogType
    timestamp: str
    date: str

    @property
    def label(self) -> str:
        return self.type.label

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "type": self.type.value,
            "timestamp": self.timestamp,
            "date": self.date,
        }
