from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import LogType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import TimeLog
from .repository import TimeLogRepository


def _to_time_log(row: dict) -> TimeLog:
    return TimeLog(
        id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        employee_name=row["employee_name"],
        type=LogType(row["type"]),
        timestamp=row["timestamp"],
        date=row["date"],
    )


class MySQLTimeLogRepository(TimeLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[TimeLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, employee_name, type, timestamp, date
                FROM time_logs
                ORDER BY id
                """
            )
            return [_to_time_log(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: str, *, employee_id: Optional[int] = None) -> Sequence[TimeLog]:
        clauses = ["date=%s"]
        params: list[object] = [work_date]
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, employee_name, type, timestamp, date
                FROM time_logs
                WHERE {where}
                ORDER BY id
                """,
                tuple(params),
            )
            return [_to_time_log(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        employee_name: str,
        log_type: LogType,
        timestamp: str,
        work_date: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_logs(employee_id, employee_name, type, timestamp, date)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), employee_name, log_type.value, timestamp, work_date),
            )
            return int(cur.lastrowid)
