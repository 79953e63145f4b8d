from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        department=row.get("department") or "",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name, email, department FROM employees ORDER BY id")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, name, email, department FROM employees WHERE id=%s",
                (int(employee_id),),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, email, department
                FROM employees
                WHERE email = %s COLLATE utf8mb4_bin
                ORDER BY id
                LIMIT 1
                """,
                (email,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, *, name: str, email: str, department: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(name, email, department) VALUES(%s,%s,%s)",
                (name, email, department),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
