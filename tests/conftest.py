from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from time_tracker.container import assemble_container
from time_tracker.core.enums import LogType
from time_tracker.employees.model import Employee
from time_tracker.main import create_app
from time_tracker.realtime.feed import ChangeFeed
from time_tracker.time_logs.model import TimeLog

ADMIN_EMAIL = "admin@test.local"
ADMIN_PASSWORD = "admin-pass"


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._rows: dict[int, Employee] = {e.id: e for e in employees}
        self._id = max(self._rows, default=0)

    def list_all(self):
        return [self._rows[k] for k in sorted(self._rows)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def get_by_email(self, email: str) -> Optional[Employee]:
        for e in self.list_all():
            if e.email == email:
                return e
        return None

    def create(self, *, name: str, email: str, department: str) -> int:
        self._id += 1
        self._rows[self._id] = Employee(id=self._id, name=name, email=email, department=department)
        return self._id

    def delete_by_id(self, employee_id: int) -> bool:
        return self._rows.pop(int(employee_id), None) is not None


class InMemoryTimeLogs:
    def __init__(self, logs=()):
        self._rows: list[TimeLog] = list(logs)
        self._id = max((log.id for log in self._rows), default=0)

    def list_all(self):
        return list(self._rows)

    def list_for_date(self, work_date: str, *, employee_id=None):
        return [
            log
            for log in self._rows
            if log.date == work_date and (employee_id is None or log.employee_id == employee_id)
        ]

    def create(self, *, employee_id, employee_name, log_type, timestamp, work_date) -> int:
        self._id += 1
        self._rows.append(
            TimeLog(
                id=self._id,
                employee_id=employee_id,
                employee_name=employee_name,
                type=log_type,
                timestamp=timestamp,
                date=work_date,
            )
        )
        return self._id


def _make_log(log_id: int, log_type: LogType, timestamp: str, day: str, *, employee_id: int = 1, name: str = "Alice"):
    return TimeLog(
        id=log_id,
        employee_id=employee_id,
        employee_name=name,
        type=log_type,
        timestamp=timestamp,
        date=day,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 17, 9, 5, 3)


@pytest.fixture
def alice() -> Employee:
    return Employee(id=1, name="Alice", email="alice@example.com", department="Engineering")


@pytest.fixture
def bob() -> Employee:
    return Employee(id=2, name="Bob", email="bob@example.com", department="")


@pytest.fixture
def employees_repo(alice, bob) -> InMemoryEmployees:
    return InMemoryEmployees([alice, bob])


@pytest.fixture
def time_logs_repo() -> InMemoryTimeLogs:
    return InMemoryTimeLogs()


@pytest.fixture
def feed() -> ChangeFeed:
    return ChangeFeed(history_size=50)


@pytest.fixture
def container(employees_repo, time_logs_repo, feed):
    return assemble_container(
        employees_repo=employees_repo,
        time_logs_repo=time_logs_repo,
        admin_email=ADMIN_EMAIL,
        admin_password=ADMIN_PASSWORD,
        change_feed=feed,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(client):
    client.post("/", data={"mode": "admin", "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    return client


@pytest.fixture
def employee_client(client, alice):
    client.post("/", data={"mode": "employee", "email": alice.email})
    return client


@pytest.fixture
def make_log():
    return _make_log
