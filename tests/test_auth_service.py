from __future__ import annotations

import pytest

from time_tracker.auth.service import AuthService, SessionIdentity
from time_tracker.core.enums import Role
from time_tracker.core.exceptions import AuthenticationError


@pytest.fixture
def auth(employees_repo):
    return AuthService(employees_repo, admin_email="boss@corp.test", admin_password="s3cret")


def test_admin_login_exact_pair(auth):
    identity = auth.login("boss@corp.test", "s3cret", as_admin=True)

    assert identity.is_admin
    assert identity.employee is None


@pytest.mark.parametrize(
    "email, password",
    [
        ("boss@corp.test", "wrong"),
        ("Boss@corp.test", "s3cret"),
        ("boss@corp.test ", "s3cret"),
        ("other@corp.test", "s3cret"),
        ("", ""),
    ],
)
def test_admin_login_rejects_anything_else(auth, email, password):
    with pytest.raises(AuthenticationError, match="Invalid admin email or password"):
        auth.login_admin(email, password)


def test_employee_login_by_email(auth, alice):
    identity = auth.login(alice.email, "", as_admin=False)

    assert identity.role == Role.EMPLOYEE
    assert identity.employee == alice


def test_employee_login_unknown_email(auth):
    with pytest.raises(AuthenticationError, match="Employee not found"):
        auth.login_employee("nobody@example.com")


def test_admin_credentials_do_not_log_in_as_employee(auth):
    with pytest.raises(AuthenticationError):
        auth.login("boss@corp.test", "s3cret", as_admin=False)


def test_session_round_trip(alice):
    identity = SessionIdentity(role=Role.EMPLOYEE, employee=alice)

    assert SessionIdentity.from_session(identity.to_session()) == identity
    assert SessionIdentity.from_session({"role": "admin", "employee": None}).is_admin
    assert SessionIdentity.from_session({"role": "employee"}) is None
    assert SessionIdentity.from_session({"role": "root"}) is None
    assert SessionIdentity.from_session(None) is None
