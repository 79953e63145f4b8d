from __future__ import annotations

import hmac
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class SessionIdentity:
    """What we store into the Flask session after login."""

    role: Role
    employee: Optional[Employee] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def to_session(self) -> dict:
        return {
            "role": self.role.value,
            "employee": self.employee.to_dict() if self.employee else None,
        }

    @classmethod
    def from_session(cls, data) -> Optional["SessionIdentity"]:
        if not data or "role" not in data:
            return None
        try:
            role = Role(data["role"])
        except ValueError:
            return None
        if role == Role.ADMIN:
            return cls(role=role)
        if not data.get("employee"):
            return None
        return cls(role=role, employee=Employee.from_dict(data["employee"]))


class AuthService:
    """Use case: sign in as the admin or as an employee.

    The admin is a single static credential pair from settings. Employees
    sign in by email alone; the email must belong to a directory entry.
    """

    def __init__(self, employees: EmployeeRepository, *, admin_email: str, admin_password: str):
        self._employees = employees
        self._admin_email = admin_email
        self._admin_password_hash = generate_password_hash(admin_password)

    def login_admin(self, email: str, password: str) -> SessionIdentity:
        email_ok = hmac.compare_digest((email or "").encode(), self._admin_email.encode())
        password_ok = check_password_hash(self._admin_password_hash, password or "")
        if not (email_ok and password_ok):
            raise AuthenticationError("Invalid admin email or password")
        return SessionIdentity(role=Role.ADMIN)

    def login_employee(self, email: str) -> SessionIdentity:
        employee = self._employees.get_by_email(email) if email else None
        if not employee:
            raise AuthenticationError("Employee not found. Please check your email.")
        return SessionIdentity(role=Role.EMPLOYEE, employee=employee)

    def login(self, email: str, password: str, *, as_admin: bool) -> SessionIdentity:
        if as_admin:
            return self.login_admin(email, password)
        return self.login_employee(email)
