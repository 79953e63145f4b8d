from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_email, require_non_empty
from ..core.enums import ChangeType, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..realtime.feed import ChangeFeed
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee directory (admin)."""

    def __init__(self, employees: EmployeeRepository, feed: Optional[ChangeFeed] = None):
        self._employees = employees
        self._feed = feed

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def add_employee(self, *, current_role: Role, name: str, email: str, department: str = "") -> Employee:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can add employees")

        name = require_non_empty(name, "Name")
        email = require_email(email)
        department = (department or "").strip()

        if self._employees.get_by_email(email):
            raise ValidationError("An employee with this email already exists")

        new_id = self._employees.create(name=name, email=email, department=department)
        employee = Employee(id=new_id, name=name, email=email, department=department)
        logger.info("Added employee #%s (%s)", employee.id, employee.email)

        if self._feed:
            self._feed.publish("employees", ChangeType.INSERT, new=employee.to_dict())
        return employee

    def delete_employee(self, *, current_role: Role, employee_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete employees")

        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise ValidationError("Employee not found")

        if not self._employees.delete_by_id(employee_id):
            raise ValidationError("Failed to delete employee")
        logger.info("Deleted employee #%s (%s)", employee.id, employee.email)

        if self._feed:
            self._feed.publish("employees", ChangeType.DELETE, old=employee.to_dict())
