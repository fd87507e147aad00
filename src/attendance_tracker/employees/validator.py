from __future__ import annotations

from typing import Optional

from ..common.validators import is_blank
from ..departments.repository import DepartmentRepository
from ..roles.repository import RoleRepository
from .model import EmployeeChanges, NewEmployee
from .repository import EmployeeRepository


class EmployeeValidator:
    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository, roles: RoleRepository):
        self._employees = employees
        self._departments = departments
        self._roles = roles

    def _references(self, department_id: Optional[str], role_id: Optional[str]) -> list[str]:
        errors: list[str] = []
        if is_blank(department_id) or not self._departments.exists(department_id):
            errors.append("Department not found.")
        if is_blank(role_id) or not self._roles.exists(role_id):
            errors.append("Role not found.")
        return errors

    def _email_unique(self, email: Optional[str], *, exclude_id: Optional[str] = None) -> list[str]:
        if not is_blank(email) and self._employees.email_taken(email.strip(), exclude_id=exclude_id):
            return ["Duplicate email found."]
        return []

    def validate_create(self, request: NewEmployee) -> list[str]:
        errors: list[str] = []
        if is_blank(request.name):
            errors.append("Employee name is required.")
        if is_blank(request.email):
            errors.append("Employee email is required.")
        if is_blank(request.password):
            errors.append("Password is required.")
        errors.extend(self._references(request.department_id, request.role_id))
        errors.extend(self._email_unique(request.email))
        return errors

    def validate_update(self, employee_id: Optional[str], changes: EmployeeChanges) -> list[str]:
        errors = self.validate_exists(employee_id)
        if is_blank(changes.name):
            errors.append("Employee name is required.")
        if is_blank(changes.email):
            errors.append("Employee email is required.")
        errors.extend(self._references(changes.department_id, changes.role_id))
        errors.extend(self._email_unique(changes.email, exclude_id=employee_id))
        return errors

    def validate_exists(self, employee_id: Optional[str]) -> list[str]:
        if is_blank(employee_id) or not self._employees.exists(employee_id):
            return ["Employee not found."]
        return []

    def validate_email_exists(self, email: Optional[str]) -> list[str]:
        if is_blank(email) or self._employees.get_by_email(email.strip()) is None:
            return ["Employee not found."]
        return []
