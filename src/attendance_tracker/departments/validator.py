from __future__ import annotations

from typing import Optional

from ..common.validators import is_blank
from .repository import DepartmentRepository


class DepartmentValidator:
    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def validate_create(self, name: Optional[str]) -> list[str]:
        errors: list[str] = []
        if is_blank(name):
            errors.append("Department name is required.")
        elif self._departments.name_taken(name.strip()):
            errors.append("Duplicate department found.")
        return errors

    def validate_exists(self, department_id: Optional[str]) -> list[str]:
        if is_blank(department_id) or not self._departments.exists(department_id):
            return ["Department not found."]
        return []

    def validate_update(self, department_id: Optional[str], name: Optional[str]) -> list[str]:
        errors = self.validate_exists(department_id)
        if is_blank(name):
            errors.append("Department name is required.")
        elif self._departments.name_taken(name.strip(), exclude_id=department_id):
            errors.append("Duplicate department found.")
        return errors
