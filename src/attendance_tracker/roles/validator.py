from __future__ import annotations

from typing import Optional

from ..common.validators import is_blank
from .repository import RoleRepository


class RoleValidator:
    def __init__(self, roles: RoleRepository):
        self._roles = roles

    def validate_create(self, name: Optional[str]) -> list[str]:
        errors: list[str] = []
        if is_blank(name):
            errors.append("Role name is required.")
        elif self._roles.name_taken(name.strip()):
            errors.append("Duplicate role found.")
        return errors

    def validate_exists(self, role_id: Optional[str]) -> list[str]:
        if is_blank(role_id) or not self._roles.exists(role_id):
            return ["Role not found."]
        return []

    def validate_update(self, role_id: Optional[str], name: Optional[str]) -> list[str]:
        errors = self.validate_exists(role_id)
        if is_blank(name):
            errors.append("Role name is required.")
        elif self._roles.name_taken(name.strip(), exclude_id=role_id):
            errors.append("Duplicate role found.")
        return errors
