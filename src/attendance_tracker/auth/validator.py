from __future__ import annotations

from typing import Optional

from werkzeug.security import check_password_hash

from ..common.validators import is_blank
from ..employees.repository import EmployeeRepository


class AuthValidator:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def validate_login(self, email: Optional[str], password: Optional[str]) -> list[str]:
        # One message for both cases so callers cannot probe which emails exist.
        if is_blank(email) or is_blank(password):
            return ["Invalid email or password."]
        employee = self._employees.get_by_email(email.strip())
        if employee is None or not check_password_hash(employee.password_hash, password):
            return ["Invalid email or password."]
        return []
