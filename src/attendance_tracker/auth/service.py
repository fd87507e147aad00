from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..core.responses import ServiceResponse
from ..employees.model import NewEmployee
from ..employees.service import EmployeeService
from .tokens import TokenService
from .validator import AuthValidator

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in with email/password and self-register."""

    def __init__(self, employees: EmployeeService, validator: AuthValidator, tokens: TokenService):
        self._employees = employees
        self._validator = validator
        self._tokens = tokens

    def login(self, email: Optional[str], password: Optional[str]) -> ServiceResponse[Dict[str, Any]]:
        try:
            errors = self._validator.validate_login(email, password)
            if errors:
                response = ServiceResponse.invalid(errors)
                logger.warning(response.message)
                return response

            employee = self._employees.get_employee_by_email(email).result
            token = self._tokens.issue(
                employee_id=employee.employee_id,
                email=employee.email,
                name=employee.name,
                role=employee.role_name or "",
            )

            logger.info("User logged in successfully.")
            return ServiceResponse.ok(
                "User logged in successfully.",
                {
                    "token": token,
                    "employee_id": employee.employee_id,
                    "name": employee.name,
                    "email": employee.email,
                    "role": employee.role_name,
                },
            )
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def register(self, request: NewEmployee) -> ServiceResponse[str]:
        return self._employees.create_employee(request)
