from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_local
from ..core.responses import ServiceResponse
from ..departments.repository import DepartmentRepository
from ..roles.repository import RoleRepository
from .model import Employee, EmployeeChanges, NewEmployee
from .repository import EmployeeRepository
from .validator import EmployeeValidator

if TYPE_CHECKING:
    from ..attendance.service import AttendanceService

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees and expose their attendance history."""

    def __init__(
        self,
        employees: EmployeeRepository,
        departments: DepartmentRepository,
        roles: RoleRepository,
        attendance: "AttendanceService",
        validator: Optional[EmployeeValidator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._validator = validator or EmployeeValidator(employees, departments, roles)

    def _rejected(self, errors: list[str]) -> ServiceResponse:
        response = ServiceResponse.invalid(errors)
        logger.warning(response.message)
        return response

    def create_employee(self, request: NewEmployee) -> ServiceResponse[str]:
        try:
            errors = self._validator.validate_create(request)
            if errors:
                return self._rejected(errors)

            now = now_local()
            employee = Employee(
                employee_id=str(uuid.uuid4()),
                name=request.name.strip(),
                email=request.email.strip(),
                password_hash=generate_password_hash(request.password),
                join_date=request.join_date or now,
                department_id=request.department_id,
                role_id=request.role_id,
                created_date=now,
                updated_date=now,
            )
            created = self._employees.create(employee)

            logger.info("Employee created successfully.")
            return ServiceResponse.ok("Employee created successfully.", created.employee_id)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_all_employees(self) -> ServiceResponse[Sequence[Employee]]:
        try:
            employees = list(self._employees.list_all())
            logger.info("Employees retrieved successfully.")
            return ServiceResponse.ok("Employees retrieved successfully.", employees)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_employee_by_id(self, employee_id: str) -> ServiceResponse[Employee]:
        try:
            errors = self._validator.validate_exists(employee_id)
            if errors:
                return self._rejected(errors)

            employee = self._employees.get_by_id(employee_id)
            logger.info("Employee retrieved successfully.")
            return ServiceResponse.ok("Employee retrieved successfully.", employee)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_employee_by_email(self, email: Optional[str]) -> ServiceResponse[Employee]:
        try:
            errors = self._validator.validate_email_exists(email)
            if errors:
                return self._rejected(errors)

            employee = self._employees.get_by_email(email.strip())
            logger.info("Employee retrieved successfully.")
            return ServiceResponse.ok("Employee retrieved successfully.", employee)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def update_employee(self, employee_id: str, changes: EmployeeChanges) -> ServiceResponse[Employee]:
        try:
            errors = self._validator.validate_update(employee_id, changes)
            if errors:
                return self._rejected(errors)

            existing = self._employees.get_by_id(employee_id)
            updated = replace(
                existing,
                name=changes.name.strip(),
                email=changes.email.strip(),
                department_id=changes.department_id,
                role_id=changes.role_id,
                updated_date=now_local(),
            )
            self._employees.update(updated)

            logger.info("Employee updated successfully.")
            return ServiceResponse.ok("Employee updated successfully.", updated)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def delete_employee(self, employee_id: str) -> ServiceResponse[None]:
        try:
            errors = self._validator.validate_exists(employee_id)
            if errors:
                return self._rejected(errors)

            self._employees.delete_by_id(employee_id)
            logger.info("Employee deleted successfully.")
            return ServiceResponse.ok("Employee deleted successfully.")
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_employee_attendance_history(
        self,
        employee_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> ServiceResponse:
        try:
            errors = self._validator.validate_exists(employee_id)
            if errors:
                return self._rejected(errors)

            return self._attendance.get_employee_history(employee_id, from_date, to_date)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)
