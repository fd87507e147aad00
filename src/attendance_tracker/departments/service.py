from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.responses import ServiceResponse
from .model import Department
from .repository import DepartmentRepository
from .validator import DepartmentValidator

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments (admin)."""

    def __init__(self, departments: DepartmentRepository, validator: Optional[DepartmentValidator] = None):
        self._departments = departments
        self._validator = validator or DepartmentValidator(departments)

    def _rejected(self, errors: list[str]) -> ServiceResponse:
        response = ServiceResponse.invalid(errors)
        logger.warning(response.message)
        return response

    def create_department(self, name: Optional[str]) -> ServiceResponse[str]:
        try:
            errors = self._validator.validate_create(name)
            if errors:
                return self._rejected(errors)

            now = now_local()
            department = Department(department_id=str(uuid.uuid4()), name=name.strip(), created_date=now, updated_date=now)
            created = self._departments.create(department)

            logger.info("Department created successfully.")
            return ServiceResponse.ok("Department created successfully.", created.department_id)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_all_departments(self) -> ServiceResponse[Sequence[Department]]:
        try:
            departments = list(self._departments.list_all())
            logger.info("Departments retrieved successfully.")
            return ServiceResponse.ok("Departments retrieved successfully.", departments)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_department_by_id(self, department_id: str) -> ServiceResponse[Department]:
        try:
            errors = self._validator.validate_exists(department_id)
            if errors:
                return self._rejected(errors)

            department = self._departments.get_by_id(department_id)
            logger.info("Department retrieved successfully.")
            return ServiceResponse.ok("Department retrieved successfully.", department)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def update_department(self, department_id: str, name: Optional[str]) -> ServiceResponse[Department]:
        try:
            errors = self._validator.validate_update(department_id, name)
            if errors:
                return self._rejected(errors)

            existing = self._departments.get_by_id(department_id)
            updated = replace(existing, name=name.strip(), updated_date=now_local())
            self._departments.update(updated)

            logger.info("Department updated successfully.")
            return ServiceResponse.ok("Department updated successfully.", updated)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def delete_department(self, department_id: str) -> ServiceResponse[None]:
        try:
            errors = self._validator.validate_exists(department_id)
            if errors:
                return self._rejected(errors)

            self._departments.delete_by_id(department_id)
            logger.info("Department deleted successfully.")
            return ServiceResponse.ok("Department deleted successfully.")
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)
