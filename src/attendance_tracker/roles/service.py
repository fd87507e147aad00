from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.responses import ServiceResponse
from .model import Role
from .repository import RoleRepository
from .validator import RoleValidator

logger = logging.getLogger(__name__)


class RoleService:
    """Use case: manage roles (admin)."""

    def __init__(self, roles: RoleRepository, validator: Optional[RoleValidator] = None):
        self._roles = roles
        self._validator = validator or RoleValidator(roles)

    def _rejected(self, errors: list[str]) -> ServiceResponse:
        response = ServiceResponse.invalid(errors)
        logger.warning(response.message)
        return response

    def create_role(self, name: Optional[str]) -> ServiceResponse[str]:
        try:
            errors = self._validator.validate_create(name)
            if errors:
                return self._rejected(errors)

            now = now_local()
            role = Role(role_id=str(uuid.uuid4()), name=name.strip(), created_date=now, updated_date=now)
            created = self._roles.create(role)

            logger.info("Role created successfully.")
            return ServiceResponse.ok("Role created successfully.", created.role_id)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_all_roles(self) -> ServiceResponse[Sequence[Role]]:
        try:
            roles = list(self._roles.list_all())
            logger.info("Roles retrieved successfully.")
            return ServiceResponse.ok("Roles retrieved successfully.", roles)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_role_by_id(self, role_id: str) -> ServiceResponse[Role]:
        try:
            errors = self._validator.validate_exists(role_id)
            if errors:
                return self._rejected(errors)

            role = self._roles.get_by_id(role_id)
            logger.info("Role retrieved successfully.")
            return ServiceResponse.ok("Role retrieved successfully.", role)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def update_role(self, role_id: str, name: Optional[str]) -> ServiceResponse[Role]:
        try:
            errors = self._validator.validate_update(role_id, name)
            if errors:
                return self._rejected(errors)

            existing = self._roles.get_by_id(role_id)
            updated = replace(existing, name=name.strip(), updated_date=now_local())
            self._roles.update(updated)

            logger.info("Role updated successfully.")
            return ServiceResponse.ok("Role updated successfully.", updated)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def delete_role(self, role_id: str) -> ServiceResponse[None]:
        try:
            errors = self._validator.validate_exists(role_id)
            if errors:
                return self._rejected(errors)

            self._roles.delete_by_id(role_id)
            logger.info("Role deleted successfully.")
            return ServiceResponse.ok("Role deleted successfully.")
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)
