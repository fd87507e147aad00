from __future__ import annotations

import logging

from flask import Flask

from ..auth.guards import roles_required
from ..common.http import error_response, json_body, respond
from ..container import Container
from ..core.enums import RoleName

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    admin_only = roles_required(container.token_service, RoleName.ADMIN)
    admin_or_hr = roles_required(container.token_service, RoleName.ADMIN, RoleName.HR)

    @app.route("/api/role/create-role", methods=["POST"], endpoint="create_role")
    @admin_only
    def create_role():
        try:
            return respond(container.role_service.create_role(json_body().get("roleName")))
        except Exception as e:
            logger.exception("Unhandled error in create_role")
            return error_response(str(e), 500)

    @app.route("/api/role/get-all-roles", methods=["GET"], endpoint="get_all_roles")
    @admin_or_hr
    def get_all_roles():
        try:
            return respond(container.role_service.get_all_roles())
        except Exception as e:
            logger.exception("Unhandled error in get_all_roles")
            return error_response(str(e), 500)

    @app.route("/api/role/get-role/<role_id>", methods=["GET"], endpoint="get_role")
    @admin_or_hr
    def get_role(role_id: str):
        try:
            return respond(container.role_service.get_role_by_id(role_id))
        except Exception as e:
            logger.exception("Unhandled error in get_role")
            return error_response(str(e), 500)

    @app.route("/api/role/update-role/<role_id>", methods=["PUT"], endpoint="update_role")
    @admin_only
    def update_role(role_id: str):
        try:
            return respond(container.role_service.update_role(role_id, json_body().get("roleName")))
        except Exception as e:
            logger.exception("Unhandled error in update_role")
            return error_response(str(e), 500)

    @app.route("/api/role/delete-role/<role_id>", methods=["DELETE"], endpoint="delete_role")
    @admin_only
    def delete_role(role_id: str):
        try:
            return respond(container.role_service.delete_role(role_id))
        except Exception as e:
            logger.exception("Unhandled error in delete_role")
            return error_response(str(e), 500)
