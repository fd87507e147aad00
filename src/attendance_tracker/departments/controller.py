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

    @app.route("/api/department/create-department", methods=["POST"], endpoint="create_department")
    @admin_only
    def create_department():
        try:
            return respond(container.department_service.create_department(json_body().get("departmentName")))
        except Exception as e:
            logger.exception("Unhandled error in create_department")
            return error_response(str(e), 500)

    @app.route("/api/department/get-all-departments", methods=["GET"], endpoint="get_all_departments")
    @admin_or_hr
    def get_all_departments():
        try:
            return respond(container.department_service.get_all_departments())
        except Exception as e:
            logger.exception("Unhandled error in get_all_departments")
            return error_response(str(e), 500)

    @app.route("/api/department/get-department/<department_id>", methods=["GET"], endpoint="get_department")
    @admin_or_hr
    def get_department(department_id: str):
        try:
            return respond(container.department_service.get_department_by_id(department_id))
        except Exception as e:
            logger.exception("Unhandled error in get_department")
            return error_response(str(e), 500)

    @app.route("/api/department/update-department/<department_id>", methods=["PUT"], endpoint="update_department")
    @admin_only
    def update_department(department_id: str):
        try:
            name = json_body().get("departmentName")
            return respond(container.department_service.update_department(department_id, name))
        except Exception as e:
            logger.exception("Unhandled error in update_department")
            return error_response(str(e), 500)

    @app.route("/api/department/delete-department/<department_id>", methods=["DELETE"], endpoint="delete_department")
    @admin_only
    def delete_department(department_id: str):
        try:
            return respond(container.department_service.delete_department(department_id))
        except Exception as e:
            logger.exception("Unhandled error in delete_department")
            return error_response(str(e), 500)
