from __future__ import annotations

import logging

from flask import Flask

from ..auth.guards import roles_required
from ..common.datetime_utils import now_local, parse_iso_datetime
from ..common.http import csv_attachment, error_response, json_body, query_datetime, respond
from ..container import Container
from ..core.constants import NO_RECORDS_MESSAGE
from ..core.enums import RoleName
from .model import EmployeeChanges, NewEmployee

logger = logging.getLogger(__name__)


def new_employee_from(body: dict) -> NewEmployee:
    return NewEmployee(
        name=body.get("name"),
        email=body.get("email"),
        password=body.get("password"),
        join_date=parse_iso_datetime(body.get("joinDate")),
        department_id=body.get("departmentId"),
        role_id=body.get("roleId"),
    )


def register(app: Flask, container: Container) -> None:
    admin_only = roles_required(container.token_service, RoleName.ADMIN)
    admin_or_hr = roles_required(container.token_service, RoleName.ADMIN, RoleName.HR)
    any_staff = roles_required(container.token_service, RoleName.ADMIN, RoleName.HR, RoleName.EMPLOYEE)

    @app.route("/api/employee/create-employee", methods=["POST"], endpoint="create_employee")
    @admin_only
    def create_employee():
        try:
            return respond(container.employee_service.create_employee(new_employee_from(json_body())))
        except Exception as e:
            logger.exception("Unhandled error in create_employee")
            return error_response(str(e), 500)

    @app.route("/api/employee/get-all-employees", methods=["GET"], endpoint="get_all_employees")
    @admin_or_hr
    def get_all_employees():
        try:
            return respond(container.employee_service.get_all_employees())
        except Exception as e:
            logger.exception("Unhandled error in get_all_employees")
            return error_response(str(e), 500)

    @app.route("/api/employee/get-employee/<employee_id>", methods=["GET"], endpoint="get_employee")
    @admin_or_hr
    def get_employee(employee_id: str):
        try:
            return respond(container.employee_service.get_employee_by_id(employee_id))
        except Exception as e:
            logger.exception("Unhandled error in get_employee")
            return error_response(str(e), 500)

    @app.route("/api/employee/update-employee/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @admin_only
    def update_employee(employee_id: str):
        try:
            body = json_body()
            changes = EmployeeChanges(
                name=body.get("name"),
                email=body.get("email"),
                department_id=body.get("departmentId"),
                role_id=body.get("roleId"),
            )
            return respond(container.employee_service.update_employee(employee_id, changes))
        except Exception as e:
            logger.exception("Unhandled error in update_employee")
            return error_response(str(e), 500)

    @app.route("/api/employee/delete-employee/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_only
    def delete_employee(employee_id: str):
        try:
            return respond(container.employee_service.delete_employee(employee_id))
        except Exception as e:
            logger.exception("Unhandled error in delete_employee")
            return error_response(str(e), 500)

    @app.route("/api/employee/<employee_id>/attendance", methods=["GET"], endpoint="employee_attendance_history")
    @any_staff
    def employee_attendance_history(employee_id: str):
        try:
            return respond(
                container.employee_service.get_employee_attendance_history(
                    employee_id, query_datetime("fromDate"), query_datetime("toDate")
                )
            )
        except Exception as e:
            logger.exception("Unhandled error in employee_attendance_history")
            return error_response(str(e), 500)

    @app.route(
        "/api/employee/<employee_id>/attendance/download",
        methods=["GET"],
        endpoint="download_employee_attendance_history",
    )
    @any_staff
    def download_employee_attendance_history(employee_id: str):
        try:
            data = container.attendance_service.generate_employee_history_csv(
                employee_id, query_datetime("fromDate"), query_datetime("toDate")
            )
            if not data:
                return error_response(NO_RECORDS_MESSAGE, 404)
            return csv_attachment(data, f"AttendanceHistory_{employee_id}_{now_local():%Y%m%d}.csv")
        except Exception as e:
            logger.exception("Unhandled error in download_employee_attendance_history")
            return error_response(str(e), 500)
