from __future__ import annotations

import logging

from flask import Flask, request

from ..auth.guards import roles_required
from ..common.datetime_utils import parse_iso_datetime
from ..common.http import csv_attachment, error_response, json_body, query_datetime, respond
from ..container import Container
from ..core.constants import NO_RECORDS_MESSAGE
from ..core.enums import AttendanceStatus, RoleName
from .model import NewAttendance

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    admin_or_hr = roles_required(container.token_service, RoleName.ADMIN, RoleName.HR)

    @app.route("/api/attendance/create-attendance", methods=["POST"], endpoint="create_attendance")
    @admin_or_hr
    def create_attendance():
        try:
            body = json_body()
            new = NewAttendance(
                employee_id=body.get("employeeId"),
                attendance_date=parse_iso_datetime(body.get("attendanceDate")),
                attendance_status=AttendanceStatus.parse(body.get("attendanceStatus")),
            )
            return respond(container.attendance_service.create_attendance(new))
        except Exception as e:
            logger.exception("Unhandled error in create_attendance")
            return error_response(str(e), 500)

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="attendance_summary")
    @admin_or_hr
    def attendance_summary():
        try:
            return respond(
                container.attendance_service.get_summary_by_department(
                    request.args.get("departmentId"), query_datetime("date")
                )
            )
        except Exception as e:
            logger.exception("Unhandled error in attendance_summary")
            return error_response(str(e), 500)

    @app.route("/api/attendance/summary/download", methods=["GET"], endpoint="download_attendance_summary")
    @admin_or_hr
    def download_attendance_summary():
        department_id = request.args.get("departmentId")
        day = query_datetime("date")
        try:
            data = container.attendance_service.generate_summary_csv(department_id, day)
            if not data:
                return error_response(NO_RECORDS_MESSAGE, 404)
            return csv_attachment(data, f"AttendanceSummary_{department_id}_{day:%Y%m%d}.csv")
        except Exception as e:
            logger.exception("Unhandled error in download_attendance_summary")
            return error_response(str(e), 500)
