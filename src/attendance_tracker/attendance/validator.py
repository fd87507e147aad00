from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_date
from ..common.validators import is_blank
from ..core.enums import AttendanceStatus
from .model import NewAttendance
from .repository import AttendanceRepository, DepartmentLookup, EmployeeLookup


def already_marked_message(attendance_date: datetime) -> str:
    return f"Attendance already marked for this employee for date {as_date(attendance_date):%Y-%m-%d}."


class AttendanceValidator:
    """Business rules for attendance writes and report queries.

    Every rule is evaluated so one response can list all problems at once.
    """

    def __init__(self, attendances: AttendanceRepository, employees: EmployeeLookup, departments: DepartmentLookup):
        self._attendances = attendances
        self._employees = employees
        self._departments = departments

    def validate_create(self, request: NewAttendance) -> list[str]:
        errors: list[str] = []

        if is_blank(request.employee_id):
            errors.append("EmployeeId is required.")
        elif not self._employees.exists(request.employee_id):
            errors.append("Employee not found.")

        if request.attendance_date is None:
            errors.append("AttendanceDate is required.")

        if not isinstance(request.attendance_status, AttendanceStatus):
            errors.append("Invalid AttendanceStatus.")

        if not is_blank(request.employee_id) and request.attendance_date is not None:
            if self._attendances.exists_for_employee_on(request.employee_id, as_date(request.attendance_date)):
                errors.append(already_marked_message(request.attendance_date))

        return errors

    def validate_summary_query(self, department_id: Optional[str], day: Optional[datetime]) -> list[str]:
        errors: list[str] = []

        if is_blank(department_id):
            errors.append("Department Id is required.")
        elif not self._departments.exists(department_id):
            errors.append("Department not found.")

        if day is None:
            errors.append("Date is required.")

        return errors

    def validate_employee_exists(self, employee_id: Optional[str]) -> list[str]:
        if is_blank(employee_id) or not self._employees.exists(employee_id):
            return ["Employee not found."]
        return []
