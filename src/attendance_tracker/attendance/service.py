from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_date, now_local
from ..common.validators import is_blank, join_errors
from ..core.exceptions import DuplicateAttendanceError
from ..core.responses import ServiceResponse
from .csv_export import render_attendance_csv
from .model import AttendanceRecord, NewAttendance
from .repository import AttendanceRepository, DepartmentLookup, EmployeeLookup
from .validator import AttendanceValidator, already_marked_message

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record daily attendance and report on it.

    JSON-shaped operations never raise; failures come back as a failed
    ``ServiceResponse``. The CSV operations return bytes and let errors
    propagate after logging them.
    """

    def __init__(
        self,
        attendances: AttendanceRepository,
        employees: EmployeeLookup,
        departments: DepartmentLookup,
        validator: Optional[AttendanceValidator] = None,
    ):
        self._attendances = attendances
        self._validator = validator or AttendanceValidator(attendances, employees, departments)

    def _rejected(self, errors: list[str]) -> ServiceResponse:
        response = ServiceResponse.invalid(errors)
        logger.warning(response.message)
        return response

    def create_attendance(self, request: NewAttendance) -> ServiceResponse[AttendanceRecord]:
        try:
            errors = self._validator.validate_create(request)
            if errors:
                return self._rejected(errors)

            now = now_local()
            record = AttendanceRecord(
                attendance_id=str(uuid.uuid4()),
                employee_id=request.employee_id,
                attendance_date=request.attendance_date,
                attendance_status=request.attendance_status,
                created_date=now,
                updated_date=now,
            )
            try:
                created = self._attendances.create(record)
            except DuplicateAttendanceError:
                # Lost the race with a concurrent request for the same day.
                return self._rejected([already_marked_message(request.attendance_date)])

            logger.info("Attendance created successfully.")
            return ServiceResponse.ok("Attendance created successfully.", created)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_summary_by_department(
        self, department_id: Optional[str], day: Optional[datetime]
    ) -> ServiceResponse[Sequence[AttendanceRecord]]:
        try:
            errors = self._validator.validate_summary_query(department_id, day)
            if errors:
                return self._rejected(errors)

            records = list(self._attendances.query_by_department_and_date(department_id, as_date(day)))
            logger.info("Attendance summary retrieved successfully.")
            return ServiceResponse.ok("Attendance summary retrieved successfully.", records)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def get_employee_history(
        self,
        employee_id: str,
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> ServiceResponse[Sequence[AttendanceRecord]]:
        try:
            records = list(self._history(employee_id, from_date, to_date))
            logger.info("Employee attendance history retrieved successfully.")
            return ServiceResponse.ok("Employee attendance history retrieved successfully.", records)
        except Exception as e:
            logger.exception("Error occurred: %s", e)
            return ServiceResponse.from_exception(e)

    def generate_summary_csv(self, department_id: Optional[str], day: Optional[datetime]) -> bytes:
        # Queried directly; an unknown department simply yields no rows.
        if is_blank(department_id) or day is None:
            return b""
        try:
            records = self._attendances.query_by_department_and_date(department_id, as_date(day))
            return render_attendance_csv(records)
        except Exception as e:
            logger.error("Error generating CSV: %s", e)
            raise

    def generate_employee_history_csv(
        self,
        employee_id: Optional[str],
        from_date: Optional[datetime] = None,
        to_date: Optional[datetime] = None,
    ) -> bytes:
        try:
            errors = self._validator.validate_employee_exists(employee_id)
            if errors:
                logger.warning(join_errors(errors))
                return b""

            return render_attendance_csv(self._history(employee_id, from_date, to_date))
        except Exception as e:
            logger.error("Error generating CSV: %s", e)
            raise

    def _history(self, employee_id, from_date, to_date) -> Sequence[AttendanceRecord]:
        return self._attendances.query_by_employee_and_range(
            employee_id,
            as_date(from_date) if from_date is not None else None,
            as_date(to_date) if to_date is not None else None,
        )
