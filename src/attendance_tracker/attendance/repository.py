from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    Report queries return records with ``employee_name`` / ``department_name``
    filled in, newest first.
    """

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        """Insert once. Raises DuplicateAttendanceError if the employee already has a row that day."""
        raise NotImplementedError

    def exists_for_employee_on(self, employee_id: str, day: date) -> bool:
        raise NotImplementedError

    def query_by_department_and_date(self, department_id: str, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def query_by_employee_and_range(
        self,
        employee_id: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Both bounds inclusive, compared on the date part only."""
        raise NotImplementedError


class EmployeeLookup(Protocol):
    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError


class DepartmentLookup(Protocol):
    def exists(self, department_id: str) -> bool:
        raise NotImplementedError
