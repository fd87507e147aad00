from __future__ import annotations

from datetime import datetime


class DomainError(Exception):
    """Base exception for business rule violations."""


class AuthenticationError(DomainError):
    """Raised when login credentials or a bearer token are invalid."""


class DuplicateAttendanceError(DomainError):
    """Raised by storage when an employee already has attendance for that day."""

    def __init__(self, employee_id: str, attendance_date: datetime):
        super().__init__(f"Attendance for employee {employee_id} on {attendance_date:%Y-%m-%d} already exists.")
        self.employee_id = employee_id
        self.attendance_date = attendance_date
