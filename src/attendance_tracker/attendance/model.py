from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One (employee, day) observation.

    ``attendance_date`` keeps whatever time-of-day the caller sent; all
    comparisons use the date part only. ``employee_name`` and
    ``department_name`` are resolved by report queries.
    """

    attendance_id: str
    employee_id: str
    attendance_date: datetime
    attendance_status: AttendanceStatus
    created_date: datetime
    updated_date: datetime
    employee_name: Optional[str] = None
    department_name: Optional[str] = None


@dataclass(frozen=True)
class NewAttendance:
    employee_id: Optional[str]
    attendance_date: Optional[datetime]
    attendance_status: Optional[AttendanceStatus]
