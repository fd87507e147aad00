from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Closed set of attendance states stored per employee and day."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    ON_LEAVE = "ON_LEAVE"

    @classmethod
    def parse(cls, value) -> Optional["AttendanceStatus"]:
        """Accept a member, or its value in any case ("Present", "on_leave"). None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


class RoleName(str, Enum):
    """Role names checked by the API authorization guard."""

    ADMIN = "Admin"
    HR = "HR"
    EMPLOYEE = "Employee"
