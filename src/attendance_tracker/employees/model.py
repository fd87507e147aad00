from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``role_name`` and ``department_name`` are filled in on reads that join
    the lookup tables; ``password_hash`` never leaves the API.
    """

    employee_id: str
    name: str
    email: str
    password_hash: str = field(repr=False, metadata={"json": False})
    join_date: Optional[datetime]
    department_id: str
    role_id: str
    created_date: datetime
    updated_date: datetime
    role_name: Optional[str] = None
    department_name: Optional[str] = None


@dataclass(frozen=True)
class NewEmployee:
    name: Optional[str]
    email: Optional[str]
    password: Optional[str]
    join_date: Optional[datetime]
    department_id: Optional[str]
    role_id: Optional[str]


@dataclass(frozen=True)
class EmployeeChanges:
    name: Optional[str]
    email: Optional[str]
    department_id: Optional[str]
    role_id: Optional[str]
