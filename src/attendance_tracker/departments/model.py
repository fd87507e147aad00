from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Department:
    department_id: str
    name: str
    created_date: datetime
    updated_date: datetime
