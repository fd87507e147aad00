from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def get_by_id(self, department_id: str) -> Optional[Department]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Department]:
        raise NotImplementedError

    def exists(self, department_id: str) -> bool:
        raise NotImplementedError

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        raise NotImplementedError

    def create(self, department: Department) -> Department:
        raise NotImplementedError

    def update(self, department: Department) -> bool:
        raise NotImplementedError

    def delete_by_id(self, department_id: str) -> bool:
        raise NotImplementedError
