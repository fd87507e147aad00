from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Role


class RoleRepository(Protocol):
    def list_all(self) -> Sequence[Role]:
        raise NotImplementedError

    def get_by_id(self, role_id: str) -> Optional[Role]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Role]:
        raise NotImplementedError

    def exists(self, role_id: str) -> bool:
        raise NotImplementedError

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        raise NotImplementedError

    def create(self, role: Role) -> Role:
        raise NotImplementedError

    def update(self, role: Role) -> bool:
        raise NotImplementedError

    def delete_by_id(self, role_id: str) -> bool:
        raise NotImplementedError
