from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, exists, fetchall, fetchone
from .model import Role
from .repository import RoleRepository


def _row_to_role(r: dict) -> Role:
    return Role(
        role_id=r["role_id"],
        name=r["name"],
        created_date=r["created_date"],
        updated_date=r["updated_date"],
    )


class MySQLRoleRepository(RoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, name, created_date, updated_date FROM roles ORDER BY name")
            return [_row_to_role(r) for r in fetchall(cur)]

    def get_by_id(self, role_id: str) -> Optional[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT role_id, name, created_date, updated_date FROM roles WHERE role_id=%s",
                (role_id,),
            )
            r = fetchone(cur)
            return _row_to_role(r) if r else None

    def get_by_name(self, name: str) -> Optional[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT role_id, name, created_date, updated_date FROM roles WHERE name=%s",
                (name,),
            )
            r = fetchone(cur)
            return _row_to_role(r) if r else None

    def exists(self, role_id: str) -> bool:
        return exists(self._conn_factory, "SELECT 1 FROM roles WHERE role_id=%s LIMIT 1", (role_id,))

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        if exclude_id:
            return exists(
                self._conn_factory,
                "SELECT 1 FROM roles WHERE name=%s AND role_id<>%s LIMIT 1",
                (name, exclude_id),
            )
        return exists(self._conn_factory, "SELECT 1 FROM roles WHERE name=%s LIMIT 1", (name,))

    def create(self, role: Role) -> Role:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO roles(role_id, name, created_date, updated_date)
                VALUES(%s,%s,%s,%s)
                """,
                (role.role_id, role.name, role.created_date, role.updated_date),
            )
        return role

    def update(self, role: Role) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE roles SET name=%s, updated_date=%s WHERE role_id=%s",
                (role.name, role.updated_date, role.role_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, role_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM roles WHERE role_id=%s", (role_id,))
            return cur.rowcount > 0
