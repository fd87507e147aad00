from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, exists, fetchall, fetchone
from .model import Department
from .repository import DepartmentRepository


def _row_to_department(r: dict) -> Department:
    return Department(
        department_id=r["department_id"],
        name=r["name"],
        created_date=r["created_date"],
        updated_date=r["updated_date"],
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, name, created_date, updated_date FROM departments ORDER BY name")
            return [_row_to_department(r) for r in fetchall(cur)]

    def get_by_id(self, department_id: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_id, name, created_date, updated_date FROM departments WHERE department_id=%s",
                (department_id,),
            )
            r = fetchone(cur)
            return _row_to_department(r) if r else None

    def get_by_name(self, name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_id, name, created_date, updated_date FROM departments WHERE name=%s",
                (name,),
            )
            r = fetchone(cur)
            return _row_to_department(r) if r else None

    def exists(self, department_id: str) -> bool:
        return exists(self._conn_factory, "SELECT 1 FROM departments WHERE department_id=%s LIMIT 1", (department_id,))

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        if exclude_id:
            return exists(
                self._conn_factory,
                "SELECT 1 FROM departments WHERE name=%s AND department_id<>%s LIMIT 1",
                (name, exclude_id),
            )
        return exists(self._conn_factory, "SELECT 1 FROM departments WHERE name=%s LIMIT 1", (name,))

    def create(self, department: Department) -> Department:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO departments(department_id, name, created_date, updated_date)
                VALUES(%s,%s,%s,%s)
                """,
                (department.department_id, department.name, department.created_date, department.updated_date),
            )
        return department

    def update(self, department: Department) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE departments SET name=%s, updated_date=%s WHERE department_id=%s",
                (department.name, department.updated_date, department.department_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, department_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM departments WHERE department_id=%s", (department_id,))
            return cur.rowcount > 0
