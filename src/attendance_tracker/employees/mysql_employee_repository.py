from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, exists, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.name, e.email, e.password_hash, e.join_date,
           e.department_id, e.role_id, e.created_date, e.updated_date,
           r.name AS role_name, d.name AS department_name
    FROM employees e
    LEFT JOIN roles r ON r.role_id = e.role_id
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=r["employee_id"],
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        join_date=r.get("join_date"),
        department_id=r["department_id"],
        role_id=r["role_id"],
        created_date=r["created_date"],
        updated_date=r["updated_date"],
        role_name=r.get("role_name"),
        department_name=r.get("department_name"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY e.name")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.email=%s", (email,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def exists(self, employee_id: str) -> bool:
        return exists(self._conn_factory, "SELECT 1 FROM employees WHERE employee_id=%s LIMIT 1", (employee_id,))

    def email_taken(self, email: str, *, exclude_id: Optional[str] = None) -> bool:
        if exclude_id:
            return exists(
                self._conn_factory,
                "SELECT 1 FROM employees WHERE email=%s AND employee_id<>%s LIMIT 1",
                (email, exclude_id),
            )
        return exists(self._conn_factory, "SELECT 1 FROM employees WHERE email=%s LIMIT 1", (email,))

    def create(self, employee: Employee) -> Employee:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(employee_id, name, email, password_hash, join_date,
                                      department_id, role_id, created_date, updated_date)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.employee_id,
                    employee.name,
                    employee.email,
                    employee.password_hash,
                    employee.join_date,
                    employee.department_id,
                    employee.role_id,
                    employee.created_date,
                    employee.updated_date,
                ),
            )
        return employee

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, email=%s, department_id=%s, role_id=%s, updated_date=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    employee.email,
                    employee.department_id,
                    employee.role_id,
                    employee.updated_date,
                    employee.employee_id,
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
