from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import DuplicateAttendanceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, exists, fetchall, is_duplicate_key
from .model import AttendanceRecord
from .repository import AttendanceRepository

_REPORT_SELECT = """
    SELECT a.attendance_id, a.employee_id, a.attendance_date, a.attendance_status,
           a.created_date, a.updated_date,
           e.name AS employee_name, d.name AS department_name
    FROM attendances a
    JOIN employees e ON e.employee_id = a.employee_id
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=r["attendance_id"],
        employee_id=r["employee_id"],
        attendance_date=r["attendance_date"],
        attendance_status=AttendanceStatus(r["attendance_status"]),
        created_date=r["created_date"],
        updated_date=r["updated_date"],
        employee_name=r.get("employee_name"),
        department_name=r.get("department_name"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendances(attendance_id, employee_id, attendance_date,
                                            attendance_status, created_date, updated_date)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        record.attendance_id,
                        record.employee_id,
                        record.attendance_date,
                        record.attendance_status.value,
                        record.created_date,
                        record.updated_date,
                    ),
                )
        except mysql.connector.Error as e:
            if is_duplicate_key(e):
                raise DuplicateAttendanceError(record.employee_id, record.attendance_date) from e
            raise
        return record

    def exists_for_employee_on(self, employee_id: str, day: date) -> bool:
        return exists(
            self._conn_factory,
            "SELECT 1 FROM attendances WHERE employee_id=%s AND attendance_day=%s LIMIT 1",
            (employee_id, day),
        )

    def query_by_department_and_date(self, department_id: str, day: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _REPORT_SELECT
                + " WHERE e.department_id=%s AND a.attendance_day=%s"
                + " ORDER BY a.attendance_date DESC, a.created_date",
                (department_id, day),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def query_by_employee_and_range(
        self,
        employee_id: str,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        where = ["a.employee_id=%s"]
        params: list = [employee_id]
        if from_date is not None:
            where.append("a.attendance_day >= %s")
            params.append(from_date)
        if to_date is not None:
            where.append("a.attendance_day <= %s")
            params.append(to_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _REPORT_SELECT + " WHERE " + " AND ".join(where) + " ORDER BY a.attendance_date DESC",
                tuple(params),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
