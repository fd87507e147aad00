"""CSV rendering for attendance reports."""

from __future__ import annotations

import csv
import io
from typing import Iterable

from ..core.constants import ATTENDANCE_CSV_HEADER, CSV_DATE_FORMAT
from .model import AttendanceRecord


def render_attendance_csv(records: Iterable[AttendanceRecord]) -> bytes:
    """Header plus one row per record, UTF-8 without BOM.

    Returns ``b""`` when there is nothing to export. Fields containing a
    comma, quote or line break are quoted; everything else is written as is.
    """
    rows = list(records)
    if not rows:
        return b""

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(ATTENDANCE_CSV_HEADER)
    for r in rows:
        writer.writerow(
            [
                r.employee_id,
                r.employee_name or "",
                r.department_name or "",
                r.attendance_date.strftime(CSV_DATE_FORMAT),
                r.attendance_status.value,
            ]
        )
    return buf.getvalue().encode("utf-8")
