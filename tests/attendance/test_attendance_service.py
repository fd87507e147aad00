from datetime import datetime

import pytest

from attendance_tracker.attendance.model import NewAttendance
from attendance_tracker.core.enums import AttendanceStatus


def _mark(service, employee_id, when, status=AttendanceStatus.PRESENT):
    return service.create_attendance(NewAttendance(employee_id=employee_id, attendance_date=when, attendance_status=status))


def test_create_attendance_success(attendance_service, alice, fixed_now):
    res = _mark(attendance_service, "E1", datetime(2024, 1, 10))

    assert res.is_success is True
    assert res.message == "Attendance created successfully."
    assert res.result.attendance_id
    assert res.result.attendance_date == datetime(2024, 1, 10)
    assert res.result.created_date == fixed_now
    assert res.result.updated_date == fixed_now


def test_each_record_gets_a_fresh_id(attendance_service, alice):
    a = _mark(attendance_service, "E1", datetime(2024, 1, 10)).result
    b = _mark(attendance_service, "E1", datetime(2024, 1, 11)).result

    assert a.attendance_id != b.attendance_id


def test_create_attendance_joins_every_error(attendance_service):
    res = attendance_service.create_attendance(NewAttendance(employee_id="", attendance_date=None, attendance_status=None))

    assert res.is_success is False
    assert res.result is None
    assert "EmployeeId is required." in res.message
    assert "AttendanceDate is required." in res.message
    assert res.message == "EmployeeId is required., AttendanceDate is required., Invalid AttendanceStatus."


def test_second_mark_same_day_fails(attendance_service, alice):
    assert _mark(attendance_service, "E1", datetime(2024, 1, 10, 8, 0)).is_success

    res = _mark(attendance_service, "E1", datetime(2024, 1, 10, 17, 0), AttendanceStatus.LATE)

    assert res.is_success is False
    assert "Attendance already marked for this employee for date" in res.message


def test_storage_level_duplicate_becomes_failure_response(attendance_service, attendance_repo, alice, monkeypatch):
    assert _mark(attendance_service, "E1", datetime(2024, 1, 10)).is_success
    # Simulate a concurrent request that passed validation before the first insert committed.
    monkeypatch.setattr(attendance_repo, "exists_for_employee_on", lambda *_: False)

    res = _mark(attendance_service, "E1", datetime(2024, 1, 10, 12, 0))

    assert res.is_success is False
    assert res.message == "Attendance already marked for this employee for date 2024-01-10."
    assert len(attendance_repo.items) == 1


def test_persistence_failure_is_wrapped(attendance_service, attendance_repo, alice, monkeypatch):
    def boom(record):
        raise RuntimeError("db down")

    monkeypatch.setattr(attendance_repo, "create", boom)

    res = _mark(attendance_service, "E1", datetime(2024, 1, 10))

    assert res.is_success is False
    assert res.message == "Error occurred: db down"


def test_summary_by_department(attendance_service, alice, it_department):
    _mark(attendance_service, "E1", datetime(2024, 1, 10))

    res = attendance_service.get_summary_by_department(it_department.department_id, datetime(2024, 1, 10))

    assert res.is_success is True
    assert res.message == "Attendance summary retrieved successfully."
    assert len(res.result) == 1
    assert res.result[0].attendance_status is AttendanceStatus.PRESENT
    assert res.result[0].employee_name == "Alice"
    assert res.result[0].department_name == "IT"


def test_summary_is_repeatable(attendance_service, alice, it_department):
    _mark(attendance_service, "E1", datetime(2024, 1, 10))

    first = attendance_service.get_summary_by_department(it_department.department_id, datetime(2024, 1, 10))
    second = attendance_service.get_summary_by_department(it_department.department_id, datetime(2024, 1, 10, 18, 0))

    assert first.is_success and second.is_success
    assert first.result == second.result
    assert len(first.result) == 1


def test_summary_empty_is_success(attendance_service, it_department):
    res = attendance_service.get_summary_by_department(it_department.department_id, datetime(2024, 1, 10))

    assert res.is_success is True
    assert res.result == []


def test_summary_validation_failure(attendance_service):
    res = attendance_service.get_summary_by_department("missing", None)

    assert res.is_success is False
    assert res.message == "Department not found., Date is required."


def test_history_round_trip_appears_once(attendance_service, alice):
    created = _mark(attendance_service, "E1", datetime(2024, 1, 10)).result

    res = attendance_service.get_employee_history("E1")

    assert res.is_success is True
    assert res.message == "Employee attendance history retrieved successfully."
    assert [r.attendance_id for r in res.result] == [created.attendance_id]


def test_history_bounds_are_inclusive_on_date_only(attendance_service, attendance_repo, alice, employees_repo, roles_repo, it_department):
    bob = employees_repo.add(
        name="Bob", email="bob@example.com", password="x", department=it_department, role=roles_repo.get_by_name("Employee")
    )
    _mark(attendance_service, "E1", datetime(2024, 1, 9, 12, 0))
    _mark(attendance_service, "E1", datetime(2024, 1, 10, 23, 59))
    _mark(attendance_service, bob.employee_id, datetime(2024, 1, 10, 0, 1))

    day = datetime(2024, 1, 10, 15, 0)
    res = attendance_service.get_employee_history("E1", day, day)

    assert [r.attendance_date for r in res.result] == [datetime(2024, 1, 10, 23, 59)]


def test_history_is_newest_first_and_repeatable(attendance_service, alice):
    for d in (9, 11, 10):
        _mark(attendance_service, "E1", datetime(2024, 1, d))

    first = attendance_service.get_employee_history("E1")
    second = attendance_service.get_employee_history("E1")

    assert [r.attendance_date.day for r in first.result] == [11, 10, 9]
    assert first.result == second.result


def test_history_inverted_range_is_empty_success(attendance_service, alice):
    _mark(attendance_service, "E1", datetime(2024, 1, 10))

    res = attendance_service.get_employee_history("E1", datetime(2024, 1, 12), datetime(2024, 1, 1))

    assert res.is_success is True
    assert res.result == []


def test_summary_csv_scenario(attendance_service, alice, it_department):
    _mark(attendance_service, "E1", datetime(2024, 1, 10))

    data = attendance_service.generate_summary_csv(it_department.department_id, datetime(2024, 1, 10))

    assert data.decode("utf-8").splitlines() == [
        "EmployeeId,EmployeeName,DepartmentName,Date,Status",
        "E1,Alice,IT,2024-01-10,PRESENT",
    ]


def test_summary_csv_empty_and_unknown_department(attendance_service, it_department):
    assert attendance_service.generate_summary_csv(it_department.department_id, datetime(2024, 1, 10)) == b""
    assert attendance_service.generate_summary_csv("missing", datetime(2024, 1, 10)) == b""


def test_summary_csv_propagates_errors(attendance_service, attendance_repo, it_department, monkeypatch):
    def boom(*_):
        raise RuntimeError("db down")

    monkeypatch.setattr(attendance_repo, "query_by_department_and_date", boom)

    with pytest.raises(RuntimeError, match="db down"):
        attendance_service.generate_summary_csv(it_department.department_id, datetime(2024, 1, 10))


def test_history_csv(attendance_service, alice):
    _mark(attendance_service, "E1", datetime(2024, 1, 10), AttendanceStatus.ON_LEAVE)

    lines = attendance_service.generate_employee_history_csv("E1").decode("utf-8").splitlines()

    assert lines[1] == "E1,Alice,IT,2024-01-10,ON_LEAVE"


def test_history_csv_unknown_employee_is_empty(attendance_service):
    assert attendance_service.generate_employee_history_csv("nobody") == b""
