from datetime import datetime

from werkzeug.security import check_password_hash

from attendance_tracker.attendance.model import NewAttendance
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.employees.model import EmployeeChanges


def test_create_employee_hashes_password(container, employees_repo, new_employee, fixed_now):
    res = container.employee_service.create_employee(new_employee())

    assert res.is_success is True
    assert res.message == "Employee created successfully."
    stored = employees_repo.items[res.result]
    assert stored.password_hash != "s3cret"
    assert check_password_hash(stored.password_hash, "s3cret")
    assert stored.join_date == fixed_now


def test_create_employee_accumulates_errors(container, new_employee):
    res = container.employee_service.create_employee(
        new_employee(name="", email=" ", password=None, department_id="nope", role_id=None)
    )

    assert res.is_success is False
    assert res.message == (
        "Employee name is required., Employee email is required., Password is required., "
        "Department not found., Role not found."
    )


def test_create_employee_duplicate_email(container, alice, new_employee):
    res = container.employee_service.create_employee(new_employee(email="alice@example.com"))

    assert res.message == "Duplicate email found."


def test_get_employee_by_email(container, alice):
    found = container.employee_service.get_employee_by_email("alice@example.com")
    missing = container.employee_service.get_employee_by_email("ghost@example.com")

    assert found.result.employee_id == "E1"
    assert found.result.role_name == "Employee"
    assert missing.message == "Employee not found."


def test_update_employee_keeps_own_email(container, alice, it_department, roles_repo, fixed_now):
    changes = EmployeeChanges(
        name="Alice Smith",
        email="alice@example.com",
        department_id=it_department.department_id,
        role_id=roles_repo.get_by_name("HR").role_id,
    )

    res = container.employee_service.update_employee("E1", changes)

    assert res.is_success is True
    assert res.message == "Employee updated successfully."
    assert res.result.name == "Alice Smith"
    assert res.result.updated_date == fixed_now


def test_update_missing_employee(container, it_department, roles_repo):
    changes = EmployeeChanges(
        name="X", email="x@example.com", department_id=it_department.department_id, role_id=roles_repo.get_by_name("HR").role_id
    )

    assert container.employee_service.update_employee("missing", changes).message == "Employee not found."


def test_delete_employee(container, alice):
    assert container.employee_service.delete_employee("E1").message == "Employee deleted successfully."
    assert container.employee_service.get_employee_by_id("E1").message == "Employee not found."


def test_attendance_history_checks_employee_first(container):
    res = container.employee_service.get_employee_attendance_history("missing")

    assert res.is_success is False
    assert res.message == "Employee not found."


def test_attendance_history_delegates(container, alice, fixed_now):
    container.attendance_service.create_attendance(
        NewAttendance(employee_id="E1", attendance_date=datetime(2024, 1, 10), attendance_status=AttendanceStatus.ABSENT)
    )

    res = container.employee_service.get_employee_attendance_history("E1", datetime(2024, 1, 1), datetime(2024, 1, 31))

    assert res.is_success is True
    assert res.message == "Employee attendance history retrieved successfully."
    assert [r.attendance_status for r in res.result] == [AttendanceStatus.ABSENT]
