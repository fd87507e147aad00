from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.auth.tokens import TokenService, TokenSettings
from attendance_tracker.container import assemble
from attendance_tracker.core.enums import RoleName
from attendance_tracker.core.exceptions import DuplicateAttendanceError
from attendance_tracker.departments.model import Department
from attendance_tracker.employees.model import Employee
from attendance_tracker.main import create_app
from attendance_tracker.roles.model import Role

FIXED_NOW = datetime(2024, 1, 10, 9, 30, 0)


class InMemoryRoles:
    def __init__(self):
        self.items: dict[str, Role] = {}

    def add(self, name: str) -> Role:
        role = Role(role_id=str(uuid.uuid4()), name=name, created_date=FIXED_NOW, updated_date=FIXED_NOW)
        self.items[role.role_id] = role
        return role

    def list_all(self):
        return sorted(self.items.values(), key=lambda r: r.name)

    def get_by_id(self, role_id: str) -> Optional[Role]:
        return self.items.get(role_id)

    def get_by_name(self, name: str) -> Optional[Role]:
        return next((r for r in self.items.values() if r.name == name), None)

    def exists(self, role_id: str) -> bool:
        return role_id in self.items

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        return any(r.name == name and r.role_id != exclude_id for r in self.items.values())

    def create(self, role: Role) -> Role:
        self.items[role.role_id] = role
        return role

    def update(self, role: Role) -> bool:
        if role.role_id not in self.items:
            return False
        self.items[role.role_id] = role
        return True

    def delete_by_id(self, role_id: str) -> bool:
        return self.items.pop(role_id, None) is not None


class InMemoryDepartments:
    def __init__(self):
        self.items: dict[str, Department] = {}

    def add(self, name: str) -> Department:
        dept = Department(department_id=str(uuid.uuid4()), name=name, created_date=FIXED_NOW, updated_date=FIXED_NOW)
        self.items[dept.department_id] = dept
        return dept

    def list_all(self):
        return sorted(self.items.values(), key=lambda d: d.name)

    def get_by_id(self, department_id: str) -> Optional[Department]:
        return self.items.get(department_id)

    def get_by_name(self, name: str) -> Optional[Department]:
        return next((d for d in self.items.values() if d.name == name), None)

    def exists(self, department_id: str) -> bool:
        return department_id in self.items

    def name_taken(self, name: str, *, exclude_id: Optional[str] = None) -> bool:
        return any(d.name == name and d.department_id != exclude_id for d in self.items.values())

    def create(self, department: Department) -> Department:
        self.items[department.department_id] = department
        return department

    def update(self, department: Department) -> bool:
        if department.department_id not in self.items:
            return False
        self.items[department.department_id] = department
        return True

    def delete_by_id(self, department_id: str) -> bool:
        return self.items.pop(department_id, None) is not None


class InMemoryEmployees:
    def __init__(self, roles: InMemoryRoles, departments: InMemoryDepartments):
        self.items: dict[str, Employee] = {}
        self._roles = roles
        self._departments = departments

    def _resolved(self, e: Employee) -> Employee:
        role = self._roles.get_by_id(e.role_id)
        dept = self._departments.get_by_id(e.department_id)
        return replace(e, role_name=role.name if role else None, department_name=dept.name if dept else None)

    def add(self, *, name: str, email: str, password: str, department: Department, role: Role, employee_id=None) -> Employee:
        emp = Employee(
            employee_id=employee_id or str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=generate_password_hash(password),
            join_date=FIXED_NOW,
            department_id=department.department_id,
            role_id=role.role_id,
            created_date=FIXED_NOW,
            updated_date=FIXED_NOW,
        )
        self.items[emp.employee_id] = emp
        return emp

    def list_all(self):
        return [self._resolved(e) for e in sorted(self.items.values(), key=lambda e: e.name)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        e = self.items.get(employee_id)
        return self._resolved(e) if e else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        e = next((e for e in self.items.values() if e.email == email), None)
        return self._resolved(e) if e else None

    def exists(self, employee_id: str) -> bool:
        return employee_id in self.items

    def email_taken(self, email: str, *, exclude_id: Optional[str] = None) -> bool:
        return any(e.email == email and e.employee_id != exclude_id for e in self.items.values())

    def create(self, employee: Employee) -> Employee:
        self.items[employee.employee_id] = employee
        return employee

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self.items:
            return False
        self.items[employee.employee_id] = employee
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        return self.items.pop(employee_id, None) is not None


class InMemoryAttendance:
    """Mirrors the storage rules: one row per (employee, day), reports newest first."""

    def __init__(self, employees: InMemoryEmployees):
        self.items: list[AttendanceRecord] = []
        self._employees = employees

    def _resolved(self, r: AttendanceRecord) -> AttendanceRecord:
        e = self._employees.get_by_id(r.employee_id)
        return replace(r, employee_name=e.name, department_name=e.department_name)

    def create(self, record: AttendanceRecord) -> AttendanceRecord:
        day = record.attendance_date.date()
        if any(r.employee_id == record.employee_id and r.attendance_date.date() == day for r in self.items):
            raise DuplicateAttendanceError(record.employee_id, record.attendance_date)
        self.items.append(record)
        return record

    def exists_for_employee_on(self, employee_id: str, day: date) -> bool:
        return any(r.employee_id == employee_id and r.attendance_date.date() == day for r in self.items)

    def query_by_department_and_date(self, department_id: str, day: date):
        rows = [
            r
            for r in self.items
            if r.attendance_date.date() == day
            and r.employee_id in self._employees.items
            and self._employees.items[r.employee_id].department_id == department_id
        ]
        return [self._resolved(r) for r in sorted(rows, key=lambda r: r.attendance_date, reverse=True)]

    def query_by_employee_and_range(self, employee_id: str, from_date=None, to_date=None):
        rows = [r for r in self.items if r.employee_id == employee_id]
        if from_date is not None:
            rows = [r for r in rows if r.attendance_date.date() >= from_date]
        if to_date is not None:
            rows = [r for r in rows if r.attendance_date.date() <= to_date]
        return [self._resolved(r) for r in sorted(rows, key=lambda r: r.attendance_date, reverse=True)]


@pytest.fixture
def fixed_now(monkeypatch):
    for module in (
        "attendance_tracker.attendance.service",
        "attendance_tracker.departments.service",
        "attendance_tracker.employees.service",
        "attendance_tracker.roles.service",
    ):
        monkeypatch.setattr(f"{module}.now_local", lambda: FIXED_NOW)
    return FIXED_NOW


@pytest.fixture
def roles_repo():
    repo = InMemoryRoles()
    for role in RoleName:
        repo.add(role.value)
    return repo


@pytest.fixture
def departments_repo():
    repo = InMemoryDepartments()
    repo.add("IT")
    repo.add("HR")
    return repo


@pytest.fixture
def employees_repo(roles_repo, departments_repo):
    return InMemoryEmployees(roles_repo, departments_repo)


@pytest.fixture
def attendance_repo(employees_repo):
    return InMemoryAttendance(employees_repo)


@pytest.fixture
def it_department(departments_repo):
    return departments_repo.get_by_name("IT")


@pytest.fixture
def alice(employees_repo, roles_repo, it_department):
    return employees_repo.add(
        name="Alice",
        email="alice@example.com",
        password="alice-pass",
        department=it_department,
        role=roles_repo.get_by_name("Employee"),
        employee_id="E1",
    )


@pytest.fixture
def token_service():
    return TokenService(
        TokenSettings(
            secret_key="test-jwt-secret-key-with-enough-length",
            issuer="attendance-tracker-test",
            audience="attendance-tracker-test-clients",
            expire_minutes=5,
        )
    )


@pytest.fixture
def container(roles_repo, departments_repo, employees_repo, attendance_repo, token_service):
    return assemble(
        roles_repo=roles_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
    )


@pytest.fixture
def client(container):
    app = create_app("attendance_tracker.config.testing", container=container)
    return app.test_client()


@pytest.fixture
def auth_header(token_service):
    def _header(role: RoleName = RoleName.ADMIN, employee_id: str = "admin-1") -> dict:
        token = token_service.issue(employee_id=employee_id, email="caller@example.com", name="Caller", role=role.value)
        return {"Authorization": f"Bearer {token}"}

    return _header
