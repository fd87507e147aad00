from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .auth.tokens import TokenService, TokenSettings
from .auth.validator import AuthValidator
from .core.constants import DEFAULT_JWT_EXPIRE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .roles.mysql_role_repository import MySQLRoleRepository
from .roles.repository import RoleRepository
from .roles.service import RoleService


@dataclass(frozen=True)
class Container:
    roles_repo: RoleRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    token_service: TokenService
    role_service: RoleService
    department_service: DepartmentService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    auth_service: AuthService

    conn: Optional[DatabaseConnection] = None


def token_settings_from(settings: ModuleType) -> TokenSettings:
    return TokenSettings(
        secret_key=str(getattr(settings, "JWT_SECRET_KEY")),
        issuer=str(getattr(settings, "JWT_ISSUER")),
        audience=str(getattr(settings, "JWT_AUDIENCE")),
        expire_minutes=int(getattr(settings, "JWT_EXPIRE_MINUTES", DEFAULT_JWT_EXPIRE_MINUTES)),
    )


def assemble(
    *,
    roles_repo: RoleRepository,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    token_service: TokenService,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations."""
    attendance_service = AttendanceService(attendance_repo, employees_repo, departments_repo)
    employee_service = EmployeeService(employees_repo, departments_repo, roles_repo, attendance_service)

    return Container(
        roles_repo=roles_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        token_service=token_service,
        role_service=RoleService(roles_repo),
        department_service=DepartmentService(departments_repo),
        employee_service=employee_service,
        attendance_service=attendance_service,
        auth_service=AuthService(employee_service, AuthValidator(employees_repo), token_service),
        conn=conn,
    )


def build_container(settings: ModuleType) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))

    return assemble(
        roles_repo=MySQLRoleRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        token_service=TokenService(token_settings_from(settings)),
        conn=conn,
    )
