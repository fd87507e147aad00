import pytest

from attendance_tracker.attendance.service import AttendanceService


@pytest.fixture
def attendance_service(attendance_repo, employees_repo, departments_repo, fixed_now):
    return AttendanceService(attendance_repo, employees_repo, departments_repo)
