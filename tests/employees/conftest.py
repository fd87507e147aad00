import pytest

from attendance_tracker.employees.model import NewEmployee


@pytest.fixture
def new_employee(roles_repo, it_department):
    def _build(**overrides):
        fields = dict(
            name="Bob",
            email="bob@example.com",
            password="s3cret",
            join_date=None,
            department_id=it_department.department_id,
            role_id=roles_repo.get_by_name("Employee").role_id,
        )
        fields.update(overrides)
        return NewEmployee(**fields)

    return _build
