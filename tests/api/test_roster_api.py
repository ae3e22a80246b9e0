import uuid
from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tutorschool.api.deps.dependencies import get_group_service, get_student_service
from tutorschool.api.main import create_app
from tutorschool.core.exceptions import StudentNotFoundError


@pytest.fixture
def mock_student_service():
    return AsyncMock()


@pytest.fixture
def mock_group_service():
    return AsyncMock()


@pytest.fixture
def client(mock_student_service, mock_group_service):
    test_client = TestClient(create_app())
    test_client.app.dependency_overrides[get_student_service] = lambda: mock_student_service
    test_client.app.dependency_overrides[get_group_service] = lambda: mock_group_service
    return test_client


def _student(**overrides):
    now = datetime.now()
    data = {
        "id": uuid.uuid4(),
        "school_id": "school-1",
        "first_name": "Alice",
        "last_name": "Smith",
        "full_name": "Alice Smith",
        "phone": "9081420431",
        "country_code": "+7",
        "parent_phone": None,
        "parent_country_code": None,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return data


def test_create_student(client, mock_student_service):
    mock_student_service.create_student.return_value = _student()

    response = client.post("/api/v1/students", json={"first_name": "Alice", "last_name": "Smith"})

    assert response.status_code == 201
    assert response.json()["full_name"] == "Alice Smith"
    assert mock_student_service.create_student.call_args.kwargs["country_code"] == "+7"


def test_list_students_by_school(client, mock_student_service):
    mock_student_service.list_students.return_value = [_student()]

    response = client.get("/api/v1/students", params={"school_id": "school-1"})

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert mock_student_service.list_students.call_args.kwargs["school_id"] == "school-1"


def test_get_student_not_found(client, mock_student_service):
    student_id = uuid.uuid4()
    mock_student_service.get_student.side_effect = StudentNotFoundError(str(student_id))

    response = client.get(f"/api/v1/students/{student_id}")

    assert response.status_code == 404


def test_delete_student(client, mock_student_service):
    student_id = uuid.uuid4()
    mock_student_service.delete_student.return_value = True

    response = client.delete(f"/api/v1/students/{student_id}")

    assert response.status_code == 200
    assert response.json()["deleted"] is True


def test_create_and_list_groups(client, mock_group_service):
    now = datetime.now()
    group = {"id": uuid.uuid4(), "school_id": "school-1", "name": "Beginners", "created_at": now, "updated_at": now}
    mock_group_service.create_group.return_value = group
    mock_group_service.list_groups.return_value = [group]

    created = client.post("/api/v1/groups", json={"name": "Beginners", "school_id": "school-1"})
    listed = client.get("/api/v1/groups")

    assert created.status_code == 201
    assert listed.json()[0]["name"] == "Beginners"
