"""API tests for user endpoints.

Tests the HTTP request/response cycle for POST /api/users:
- Status code mapping (201, 400, 500)
- Response body shape

Architecture:
- Uses the real app with dependency overrides
- The use case runs for real against mocked ports
"""

from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from builders import FIXED_ID, VALID_FIELDS
from users_app.application.usecases.add_user import AddUserUseCase
from users_app.domain.ports.user_repository import UserPersistenceError
from users_app.infraestructure.dependencies import get_add_user_usecase
from users_app.infraestructure.mappers.user_mapper import UserMapper
from users_app.main import app


@pytest.fixture
def repo():
    mock_repo = Mock()
    mock_repo.next_id.return_value = FIXED_ID
    mock_repo.add = AsyncMock(return_value=None)
    return mock_repo


@pytest.fixture
def client(repo):
    app.dependency_overrides[get_add_user_usecase] = lambda: AddUserUseCase(repo, UserMapper())
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.mark.api
class TestAddUserEndpoint:
    def test_created_user_is_returned(self, client):
        response = client.post("/api/users", json=VALID_FIELDS)

        assert response.status_code == 201
        assert response.json() == {
            "success": True,
            "errors": {},
            "data": {
                "user": {
                    "id": str(FIXED_ID),
                    "name": "Jo",
                    "surname": "Doe",
                    "email": "jo.doe@example.com",
                }
            },
        }

    def test_validation_errors_return_400(self, client, repo):
        payload = {"name": "Jo", "surname": "Doe", "email": "bad-email", "password": "x"}

        response = client.post("/api/users", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert set(body["errors"]) == {"email", "password"}
        assert body["errors"]["email"]["type"] == "VALIDATION_ERROR"
        assert body["data"] == {}
        repo.add.assert_not_called()

    def test_missing_fields_are_reported_not_rejected(self, client):
        response = client.post("/api/users", json={})

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"name", "surname", "email", "password"}

    def test_wrong_field_types_are_reported_per_field(self, client, repo):
        payload = {**VALID_FIELDS, "name": 123, "password": ["s3cretPass"]}

        response = client.post("/api/users", json=payload)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert errors == {
            "name": {"message": "Name must be a string", "type": "VALIDATION_ERROR"},
            "password": {"message": "Password must be a string", "type": "VALIDATION_ERROR"},
        }
        repo.add.assert_not_called()

    def test_persistence_error_returns_500(self, client, repo):
        repo.add.side_effect = UserPersistenceError("Email already registered")

        response = client.post("/api/users", json=VALID_FIELDS)

        assert response.status_code == 500
        assert response.json()["errors"] == {
            "generic": {"message": "Email already registered", "type": "PERSISTENCE_ERROR"}
        }


@pytest.mark.api
def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
