"""Unit tests for UseCaseResponse state handling."""

import pytest

from users_app.application.dtos.use_case_response import (
    ResponseAlreadyFinalizedError,
    UseCaseResponse,
)
from users_app.core.utils.result import ApplicationError, ApplicationErrorType


@pytest.mark.unit
class TestUseCaseResponse:
    def test_starts_neutral(self):
        response = UseCaseResponse()
        assert response.success is None
        assert not response.is_success()
        assert not response.is_failed()
        assert not response.has_errors()
        assert response.data == {}

    def test_collects_errors_by_key(self):
        response = UseCaseResponse()
        response.add_error("email", ApplicationError.validation("Invalid email"))

        assert response.has_errors()
        assert response.errors["email"].type is ApplicationErrorType.VALIDATION_ERROR

    def test_collects_data_by_key(self):
        response = UseCaseResponse()
        response.add_data("user", {"id": "1"})
        assert response.data == {"user": {"id": "1"}}

    def test_success_is_terminal(self):
        response = UseCaseResponse()
        response.set_as_success()

        with pytest.raises(ResponseAlreadyFinalizedError):
            response.set_as_failed()
        assert response.is_success()

    def test_failure_is_terminal(self):
        response = UseCaseResponse()
        response.set_as_failed()

        with pytest.raises(ResponseAlreadyFinalizedError):
            response.set_as_success()
        assert response.is_failed()

    def test_serializes_error_type_by_value(self):
        response = UseCaseResponse()
        response.add_error("generic", ApplicationError.persistence("db down"))
        response.set_as_failed()

        assert response.model_dump(mode="json") == {
            "success": False,
            "errors": {"generic": {"message": "db down", "type": "PERSISTENCE_ERROR"}},
            "data": {},
        }

    def test_instances_do_not_share_state(self):
        first = UseCaseResponse()
        first.add_data("user", {})
        assert UseCaseResponse().data == {}
