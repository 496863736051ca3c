"""Shared fixtures for the test suite."""

import pytest

from builders import make_request, make_user
from users_app.application.usecases.add_user import AddUserRequest
from users_app.domain.entities.user import UserEntity


@pytest.fixture
def valid_request() -> AddUserRequest:
    return make_request()


@pytest.fixture
def user() -> UserEntity:
    return make_user()
