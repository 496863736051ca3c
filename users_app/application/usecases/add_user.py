from typing import Any

import structlog
from pydantic import BaseModel

from users_app.application.dtos.use_case_response import UseCaseResponse
from users_app.core.utils.result import ApplicationError
from users_app.domain.entities.user import UserEntity
from users_app.domain.ports.user_mapper import UserMapperPort
from users_app.domain.ports.user_repository import UserPersistenceError, UserRepositoryPort
from users_app.domain.value_objects.email import Email
from users_app.domain.value_objects.name import Name
from users_app.domain.value_objects.password import Password
from users_app.domain.value_objects.surname import Surname

logger = structlog.get_logger(__name__)

# Checked in this order, each one independently
USER_FIELDS = {
    "name": Name,
    "surname": Surname,
    "email": Email,
    "password": Password,
}


class AddUserRequest(BaseModel):
    # Any type accepted; the value objects reject non-strings per field
    name: Any = None
    surname: Any = None
    email: Any = None
    password: Any = None

    def get(self, key: str, default: Any = "") -> Any:
        value = getattr(self, key, None)
        return default if value is None else value


class AddUserUseCase:
    def __init__(self, repo: UserRepositoryPort, mapper: UserMapperPort):
        self.repo = repo
        self.mapper = mapper

    async def execute(self, request: AddUserRequest) -> UseCaseResponse:
        response = UseCaseResponse()

        if not self.is_valid(request, response):
            logger.info("add_user_validation_failed", fields=sorted(response.errors))
            response.set_as_failed()
            return response

        user = UserEntity(
            id=self.repo.next_id(),
            name=Name(request.get("name")),
            surname=Surname(request.get("surname")),
            email=Email(request.get("email")),
            password=Password(request.get("password")),
        )

        try:
            await self.repo.add(user)
        except UserPersistenceError as e:
            logger.warning("add_user_persistence_failed", user_id=str(user.id), error=str(e))
            response.add_error("generic", ApplicationError.persistence(str(e)))
            response.set_as_failed()
            return response

        response.add_data("user", self.mapper.to_dict(user))
        response.set_as_success()
        logger.info("user_added", user_id=str(user.id))
        return response

    def is_valid(self, request: AddUserRequest, response: UseCaseResponse) -> bool:
        for field, value_object in USER_FIELDS.items():
            result = value_object.create(request.get(field, ""))
            if result.is_err():
                response.add_error(field, ApplicationError.validation(result.error()))
        return not response.has_errors()
