from typing import Any

from users_app.domain.entities.user import UserEntity
from users_app.domain.ports.user_mapper import UserMapperPort


class UserMapper(UserMapperPort):
    """Plain dict view of a user for API output. The password is left out."""

    def to_dict(self, user: UserEntity) -> dict[str, Any]:
        return {
            "id": str(user.id),
            "name": user.name.value,
            "surname": user.surname.value,
            "email": user.email.value,
        }
