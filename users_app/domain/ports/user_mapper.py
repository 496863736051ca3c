from abc import ABC, abstractmethod
from typing import Any

from users_app.domain.entities.user import UserEntity


class UserMapperPort(ABC):
    @abstractmethod
    def to_dict(self, user: UserEntity) -> dict[str, Any]:
        pass
