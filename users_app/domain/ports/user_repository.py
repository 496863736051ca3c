from abc import ABC, abstractmethod
from uuid import UUID

from users_app.core.utils.result import AppError
from users_app.domain.entities.user import UserEntity


class UserPersistenceError(AppError):
    """Raised by repository adapters when a user cannot be stored"""


class UserRepositoryPort(ABC):
    @abstractmethod
    def next_id(self) -> UUID:
        pass

    @abstractmethod
    async def add(self, user: UserEntity) -> None:
        """Persist the user, raising UserPersistenceError on failure."""
        pass
