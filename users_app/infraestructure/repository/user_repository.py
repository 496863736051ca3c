import asyncio
import uuid

import bcrypt
import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from users_app.domain.entities.user import UserEntity
from users_app.domain.ports.user_repository import UserPersistenceError, UserRepositoryPort
from users_app.infraestructure.models.user_model import UserModel

logger = structlog.get_logger(__name__)


class UserRepository(UserRepositoryPort):
    def __init__(self, db: AsyncSession):
        self.db = db

    def next_id(self) -> uuid.UUID:
        return uuid.uuid4()

    async def add(self, user: UserEntity) -> None:
        # hashing runs off the event loop
        password_hash = await asyncio.to_thread(hash_password, user.password.value)
        model = UserModel(
            id=user.id,
            name=user.name.value,
            surname=user.surname.value,
            email=user.email.value,
            password_hash=password_hash,
        )
        self.db.add(model)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning("user_insert_conflict", user_id=str(user.id), error=str(e.orig))
            if is_email_conflict(e):
                raise UserPersistenceError("Email already registered") from e
            raise UserPersistenceError("Could not save user") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("user_insert_failed", user_id=str(user.id), error=type(e).__name__)
            raise UserPersistenceError("Could not save user") from e


def hash_password(plain: str) -> str:
    # bcrypt only reads the first 72 bytes
    return bcrypt.hashpw(plain.encode("utf-8")[:72], bcrypt.gensalt()).decode("utf-8")


def is_email_conflict(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: users.email"
    # Postgres: 'duplicate key ... "ix_users_email"', DETAIL: Key (email)=...
    message = str(error.orig).lower()
    return "users.email" in message or "ix_users_email" in message or "(email)" in message
