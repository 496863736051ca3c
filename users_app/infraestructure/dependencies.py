from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from users_app.application.usecases.add_user import AddUserUseCase
from users_app.core.db import SessionLocal
from users_app.infraestructure.mappers.user_mapper import UserMapper
from users_app.infraestructure.repository.user_repository import UserRepository


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session

# Injects the repository with the database session
def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)

def get_user_mapper() -> UserMapper:
    return UserMapper()

# Injects the use case with its ports
def get_add_user_usecase(
    repo: UserRepository = Depends(get_user_repository),
    mapper: UserMapper = Depends(get_user_mapper),
) -> AddUserUseCase:
    return AddUserUseCase(repo, mapper)
