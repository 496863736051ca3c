from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from users_app.application.dtos.use_case_response import UseCaseResponse
from users_app.application.usecases.add_user import AddUserRequest, AddUserUseCase
from users_app.core.config import settings
from users_app.infraestructure.dependencies import get_add_user_usecase

user_router = APIRouter(prefix="/users", tags=["users"])
health_router = APIRouter(tags=["health"])


def status_code_for(response: UseCaseResponse) -> int:
    if response.is_success():
        return status.HTTP_201_CREATED
    if "generic" in response.errors:
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


@user_router.post(
    "",
    summary="Adds a new user",
    response_model=UseCaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_user(request: AddUserRequest, usecase: AddUserUseCase = Depends(get_add_user_usecase)):
    response = await usecase.execute(request)
    return JSONResponse(status_code=status_code_for(response), content=response.model_dump(mode="json"))


@health_router.get("/health")
def health():
    return {"status": "ok", "environment": settings.environment}
