from typing import Any

from pydantic import BaseModel, Field

from users_app.core.utils.result import ApplicationError


class ResponseAlreadyFinalizedError(RuntimeError):
    pass


class UseCaseResponse(BaseModel):
    """Outcome of a use case run.

    ``success`` is None until the use case settles it; once set to True or
    False it cannot change again.
    """

    success: bool | None = None
    errors: dict[str, ApplicationError] = Field(default_factory=dict)
    data: dict[str, Any] = Field(default_factory=dict)

    def set_as_failed(self) -> None:
        self._finalize(False)

    def set_as_success(self) -> None:
        self._finalize(True)

    def add_error(self, key: str, error: ApplicationError) -> None:
        self.errors[key] = error

    def add_data(self, key: str, value: Any) -> None:
        self.data[key] = value

    def has_errors(self) -> bool:
        return bool(self.errors)

    def is_success(self) -> bool:
        return self.success is True

    def is_failed(self) -> bool:
        return self.success is False

    def _finalize(self, success: bool) -> None:
        if self.success is not None:
            raise ResponseAlreadyFinalizedError(
                f"Response already marked as {'success' if self.success else 'failed'}"
            )
        self.success = success
