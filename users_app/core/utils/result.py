from enum import Enum
from typing import Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")
E = TypeVar("E")

class Result(Generic[T, E]):
    def __init__(self, value: Union[T, None] = None, error: Union[E, None] = None):
        self._value = value
        self._error = error

    @staticmethod
    def Ok(value: T) -> "Result[T, E]":
        return Result(value=value)

    @staticmethod
    def Err(error: E) -> "Result[T, E]":
        return Result(error=error)

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def value(self) -> T:
        if self.is_err():
            raise ValueError(f"Tried to unwrap an error: {self._error}")
        return self._value

    def error(self) -> E:
        if self.is_ok():
            raise ValueError(f"Tried to unwrap a value: {self._value}")
        return self._error


class ApplicationErrorType(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"


class ApplicationError(BaseModel):
    """Error reported back to the caller of a use case, keyed by field or "generic"."""

    message: str
    type: ApplicationErrorType

    @classmethod
    def validation(cls, message: str) -> "ApplicationError":
        return cls(message=message, type=ApplicationErrorType.VALIDATION_ERROR)

    @classmethod
    def persistence(cls, message: str) -> "ApplicationError":
        return cls(message=message, type=ApplicationErrorType.PERSISTENCE_ERROR)


class AppError(Exception):
    """Base error for the application"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message
