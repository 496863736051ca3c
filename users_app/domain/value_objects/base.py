"""Value object base class.

Value objects are immutable, compared by value and validate themselves in
``__post_init__``. Subclasses are frozen dataclasses::

    @dataclass(frozen=True)
    class Email(ValueObject):
        value: str

        def __post_init__(self) -> None:
            ...  # raise ValueError on bad input
"""

from abc import ABC
from typing import Any, TypeVar

from users_app.core.utils.result import Result

V = TypeVar("V", bound="ValueObject")


class ValueObject(ABC):
    __slots__ = ()

    @classmethod
    def create(cls: type[V], raw: Any) -> Result[V, str]:
        """Build the value object, returning the validation detail instead of raising."""
        try:
            return Result.Ok(cls(raw))
        except ValueError as e:
            return Result.Err(str(e))
