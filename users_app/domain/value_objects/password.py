"""Password value object.

Requirements:
    - At least 8 characters
    - At least one letter
    - At least one digit

The plain value is reachable through ``.value`` only; ``str`` and ``repr``
are masked so the password never ends up in logs.
"""

import re
from dataclasses import dataclass

from users_app.domain.value_objects.base import ValueObject

PASSWORD_MIN_LENGTH = 8


@dataclass(frozen=True)
class Password(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("Password must be a string")
        if not self.value:
            raise ValueError("Password cannot be empty")
        if len(self.value) < PASSWORD_MIN_LENGTH:
            raise ValueError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
        if not re.search(r"[^\W\d_]", self.value):
            raise ValueError("Password must contain a letter")
        if not re.search(r"\d", self.value):
            raise ValueError("Password must contain a digit")

    def __str__(self) -> str:
        return "*" * len(self.value)

    def __repr__(self) -> str:
        return f"Password('{'*' * len(self.value)}')"
