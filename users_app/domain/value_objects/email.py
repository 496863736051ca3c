"""Email value object.

Validates the address format with email-validator and keeps the normalized
form, so two spellings of the same address compare equal.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from users_app.domain.value_objects.base import ValueObject


@dataclass(frozen=True)
class Email(ValueObject):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError("Email must be a string")
        if not self.value.strip():
            raise ValueError("Email cannot be empty")
        try:
            # Format only, no DNS lookup
            validated = validate_email(self.value.strip(), check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        object.__setattr__(self, "value", validated.normalized)

    def __str__(self) -> str:
        return self.value
