from dataclasses import dataclass

from users_app.domain.value_objects.base import ValueObject
from users_app.domain.value_objects.person_name import normalize_person_name


@dataclass(frozen=True)
class Name(ValueObject):
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", normalize_person_name(self.value, "Name"))

    def __str__(self) -> str:
        return self.value
