from dataclasses import dataclass
from uuid import UUID

from users_app.domain.value_objects.email import Email
from users_app.domain.value_objects.name import Name
from users_app.domain.value_objects.password import Password
from users_app.domain.value_objects.surname import Surname


@dataclass(frozen=True)
class UserEntity:
    id: UUID
    name: Name
    surname: Surname
    email: Email
    password: Password
