"""Creation of user accounts."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .database import DatabaseManager
from .forms import ValidationError


class Role(Enum):
    """The roles a user account can hold."""

    USER = "user"
    ADMIN = "admin"


def create_user(
    db: DatabaseManager, username: str, password: str, role: Union[Role, str]
) -> str:
    """Store a new account and return the username it was stored under.

    Raises ValidationError for empty fields or an unknown role, and
    DatabaseError when the database refuses the account.
    """
    username = username.strip()
    if not username or not password:
        raise ValidationError("Please complete all fields.")
    try:
        checked_role = Role(role)
    except ValueError as exc:
        raise ValidationError(f"Unknown role: {role}") from exc
    db.add_user(username, password, checked_role.value)
    return username