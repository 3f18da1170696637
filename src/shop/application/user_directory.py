"""Application service: user registration and lookup.

Credentials are handled outside this package; a registered user is just
an id, an email and a role.
"""

from __future__ import annotations

import logging
import uuid

from shop.domain.exceptions import AlreadyExistsError, ValidationError
from shop.domain.model.user import User, UserRole
from shop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserDirectory:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def register(self, email: str, role: UserRole = UserRole.CLIENT) -> User:
        if not email or not email.strip():
            raise ValidationError("Email is required")
        email = email.strip()
        if self._user_repo.get_by_email(email) is not None:
            raise AlreadyExistsError(f"User with email {email} already exists")

        user = User(id=str(uuid.uuid4()), email=email, role=role)
        self._user_repo.save(user)
        logger.info("Registered %s user %s", role.name.lower(), user.id)
        return user

    def list_all(self) -> list[User]:
        return self._user_repo.list_all()
