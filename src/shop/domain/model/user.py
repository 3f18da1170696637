"""User: a tagged variant over the two roles.

Admins and clients share every field; behaviour differs only through
``is_admin``, so there is no subclass per role.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UserRole(Enum):
    ADMIN = "admin"
    CLIENT = "user"


@dataclass(frozen=True)
class User:
    id: str
    email: str
    role: UserRole = UserRole.CLIENT

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
