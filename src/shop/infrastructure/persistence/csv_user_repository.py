"""CSV-backed implementation of UserRepository."""

from __future__ import annotations

from shop.domain.model.user import User, UserRole
from shop.domain.repository.row_store import Row, RowStore
from shop.domain.repository.user_repository import UserRepository

TABLE = "users"


class CsvUserRepository(UserRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def get_by_email(self, email: str) -> User | None:
        for user in self.list_all():
            if user.email.lower() == email.lower():
                return user
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    def save(self, user: User) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            for i, raw in enumerate(rows):
                if raw["id"] == user.id:
                    # keep columns this package does not manage (e.g. credentials)
                    rows[i] = {**raw, **self._to_raw(user)}
                    break
            else:
                rows.append(self._to_raw(user))
            self._store.write_all(TABLE, rows)

    @staticmethod
    def _to_raw(user: User) -> Row:
        return {"id": user.id, "email": user.email, "role": user.role.value}

    @staticmethod
    def _to_domain(raw: Row) -> User:
        # anything that is not "admin" is a client
        role = UserRole.ADMIN if raw.get("role") == UserRole.ADMIN.value else UserRole.CLIENT
        return User(id=raw["id"], email=raw["email"], role=role)
