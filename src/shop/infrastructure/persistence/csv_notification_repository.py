"""CSV-backed implementation of NotificationRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.model.notification import Notification, NotificationType
from shop.domain.repository.notification_repository import NotificationRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "notifications"


class CsvNotificationRepository(NotificationRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def append(self, notification: Notification) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            rows.append(self._to_raw(notification))
            self._store.write_all(TABLE, rows)

    def get_by_id(self, notification_id: str) -> Notification | None:
        for raw in self._store.read_all(TABLE):
            if raw["notificationId"] == notification_id:
                return self._to_domain(raw)
        return None

    def list_for_user(self, user_id: str) -> list[Notification]:
        return [n for n in self.list_all() if n.user_id == user_id]

    def list_all(self) -> list[Notification]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    def save(self, notification: Notification) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            for i, raw in enumerate(rows):
                if raw["notificationId"] == notification.id:
                    rows[i] = self._to_raw(notification)
                    self._store.write_all(TABLE, rows)
                    return

    @staticmethod
    def _to_raw(notification: Notification) -> Row:
        return {
            "notificationId": notification.id,
            "userId": notification.user_id,
            "type": notification.type.value,
            "text": notification.text,
            "seen": "true" if notification.seen else "false",
            "timestamp": notification.timestamp.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: Row) -> Notification:
        return Notification(
            id=raw["notificationId"],
            user_id=raw["userId"],
            type=NotificationType(raw["type"]),
            text=raw["text"],
            seen=raw["seen"] == "true",
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )
