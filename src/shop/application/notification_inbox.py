"""Application service: a user's notification inbox."""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, ForbiddenError
from shop.domain.model.notification import Notification
from shop.domain.repository.notification_repository import NotificationRepository


class NotificationInbox:

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notification_repo = notification_repo

    def list_for_user(self, user_id: str) -> list[Notification]:
        return self._notification_repo.list_for_user(user_id)

    def mark_seen(self, notification_id: str, user_id: str) -> Notification:
        """Flip the seen flag on one of the user's notifications.

        Marking an already-seen notification is a no-op (nothing is written).
        """
        notification = self._notification_repo.get_by_id(notification_id)
        if notification is None:
            raise EntityNotFoundError(f"Notification {notification_id} not found")
        if notification.user_id != user_id:
            raise ForbiddenError(
                f"Notification {notification_id} belongs to another user"
            )
        if not notification.seen:
            notification.mark_seen()
            self._notification_repo.save(notification)
        return notification
