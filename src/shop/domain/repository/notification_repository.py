"""Abstract repository for Notifications."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.notification import Notification


class NotificationRepository(ABC):

    @abstractmethod
    def append(self, notification: Notification) -> None:
        """Persist a new notification."""

    @abstractmethod
    def get_by_id(self, notification_id: str) -> Notification | None:
        """Return one notification, or None."""

    @abstractmethod
    def list_for_user(self, user_id: str) -> list[Notification]:
        """Return the notifications addressed to the user."""

    @abstractmethod
    def list_all(self) -> list[Notification]:
        """Return every notification for every user."""

    @abstractmethod
    def save(self, notification: Notification) -> None:
        """Overwrite an existing notification (used for the seen flag)."""
