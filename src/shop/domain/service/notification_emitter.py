"""Domain service: notification fan-out and reorder emission.

Catalog changes and checkouts need to tell *groups* of users about what
happened (every admin, every client).  The fan-out loop lives here, behind
one call, so callers never iterate the user table themselves.

Notifications and reorder requests are informational log entries, not
transactional state: nothing emitted here is ever retracted.
"""

from __future__ import annotations

import logging

from shop.domain.model.notification import Notification, NotificationType
from shop.domain.model.product import Product
from shop.domain.model.reorder import ReorderRequest
from shop.domain.repository.notification_repository import NotificationRepository
from shop.domain.repository.reorder_repository import ReorderRepository
from shop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class NotificationEmitter:

    def __init__(
        self,
        user_repo: UserRepository,
        notification_repo: NotificationRepository,
        reorder_repo: ReorderRepository,
    ) -> None:
        self._user_repo = user_repo
        self._notification_repo = notification_repo
        self._reorder_repo = reorder_repo

    def notify_user(
        self, user_id: str, type: NotificationType, text: str
    ) -> Notification:
        notification = Notification.new(user_id, type, text)
        self._notification_repo.append(notification)
        return notification

    def notify_admins(self, type: NotificationType, text: str) -> list[Notification]:
        """One notification per admin user."""
        admins = [u for u in self._user_repo.list_all() if u.is_admin]
        return [self.notify_user(admin.id, type, text) for admin in admins]

    def notify_clients(self, type: NotificationType, text: str) -> list[Notification]:
        """One notification per non-admin user."""
        clients = [u for u in self._user_repo.list_all() if not u.is_admin]
        return [self.notify_user(client.id, type, text) for client in clients]

    def flag_low_stock(self, product: Product, text: str) -> ReorderRequest:
        """Append a reorder request for *product* and alert every admin.

        The caller decides whether the stock level is low; this only emits.
        """
        request = ReorderRequest.for_stock_level(product.id, product.stock_quantity)
        self._reorder_repo.append(request)
        sent = self.notify_admins(NotificationType.LOW_STOCK, text)
        logger.info(
            "Low stock on %s (%d left): reorder %s, %d admin(s) notified",
            product.id, product.stock_quantity, request.id, len(sent),
        )
        return request
