"""Notification: a message addressed to one user."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationType(Enum):
    LOW_STOCK = "LOW_STOCK"
    ORDER_PLACED = "ORDER_PLACED"
    PRODUCT_UPDATED = "PRODUCT_UPDATED"
    GENERIC = "GENERIC"


@dataclass
class Notification:
    """Mutable only through ``mark_seen()``, and only one way."""

    id: str
    user_id: str
    type: NotificationType
    text: str
    seen: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def new(user_id: str, type: NotificationType, text: str) -> Notification:
        return Notification(id=str(uuid.uuid4()), user_id=user_id, type=type, text=text)

    def mark_seen(self) -> None:
        self.seen = True
