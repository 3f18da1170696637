"""Audit trail entry: append-only record of an admin catalog change."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class AuditAction(Enum):
    CREATE = "CREATE"
    UPDATE_PRICE = "UPDATE_PRICE"
    UPDATE_STOCK = "UPDATE_STOCK"
    DELETE = "DELETE"


@dataclass(frozen=True)
class AuditEntry:
    id: str
    admin_id: str
    action: AuditAction
    target_id: str
    old_value: str  # stringified; empty for CREATE
    new_value: str  # stringified; empty for DELETE
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def record(
        admin_id: str,
        action: AuditAction,
        target_id: str,
        old_value: str = "",
        new_value: str = "",
    ) -> AuditEntry:
        return AuditEntry(
            id=str(uuid.uuid4()),
            admin_id=admin_id,
            action=action,
            target_id=target_id,
            old_value=old_value,
            new_value=new_value,
        )
