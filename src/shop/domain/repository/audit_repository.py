"""Abstract repository for the admin audit trail (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.audit import AuditEntry


class AuditRepository(ABC):

    @abstractmethod
    def append(self, entry: AuditEntry) -> None:
        """Add one entry to the end of the trail."""

    @abstractmethod
    def list_all(self) -> list[AuditEntry]:
        """Return the full trail, oldest first."""
