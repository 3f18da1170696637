"""Abstract repository for ReorderRequests (append-only log)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.reorder import ReorderRequest


class ReorderRepository(ABC):

    @abstractmethod
    def append(self, request: ReorderRequest) -> None:
        """Add one request to the log."""

    @abstractmethod
    def list_all(self) -> list[ReorderRequest]:
        """Return every request, oldest first."""
