"""Application service: read-only admin listings (query)."""

from __future__ import annotations

from shop.domain.model.audit import AuditEntry
from shop.domain.model.notification import Notification
from shop.domain.model.reorder import ReorderRequest
from shop.domain.repository.audit_repository import AuditRepository
from shop.domain.repository.notification_repository import NotificationRepository
from shop.domain.repository.reorder_repository import ReorderRepository


class AdminReports:

    def __init__(
        self,
        audit_repo: AuditRepository,
        reorder_repo: ReorderRepository,
        notification_repo: NotificationRepository,
    ) -> None:
        self._audit_repo = audit_repo
        self._reorder_repo = reorder_repo
        self._notification_repo = notification_repo

    def audit_trail(self) -> list[AuditEntry]:
        return self._audit_repo.list_all()

    def reorder_requests(self) -> list[ReorderRequest]:
        return self._reorder_repo.list_all()

    def all_notifications(self) -> list[Notification]:
        return self._notification_repo.list_all()
