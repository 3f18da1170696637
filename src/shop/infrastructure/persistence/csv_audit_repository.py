"""CSV-backed implementation of AuditRepository."""

from __future__ import annotations

from datetime import datetime

from shop.domain.model.audit import AuditAction, AuditEntry
from shop.domain.repository.audit_repository import AuditRepository
from shop.domain.repository.row_store import Row, RowStore

TABLE = "audit_trail"


class CsvAuditRepository(AuditRepository):

    def __init__(self, store: RowStore) -> None:
        self._store = store

    def append(self, entry: AuditEntry) -> None:
        with self._store.lock(TABLE):
            rows = self._store.read_all(TABLE)
            rows.append(self._to_raw(entry))
            self._store.write_all(TABLE, rows)

    def list_all(self) -> list[AuditEntry]:
        return [self._to_domain(raw) for raw in self._store.read_all(TABLE)]

    @staticmethod
    def _to_raw(entry: AuditEntry) -> Row:
        return {
            "auditId": entry.id,
            "timestamp": entry.timestamp.isoformat(),
            "adminId": entry.admin_id,
            "action": entry.action.value,
            "targetId": entry.target_id,
            "oldValue": entry.old_value,
            "newValue": entry.new_value,
        }

    @staticmethod
    def _to_domain(raw: Row) -> AuditEntry:
        return AuditEntry(
            id=raw["auditId"],
            admin_id=raw["adminId"],
            action=AuditAction(raw["action"]),
            target_id=raw["targetId"],
            old_value=raw["oldValue"],
            new_value=raw["newValue"],
            timestamp=datetime.fromisoformat(raw["timestamp"]),
        )
