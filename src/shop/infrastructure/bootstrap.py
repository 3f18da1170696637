"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from shop.application.admin_reports import AdminReports
from shop.application.cart_manager import CartManager
from shop.application.checkout import CheckoutHandler
from shop.application.notification_inbox import NotificationInbox
from shop.application.order_queries import OrderQueries
from shop.application.product_ledger import ProductLedger
from shop.application.user_directory import UserDirectory
from shop.domain.service.notification_emitter import NotificationEmitter
from shop.infrastructure.persistence.csv_audit_repository import CsvAuditRepository
from shop.infrastructure.persistence.csv_cart_repository import CsvCartRepository
from shop.infrastructure.persistence.csv_notification_repository import (
    CsvNotificationRepository,
)
from shop.infrastructure.persistence.csv_order_repository import CsvOrderRepository
from shop.infrastructure.persistence.csv_payment_repository import CsvPaymentRepository
from shop.infrastructure.persistence.csv_product_repository import CsvProductRepository
from shop.infrastructure.persistence.csv_reorder_repository import CsvReorderRepository
from shop.infrastructure.persistence.csv_row_store import CsvRowStore
from shop.infrastructure.persistence.csv_user_repository import CsvUserRepository

DATA_DIR_ENV = "SHOP_DATA_DIR"

# Default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    if override := os.getenv(DATA_DIR_ENV):
        return Path(override)
    return _DEFAULT_DATA_DIR


def row_store() -> CsvRowStore:
    return CsvRowStore(data_dir())


def notification_emitter(store: CsvRowStore | None = None) -> NotificationEmitter:
    store = store or row_store()
    return NotificationEmitter(
        user_repo=CsvUserRepository(store),
        notification_repo=CsvNotificationRepository(store),
        reorder_repo=CsvReorderRepository(store),
    )


def product_ledger(store: CsvRowStore | None = None) -> ProductLedger:
    store = store or row_store()
    return ProductLedger(
        product_repo=CsvProductRepository(store),
        audit_repo=CsvAuditRepository(store),
        emitter=notification_emitter(store),
    )


def cart_manager(store: CsvRowStore | None = None) -> CartManager:
    store = store or row_store()
    return CartManager(
        cart_repo=CsvCartRepository(store),
        product_repo=CsvProductRepository(store),
    )


def checkout_handler() -> CheckoutHandler:
    store = row_store()
    return CheckoutHandler(
        cart_manager=cart_manager(store),
        ledger=product_ledger(store),
        order_repo=CsvOrderRepository(store),
        payment_repo=CsvPaymentRepository(store),
        emitter=notification_emitter(store),
    )


def order_queries() -> OrderQueries:
    store = row_store()
    return OrderQueries(
        order_repo=CsvOrderRepository(store),
        payment_repo=CsvPaymentRepository(store),
    )


def notification_inbox() -> NotificationInbox:
    return NotificationInbox(CsvNotificationRepository(row_store()))


def user_directory() -> UserDirectory:
    return UserDirectory(CsvUserRepository(row_store()))


def admin_reports() -> AdminReports:
    store = row_store()
    return AdminReports(
        audit_repo=CsvAuditRepository(store),
        reorder_repo=CsvReorderRepository(store),
        notification_repo=CsvNotificationRepository(store),
    )
