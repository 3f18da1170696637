"""Integration tests for the ProductLedger use cases.

Runs the real CSV repositories over an in-memory row store.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from shop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    InvalidPriceError,
    InvalidQuantityError,
    ValidationError,
)
from shop.domain.model.audit import AuditAction
from shop.domain.model.notification import NotificationType
from shop.domain.model.user import UserRole
from shop.domain.model.value_objects import Money
from tests.fakes import build_shop


def _setup():
    shop = build_shop()
    shop.add_user("admin", UserRole.ADMIN)
    shop.add_user("alice")
    shop.add_user("bob")
    shop.add_product("p1", price="10.00", stock=20, name="Widget")
    return shop


class TestCreate:

    def test_creates_and_audits(self):
        shop = _setup()
        product = shop.ledger.create("admin", "  Gadget ", "4.50", 7)

        assert product.name == "Gadget"
        assert shop.products.get_by_id(product.id) == product
        (entry,) = shop.audit.list_all()
        assert entry.action == AuditAction.CREATE
        assert entry.target_id == product.id
        assert entry.old_value == ""
        assert json.loads(entry.new_value) == {
            "name": "Gadget", "price": "4.50", "stockQuantity": 7,
        }

    def test_blank_name_rejected(self):
        shop = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            shop.ledger.create("admin", "  ", "1.00", 1)
        assert shop.audit.list_all() == []

    def test_negative_price_rejected(self):
        shop = _setup()
        with pytest.raises(InvalidPriceError):
            shop.ledger.create("admin", "Gadget", "-1", 1)
        assert len(shop.products.list_all()) == 1

    def test_negative_stock_rejected(self):
        shop = _setup()
        with pytest.raises(InvalidQuantityError):
            shop.ledger.create("admin", "Gadget", "1", -1)
        assert shop.audit.list_all() == []


class TestChangePrice:

    def test_persists_audits_and_notifies_clients(self):
        shop = _setup()
        shop.ledger.change_price("p1", "12.5", "admin")

        assert shop.products.get_by_id("p1").price == Money(Decimal("12.5"))
        (entry,) = shop.audit.list_all()
        assert entry.action == AuditAction.UPDATE_PRICE
        assert (entry.old_value, entry.new_value) == ("10.00", "12.5")

        notes = shop.notifications.list_all()
        assert sorted(n.user_id for n in notes) == ["alice", "bob"]
        assert all(n.type == NotificationType.PRODUCT_UPDATED for n in notes)
        assert "from $10.00 to $12.50" in notes[0].text

    def test_negative_price_rejected_without_trace(self):
        shop = _setup()
        with pytest.raises(InvalidPriceError):
            shop.ledger.change_price("p1", -1, "admin")

        assert shop.products.get_by_id("p1").price == Money.of("10.00")
        assert shop.audit.list_all() == []
        assert shop.notifications.list_all() == []

    def test_zero_price_allowed(self):
        shop = _setup()
        shop.ledger.change_price("p1", "0", "admin")
        assert shop.products.get_by_id("p1").price == Money.zero()

    def test_unknown_product(self):
        shop = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            shop.ledger.change_price("nope", "1", "admin")


class TestChangeStock:

    def test_above_threshold_only_audits(self):
        shop = _setup()
        shop.ledger.change_stock("p1", 6, "admin")

        assert shop.stock_of("p1") == 6
        (entry,) = shop.audit.list_all()
        assert entry.action == AuditAction.UPDATE_STOCK
        assert (entry.old_value, entry.new_value) == ("20", "6")
        assert shop.reorders.list_all() == []
        assert shop.notifications.list_all() == []

    def test_at_threshold_alerts_admins_and_requests_reorder(self):
        shop = _setup()
        shop.ledger.change_stock("p1", 5, "admin")

        (request,) = shop.reorders.list_all()
        assert (request.product_id, request.stock_quantity, request.threshold) == ("p1", 5, 5)
        (alert,) = shop.notifications.list_all()
        assert alert.user_id == "admin"
        assert alert.type == NotificationType.LOW_STOCK
        assert "(now: 5)" in alert.text

    def test_negative_rejected_without_trace(self):
        shop = _setup()
        with pytest.raises(InvalidQuantityError, match="cannot be negative"):
            shop.ledger.change_stock("p1", -3, "admin")
        assert shop.stock_of("p1") == 20
        assert shop.audit.list_all() == []


class TestDelete:

    def test_removes_audits_and_notifies_clients(self):
        shop = _setup()
        shop.ledger.delete_by_id("p1", "admin")

        assert shop.products.get_by_id("p1") is None
        (entry,) = shop.audit.list_all()
        assert entry.action == AuditAction.DELETE
        assert json.loads(entry.old_value)["name"] == "Widget"
        assert entry.new_value == ""
        notes = shop.notifications.list_all()
        assert sorted(n.user_id for n in notes) == ["alice", "bob"]
        assert "removed from the catalog" in notes[0].text

    def test_unknown_product(self):
        shop = _setup()
        with pytest.raises(EntityNotFoundError):
            shop.ledger.delete_by_id("nope", "admin")
        assert shop.audit.list_all() == []


class TestStockPrimitives:

    def test_decrement_returns_updated_product(self):
        shop = _setup()
        product = shop.ledger.decrement_stock("p1", 5)
        assert product.stock_quantity == 15
        assert shop.stock_of("p1") == 15

    def test_decrement_past_stock_does_not_mutate(self):
        shop = _setup()
        with pytest.raises(InsufficientStockError):
            shop.ledger.decrement_stock("p1", 21)
        assert shop.stock_of("p1") == 20

    def test_decrement_has_no_side_effects(self):
        shop = _setup()
        shop.ledger.decrement_stock("p1", 19)
        assert shop.audit.list_all() == []
        assert shop.reorders.list_all() == []
        assert shop.notifications.list_all() == []

    def test_increment_restores(self):
        shop = _setup()
        shop.ledger.decrement_stock("p1", 8)
        shop.ledger.increment_stock("p1", 8)
        assert shop.stock_of("p1") == 20

    def test_rereads_stock_written_by_someone_else(self):
        shop = _setup()
        other_ledger = build_shop(shop.store).ledger
        other_ledger.decrement_stock("p1", 15)
        with pytest.raises(InsufficientStockError):
            shop.ledger.decrement_stock("p1", 6)


class TestConcurrentStockChanges:
    """Every read of the product table stalls, so unguarded writers would overlap."""

    def _setup(self, **stock):
        shop = build_shop()
        for product_id, quantity in stock.items():
            shop.add_product(product_id, stock=quantity)
        shop.store.slow_reads("products", 0.05)
        return shop

    def test_different_products_keep_both_decrements(self):
        shop = self._setup(p1=10, p2=10)

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [
                pool.submit(shop.ledger.decrement_stock, "p1", 3),
                pool.submit(shop.ledger.decrement_stock, "p2", 4),
            ]
        for future in futures:
            future.result()

        assert (shop.stock_of("p1"), shop.stock_of("p2")) == (7, 6)

    def test_same_product_keeps_both_decrements(self):
        shop = self._setup(p1=10)

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [pool.submit(shop.ledger.decrement_stock, "p1", 3) for _ in range(2)]
        for future in futures:
            future.result()

        assert shop.stock_of("p1") == 4

    def test_last_units_are_never_oversold(self):
        shop = self._setup(p1=3)

        with ThreadPoolExecutor(max_workers=6) as pool:
            futures = [pool.submit(shop.ledger.decrement_stock, "p1", 1) for _ in range(6)]
        errors = [future.exception() for future in futures]

        assert sum(e is None for e in errors) == 3
        assert sum(isinstance(e, InsufficientStockError) for e in errors) == 3
        assert shop.stock_of("p1") == 0

    def test_separate_ledgers_over_one_store_share_the_lock(self):
        shop = self._setup(p1=10, p2=10)
        other_ledger = build_shop(shop.store).ledger

        with ThreadPoolExecutor(max_workers=2) as pool:
            futures = [
                pool.submit(shop.ledger.decrement_stock, "p1", 2),
                pool.submit(other_ledger.increment_stock, "p2", 5),
            ]
        for future in futures:
            future.result()

        assert (shop.stock_of("p1"), shop.stock_of("p2")) == (8, 15)
