"""Application service: Product Ledger.

Owns every mutation of the product table.  Admin mutations (create,
price, stock, delete) are audited and fan out notifications; the stock
primitives used by checkout (``decrement_stock`` / ``increment_stock``)
only persist.

Each mutation is a read-modify-write of the whole product table, so it
re-reads current state under the table lock before applying its change.
The lock belongs to the storage, not to the ledger: every ledger over the
same table (an admin command and a checkout, say) waits on it.  Validation
happens before anything is written: a rejected call leaves no trace.
"""

from __future__ import annotations

import json
import logging
import uuid
from decimal import Decimal

from shop.domain.exceptions import EntityNotFoundError, InvalidQuantityError, ValidationError
from shop.domain.model.audit import AuditAction, AuditEntry
from shop.domain.model.notification import NotificationType
from shop.domain.model.product import Product
from shop.domain.model.reorder import is_low_stock
from shop.domain.model.value_objects import Money
from shop.domain.repository.audit_repository import AuditRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.notification_emitter import NotificationEmitter

logger = logging.getLogger(__name__)


class ProductLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        audit_repo: AuditRepository,
        emitter: NotificationEmitter,
    ) -> None:
        self._product_repo = product_repo
        self._audit_repo = audit_repo
        self._emitter = emitter

    # --- Queries --------------------------------------------------------------

    def list_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_by_id(self, product_id: str) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product {product_id} not found")
        return product

    # --- Admin mutations ------------------------------------------------------

    def create(
        self,
        admin_id: str,
        name: str,
        price: str | int | Decimal,
        stock_quantity: int,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        money = Money.of(price)
        _require_stock_level(stock_quantity)

        product = Product(
            id=str(uuid.uuid4()),
            name=name.strip(),
            price=money,
            stock_quantity=stock_quantity,
        )
        self._product_repo.save(product)

        self._audit_repo.append(
            AuditEntry.record(
                admin_id,
                AuditAction.CREATE,
                product.id,
                new_value=_snapshot(product),
            )
        )
        logger.info("Admin %s created product %s (%s)", admin_id, product.id, product.name)
        return product

    def change_price(
        self, product_id: str, new_price: str | int | Decimal, admin_id: str
    ) -> Product:
        """Set a new price, audit it and tell every client."""
        money = Money.of(new_price)

        with self._product_repo.locked():
            product = self.get_by_id(product_id)
            old_price = product.price
            product.update_price(money)
            self._product_repo.save(product)

        self._audit_repo.append(
            AuditEntry.record(
                admin_id,
                AuditAction.UPDATE_PRICE,
                product_id,
                old_value=old_price.to_text(),
                new_value=money.to_text(),
            )
        )
        self._emitter.notify_clients(
            NotificationType.PRODUCT_UPDATED,
            f'Product "{product.name}" (ID: {product_id}) price changed '
            f"from {old_price} to {money}.",
        )
        logger.info(
            "Admin %s changed price of %s: %s -> %s",
            admin_id, product_id, old_price, money,
        )
        return product

    def change_stock(self, product_id: str, new_quantity: int, admin_id: str) -> Product:
        """Overwrite the stock level, audit it, and flag it if low."""
        _require_stock_level(new_quantity)

        with self._product_repo.locked():
            product = self.get_by_id(product_id)
            old_quantity = product.stock_quantity
            product.set_stock(new_quantity)
            self._product_repo.save(product)

        self._audit_repo.append(
            AuditEntry.record(
                admin_id,
                AuditAction.UPDATE_STOCK,
                product_id,
                old_value=str(old_quantity),
                new_value=str(new_quantity),
            )
        )
        if is_low_stock(new_quantity):
            self._emitter.flag_low_stock(
                product,
                f'Product "{product.name}" (ID: {product_id}) is low on stock '
                f"(now: {new_quantity}).",
            )
        logger.info(
            "Admin %s changed stock of %s: %d -> %d",
            admin_id, product_id, old_quantity, new_quantity,
        )
        return product

    def delete_by_id(self, product_id: str, admin_id: str) -> None:
        """Remove a product, audit it and tell every client it is gone."""
        with self._product_repo.locked():
            product = self.get_by_id(product_id)
            self._product_repo.delete(product_id)

        self._audit_repo.append(
            AuditEntry.record(
                admin_id,
                AuditAction.DELETE,
                product_id,
                old_value=_snapshot(product),
            )
        )
        self._emitter.notify_clients(
            NotificationType.PRODUCT_UPDATED,
            f'Product "{product.name}" (ID: {product_id}) has been removed '
            f"from the catalog.",
        )
        logger.info("Admin %s deleted product %s", admin_id, product_id)

    # --- Stock primitives (checkout) ------------------------------------------

    def decrement_stock(self, product_id: str, qty: int) -> Product:
        """Take *qty* units out of stock and return the updated product.

        Raises InsufficientStockError without writing anything when the
        product holds fewer than *qty* units.
        """
        with self._product_repo.locked():
            product = self.get_by_id(product_id)
            product.decrement_stock(qty)
            self._product_repo.save(product)
        logger.debug("Stock of %s decremented by %d to %d", product_id, qty, product.stock_quantity)
        return product

    def increment_stock(self, product_id: str, qty: int) -> Product:
        """Put *qty* units back; used for restocking and checkout rollback."""
        with self._product_repo.locked():
            product = self.get_by_id(product_id)
            product.increment_stock(qty)
            self._product_repo.save(product)
        logger.debug("Stock of %s incremented by %d to %d", product_id, qty, product.stock_quantity)
        return product


def _require_stock_level(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise InvalidQuantityError(f"Stock must be an integer, got {quantity!r}")
    if quantity < 0:
        raise InvalidQuantityError("Stock cannot be negative")


def _snapshot(product: Product) -> str:
    return json.dumps(
        {
            "name": product.name,
            "price": product.price.to_text(),
            "stockQuantity": product.stock_quantity,
        }
    )
