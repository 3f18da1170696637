import pytest

from shop.application.order_queries import OrderQueries
from shop.domain.exceptions import EntityNotFoundError, ForbiddenError
from tests.fakes import build_shop


def _setup():
    shop = build_shop()
    shop.add_user("alice")
    shop.add_user("bob")
    shop.add_product("p1", price="5.00", stock=10)
    shop.cart_manager.add_to_cart("alice", "p1", 2)
    result = shop.checkout.handle("alice")
    return shop, OrderQueries(shop.orders, shop.payments), result


class TestOrderQueries:

    def test_list_for_user(self):
        shop, queries, result = _setup()
        assert [o.id for o in queries.list_for_user("alice")] == [result.order.id]
        assert queries.list_for_user("bob") == []

    def test_get_own_order(self):
        _, queries, result = _setup()
        assert queries.get_order(result.order.id, "alice") == result.order

    def test_get_missing_order(self):
        _, queries, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            queries.get_order("nope", "alice")

    def test_get_someone_elses_order(self):
        _, queries, result = _setup()
        with pytest.raises(ForbiddenError):
            queries.get_order(result.order.id, "bob")

    def test_payments_follow_order_ownership(self):
        _, queries, result = _setup()
        assert queries.get_payments(result.order.id, "alice") == [result.payment]
        with pytest.raises(ForbiddenError):
            queries.get_payments(result.order.id, "bob")
