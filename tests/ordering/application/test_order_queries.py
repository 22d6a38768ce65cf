"""Application tests for order history listing."""

import pytest

from breadboard.errors import AuthRequired
from breadboard.ordering.cart.engine import add_to_cart
from breadboard.ordering.order.engine import list_orders, place_order


def _numbers(orders):
    return [order.order_number for order in orders]


class TestListOrders:
    def test_most_recent_first(self, buyer_id):
        assert _numbers(list_orders(buyer_id)) == ["BB-2024-003", "BB-2024-002", "BB-2024-001"]

    def test_new_orders_come_first(self, buyer_id):
        add_to_cart(buyer_id, "prod-008", 3)
        place_order(buyer_id, "addr-001")

        assert _numbers(list_orders(buyer_id))[0] == "BB-2024-004"

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("delivered", ["BB-2024-001"]),
            ("preparing", ["BB-2024-002"]),
            ("placed", ["BB-2024-003"]),
            ("cancelled", []),
            ("all", ["BB-2024-003", "BB-2024-002", "BB-2024-001"]),
            (None, ["BB-2024-003", "BB-2024-002", "BB-2024-001"]),
            ("shipped", []),
        ],
    )
    def test_status_filter(self, buyer_id, status, expected):
        assert _numbers(list_orders(buyer_id, status)) == expected

    def test_only_own_orders(self, other_buyer):
        assert list_orders(other_buyer.user.id) == []

    def test_requires_user(self):
        with pytest.raises(AuthRequired):
            list_orders(None)
