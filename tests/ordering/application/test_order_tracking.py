"""Application tests for order reads and simulated fulfilment progress."""

import random

import pytest

from breadboard.errors import AuthRequired, OrderNotFound
from breadboard.ordering.order.engine import get_order
from breadboard.ordering.order.order import PROGRESSION, OrderStatus
from breadboard.ordering.order.tracking import FulfillmentSimulator, set_simulator

STATUS_ORDER = [status.value for status in PROGRESSION]


def _always_advance():
    set_simulator(FulfillmentSimulator(probability=1.0))


def _never_advance():
    set_simulator(FulfillmentSimulator(probability=0.0))


class TestGetOrder:
    def test_read_without_progress(self, buyer_id):
        _never_advance()

        order = get_order(buyer_id, "order-003")

        assert order.order_number == "BB-2024-003"
        assert order.status == OrderStatus.PLACED.value

    def test_read_advances_one_step(self, buyer_id):
        _always_advance()

        assert get_order(buyer_id, "order-003").status == OrderStatus.CONFIRMED.value
        assert get_order(buyer_id, "order-003").status == OrderStatus.PREPARING.value

    def test_progress_is_persisted(self, buyer_id):
        _always_advance()
        get_order(buyer_id, "order-002")

        _never_advance()
        assert get_order(buyer_id, "order-002").status == OrderStatus.READY.value

    def test_delivery_stamps_delivered_date(self, buyer_id):
        _always_advance()
        for _ in range(4):
            order = get_order(buyer_id, "order-003")

        assert order.status == OrderStatus.DELIVERED.value
        assert order.delivered_date is not None

    def test_delivered_orders_stay_delivered(self, buyer_id):
        _always_advance()

        order = get_order(buyer_id, "order-001")

        assert order.status == OrderStatus.DELIVERED.value
        assert order.delivered_date.year == 2024

    def test_random_progress_never_skips_a_step(self, buyer_id):
        set_simulator(FulfillmentSimulator(rng=random.Random(7)))

        seen = []
        for _ in range(200):
            seen.append(get_order(buyer_id, "order-003").status)

        for previous, current in zip(seen, seen[1:]):
            step = STATUS_ORDER.index(current) - STATUS_ORDER.index(previous)
            assert step in (0, 1)
        assert seen[-1] == OrderStatus.DELIVERED.value

    def test_unknown_order(self, buyer_id):
        with pytest.raises(OrderNotFound):
            get_order(buyer_id, "order-999")

    def test_other_users_order_is_not_found(self, other_buyer):
        with pytest.raises(OrderNotFound):
            get_order(other_buyer.user.id, "order-001")

    def test_requires_user(self):
        with pytest.raises(AuthRequired):
            get_order(None, "order-001")


class TestFulfillmentSimulator:
    def test_draw_below_probability_advances(self):
        class Fixed(random.Random):
            def random(self):
                return 0.29

        assert FulfillmentSimulator(rng=Fixed()).should_advance() is True

    def test_draw_at_probability_does_not(self):
        class Fixed(random.Random):
            def random(self):
                return 0.3

        assert FulfillmentSimulator(rng=Fixed()).should_advance() is False
