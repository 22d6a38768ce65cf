"""Order number sequence.

One stored counter shared by every user. Callers draw from it while
holding ``order_number_lock`` so no two orders get the same number.
"""

from protean.fields import Integer, String
from protean.utils.globals import current_domain

from breadboard.domain import breadboard
from breadboard.ordering.order.order import Order

ORDER_SEQUENCE = "orders"


@breadboard.aggregate
class OrderNumberSequence:
    name = String(required=True, max_length=50, unique=True)
    last_value = Integer(default=0, min_value=0)

    def next_value(self) -> int:
        self.last_value += 1
        return self.last_value


@breadboard.repository(part_of=OrderNumberSequence)
class OrderNumberSequenceRepository:
    def find_by_name(self, name: str) -> OrderNumberSequence | None:
        results = self._dao.query.filter(name=name).all().items
        return results[0] if results else None


def order_sequence(start_at: int | None = None) -> OrderNumberSequence:
    """The shared sequence, created on first use.

    A new sequence starts after ``start_at``, or after the number of orders
    already stored when no start is given.
    """
    repo = current_domain.repository_for(OrderNumberSequence)
    sequence = repo.find_by_name(ORDER_SEQUENCE)
    if sequence is None:
        if start_at is None:
            start_at = current_domain.repository_for(Order).count()
        sequence = OrderNumberSequence(name=ORDER_SEQUENCE, last_value=start_at)
    return sequence
