"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared
across users.
"""

from dataclasses import dataclass, field


@dataclass
class BuyerState:
    """Tracks a signed-in buyer through a storefront journey."""

    access_token: str | None = None
    refresh_token: str | None = None
    product_ids: list[str] = field(default_factory=list)
    cart_total: float = 0.0
    payment_reference: str | None = None
    order_id: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"} if self.access_token else {}
