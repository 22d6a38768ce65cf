"""Minimum order quantity (MOQ) policy.

Maps a SKU to its ordering rule and checks requested quantities against it.
A quantity ``q`` is acceptable for a rule ``(min, increment)`` iff
``q >= min`` and ``(q - min) % increment == 0``. The policy is pure and
independent of catalogue state, so the cart uses it authoritatively while
clients may call it for advisory previews.

Provides get_policy() / set_policy() to swap the active configuration;
the default policy uses the seeded MOQ table.
"""

import math
from dataclasses import dataclass
from enum import Enum


class MOQReason(Enum):
    BELOW_MINIMUM = "below minimum"
    INVALID_INCREMENT = "invalid increment"


@dataclass(frozen=True)
class MOQRule:
    min_order_qty: int = 1
    increment: int = 1
    default_qty: int = 1

    def __post_init__(self):
        if self.min_order_qty < 1:
            raise ValueError(f"min_order_qty must be at least 1, got {self.min_order_qty}")
        if self.increment < 1:
            raise ValueError(f"increment must be at least 1, got {self.increment}")

    def next_valid(self, quantity: int) -> int:
        """Smallest acceptable quantity that is >= ``quantity``."""
        if quantity <= self.min_order_qty:
            return self.min_order_qty
        steps = math.ceil((quantity - self.min_order_qty) / self.increment)
        return self.min_order_qty + steps * self.increment


@dataclass(frozen=True)
class MOQCheck:
    ok: bool
    reason: MOQReason | None = None
    suggested: int | None = None


ACCEPTED = MOQCheck(ok=True)


class MOQPolicy:
    def __init__(self, config: dict[str, dict] | None = None) -> None:
        self._rules: dict[str, MOQRule] = {}
        for sku, entry in (config or {}).items():
            self._rules[sku] = MOQRule(
                min_order_qty=entry.get("min_order_qty") or 1,
                increment=entry.get("increment") or 1,
                default_qty=entry.get("default_qty") or 1,
            )

    def resolve(self, sku: str) -> MOQRule:
        """Rule for ``sku``; unconfigured SKUs get the all-ones rule."""
        return self._rules.get(sku, MOQRule())

    def validate(self, sku: str, quantity: int) -> MOQCheck:
        rule = self.resolve(sku)

        if quantity < rule.min_order_qty:
            return MOQCheck(ok=False, reason=MOQReason.BELOW_MINIMUM, suggested=rule.min_order_qty)

        if (quantity - rule.min_order_qty) % rule.increment != 0:
            return MOQCheck(ok=False, reason=MOQReason.INVALID_INCREMENT, suggested=rule.next_valid(quantity))

        return ACCEPTED

    def normalize(self, sku: str, quantity: int) -> int:
        """Advisory correction for client previews: the quantity itself when valid."""
        check = self.validate(sku, quantity)
        return quantity if check.ok else check.suggested

    def meets_minimum(self, sku: str, quantity: int) -> bool:
        return quantity >= self.resolve(sku).min_order_qty

    def on_increment(self, sku: str, quantity: int) -> bool:
        rule = self.resolve(sku)
        return (quantity - rule.min_order_qty) % rule.increment == 0


_current_policy: MOQPolicy | None = None


def get_policy() -> MOQPolicy:
    """Return the current MOQ policy. Defaults to the seeded configuration."""
    global _current_policy
    if _current_policy is None:
        from breadboard.seed import MOQ_CONFIG

        _current_policy = MOQPolicy(MOQ_CONFIG)
    return _current_policy


def set_policy(policy: MOQPolicy) -> None:
    """Override the active MOQ policy (useful for tests)."""
    global _current_policy
    _current_policy = policy


def reset_policy() -> None:
    """Reset to the default policy."""
    global _current_policy
    _current_policy = None
