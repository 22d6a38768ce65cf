"""Cart and order pricing rules."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from breadboard.config import get_settings

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    """Round a currency amount to cents, halves away from zero."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def line_total(unit_price: float, quantity: int) -> float:
    return round2(unit_price * quantity)


@dataclass(frozen=True)
class Totals:
    subtotal: float
    tax: float
    shipping: float
    total: float


def compute_totals(line_totals) -> Totals:
    """Derive subtotal, tax, shipping and total from line totals.

    Shipping is free only when the subtotal is strictly above the threshold.
    """
    settings = get_settings()

    subtotal = round2(sum(line_totals, 0.0))
    tax = round2(subtotal * settings.tax_rate)
    shipping = 0.0 if subtotal > settings.free_shipping_threshold else settings.flat_shipping_fee
    total = round2(subtotal + tax + shipping)

    return Totals(subtotal=subtotal, tax=tax, shipping=shipping, total=total)
