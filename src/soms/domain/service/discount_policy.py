"""Domain service: quantity-tiered discount policy.

A pure function of quantity and unit price.  Range checks (1..20 units,
positive price) belong to command validation and are assumed done.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from soms.domain.model.value_objects import Money

# ---------------------------------------------------------------------------
# Discount tiers
# ---------------------------------------------------------------------------
NO_DISCOUNT = Decimal("0")
MID_TIER_RATE = Decimal("0.10")
TOP_TIER_RATE = Decimal("0.20")

MID_TIER_MIN_QUANTITY = 4
TOP_TIER_MIN_QUANTITY = 10


@dataclass(frozen=True)
class DiscountResult:
    rate: Decimal
    line_total: Money


def discount_rate(quantity: int) -> Decimal:
    if quantity >= TOP_TIER_MIN_QUANTITY:
        return TOP_TIER_RATE
    if quantity >= MID_TIER_MIN_QUANTITY:
        return MID_TIER_RATE
    return NO_DISCOUNT


def compute(quantity: int, unit_price: Money) -> DiscountResult:
    """Return the discount rate and discounted line total for one line."""
    rate = discount_rate(quantity)
    line_total = unit_price * quantity * (Decimal("1") - rate)
    return DiscountResult(rate=rate, line_total=line_total)
