# garage/services/pricing.py
"""
Dynamic pricing and fee calculation. Pure functions, no DB access.

  dynamic_price: per-hour rate locked in at PARKED, from sector occupancy
  parking_fee  : amount charged at EXIT, from stay duration and that rate
"""

import math
from datetime import timedelta
from decimal import Decimal, ROUND_HALF_UP

from garage.config import settings

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# (exclusive upper bound, multiplier): first match wins
PRICE_TIERS = (
    (0.25, Decimal("0.90")),   # 10% discount
    (0.50, Decimal("1.00")),
    (0.75, Decimal("1.10")),   # 10% markup
)
FULL_TIER_MULTIPLIER = Decimal("1.25")


def occupancy_rate(occupied: int, max_capacity: int) -> float:
    """Occupied ÷ capacity. A sector with no capacity counts as empty."""
    if max_capacity <= 0:
        return 0.0
    return occupied / max_capacity


def price_multiplier(rate: float) -> Decimal:
    for upper_bound, multiplier in PRICE_TIERS:
        if rate < upper_bound:
            return multiplier
    return FULL_TIER_MULTIPLIER


def dynamic_price(base_price: Decimal, rate: float) -> Decimal:
    """Sector base price adjusted for occupancy, rounded to cents."""
    price = Decimal(base_price) * price_multiplier(rate)
    return price.quantize(CENTS, rounding=ROUND_HALF_UP)


def billable_hours(duration: timedelta, grace_minutes: int = None) -> int:
    """
    Whole hours charged for a stay. The grace period is free; everything past it
    is rounded UP to the next hour (31 min → 1h, 90 min → 1h, 91 min → 2h).
    """
    if grace_minutes is None:
        grace_minutes = settings.GRACE_PERIOD_MINUTES
    minutes = duration.total_seconds() / 60
    if minutes <= grace_minutes:
        return 0
    return math.ceil((minutes - grace_minutes) / 60)


def parking_fee(duration: timedelta, applied_base_price: Decimal, grace_minutes: int = None) -> Decimal:
    hours = billable_hours(duration, grace_minutes)
    if hours == 0:
        return ZERO
    return (Decimal(applied_base_price) * hours).quantize(CENTS, rounding=ROUND_HALF_UP)
