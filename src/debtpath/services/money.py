"""Cent rounding and calendar helpers shared by the schedule builders."""

from __future__ import annotations

import calendar
from datetime import date
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
# Float noise below this is dropped before rounding up.
NOISE = Decimal("0.000000001")


def round_cents(amount: float) -> float:
    """Round to cents half-up, returning a float.

    ``repr`` keeps the shortest float text so 2.675 rounds to 2.68 instead of
    following its binary expansion down to 2.67.
    """

    return float(Decimal(repr(float(amount))).quantize(CENT, rounding=ROUND_HALF_UP))


def ceil_cents(amount: float) -> float:
    """Round up to the next cent, returning a float."""

    value = Decimal(repr(float(amount))).quantize(NOISE, rounding=ROUND_HALF_UP)
    return float(value.quantize(CENT, rounding=ROUND_CEILING))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""

    return int(Decimal(repr(float(value))).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def add_months(value: date, months: int) -> date:
    """Return ``value`` shifted by ``months``, clamping the day to the month end."""

    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
