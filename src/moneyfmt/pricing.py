"""Cent arithmetic for prices shown to shoppers.

All amounts are integers in minor units. Rounding matches the storefront's
integer rounding: halves go towards positive infinity, so ``2.5 -> 3`` and
``-2.5 -> -2``.
"""
from __future__ import annotations

import math
from typing import Iterable

from .errors import MixedCurrencies
from .types import CartLine, PriceRange, PriceType


def pricing_delta_cents(
    base_price_cents: int,
    price_type: PriceType | str | None,
    price_value: float | None,
) -> int:
    """Extra cents a custom option adds on top of a variant's price.

    ``"fixed"`` values are in major units (``1.5`` adds 150 cents).
    ``"percent"`` values are a percentage of ``base_price_cents``.
    A missing type or value, or an unknown type, adds nothing.
    """
    if not price_type or price_value is None:
        return 0
    if price_type == "fixed":
        return _round_half_up(price_value * 100)
    if price_type == "percent":
        return _round_half_up(base_price_cents * (price_value / 100))
    return 0


def line_total_cents(line: CartLine) -> int:
    return line.total_cents


def subtotal_cents(lines: Iterable[CartLine]) -> int:
    """Sum of unit price times quantity over all cart lines.

    Raises:
        MixedCurrencies: the lines are not all in the same currency.
    """
    lines = list(lines)
    currencies = {line.currency.upper() for line in lines}
    if len(currencies) > 1:
        raise MixedCurrencies(currencies)
    return sum(line.total_cents for line in lines)


def price_range(prices_cents: Iterable[int], currency: str = "EUR") -> PriceRange | None:
    """Build the price range of a set of variant prices, or None if there are none."""
    prices = list(prices_cents)
    if not prices:
        return None
    return PriceRange(min_cents=min(prices), max_cents=max(prices), currency=currency)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
