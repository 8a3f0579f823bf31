"""Dataclasses for amounts that get formatted."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

PriceType = Literal["fixed", "percent"]


@dataclass(frozen=True)
class PriceRange:
    """Lowest and highest price among a product's variants."""
    min_cents: int
    max_cents: int
    currency: str = "EUR"

    @property
    def is_single(self) -> bool:
        """True when every variant costs the same."""
        return self.min_cents == self.max_cents


@dataclass(frozen=True)
class CartLine:
    """Single cart item."""
    unit_price_cents: int
    quantity: int
    currency: str = "EUR"

    @property
    def total_cents(self) -> int:
        return self.unit_price_cents * self.quantity
