"""Unit tests for moneyfmt.pricing and the dataclasses it works on."""
from __future__ import annotations

import pytest

from moneyfmt.errors import MixedCurrencies
from moneyfmt.pricing import (
    line_total_cents,
    price_range,
    pricing_delta_cents,
    subtotal_cents,
)
from moneyfmt.types import CartLine, PriceRange


# ---------------------------------------------------------------------------
# pricing_delta_cents
# ---------------------------------------------------------------------------

class TestPricingDelta:
    def test_fixed_in_major_units(self):
        assert pricing_delta_cents(1999, "fixed", 1.5) == 150

    def test_fixed_float_noise_rounds(self):
        assert pricing_delta_cents(0, "fixed", 1.15) == 115

    def test_percent_of_base(self):
        assert pricing_delta_cents(1999, "percent", 10) == 200

    def test_percent_half_rounds_up(self):
        assert pricing_delta_cents(5, "percent", 50) == 3

    def test_negative_half_rounds_towards_positive(self):
        assert pricing_delta_cents(5, "percent", -50) == -2

    def test_missing_type(self):
        assert pricing_delta_cents(1000, None, 5) == 0
        assert pricing_delta_cents(1000, "", 5) == 0

    def test_missing_value(self):
        assert pricing_delta_cents(1000, "fixed", None) == 0

    def test_zero_value(self):
        assert pricing_delta_cents(1000, "percent", 0) == 0

    def test_unknown_type(self):
        assert pricing_delta_cents(1000, "bogus", 5) == 0


# ---------------------------------------------------------------------------
# Cart totals
# ---------------------------------------------------------------------------

class TestCartTotals:
    def test_line_total(self):
        line = CartLine(unit_price_cents=1250, quantity=3)
        assert line.total_cents == 3750
        assert line_total_cents(line) == 3750

    def test_subtotal(self):
        lines = [CartLine(1000, 2), CartLine(250, 3)]
        assert subtotal_cents(lines) == 2750

    def test_subtotal_empty(self):
        assert subtotal_cents([]) == 0

    def test_subtotal_rejects_mixed_currencies(self):
        lines = [CartLine(1000, 1, "EUR"), CartLine(500, 2, "USD")]
        with pytest.raises(MixedCurrencies, match="EUR, USD") as info:
            subtotal_cents(lines)
        assert info.value.code == "MIXED_CURRENCIES"
        assert info.value.currencies == {"EUR", "USD"}

    def test_subtotal_currency_case_insensitive(self):
        assert subtotal_cents([CartLine(100, 1, "usd"), CartLine(200, 1, "USD")]) == 300

    def test_default_currency(self):
        assert CartLine(100, 1).currency == "EUR"


# ---------------------------------------------------------------------------
# price_range
# ---------------------------------------------------------------------------

class TestPriceRange:
    def test_empty(self):
        assert price_range([]) is None

    def test_min_max(self):
        assert price_range([300, 100, 200], "USD") == PriceRange(100, 300, "USD")

    def test_single(self):
        bounds = price_range([500, 500])
        assert bounds.is_single is True
        assert bounds.currency == "EUR"

    def test_spread_not_single(self):
        assert price_range([1, 2]).is_single is False
