"""Shared currency formatting utility.

Amounts are stored as integers in minor units (cents). This module is the one
place they are turned into display text:

1. Divide by 100 to get major units (the same divisor for every currency)
2. Round to at most 2 fraction digits, halves away from zero
3. Render with the locale's standard currency pattern (Babel / CLDR)
4. Show at least the currency's own number of fraction digits, capped at 2
"""
from __future__ import annotations

import math
import sys
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from babel.core import Locale
from babel.numbers import format_currency, get_currency_precision, is_currency

from .errors import InvalidCurrencyCode
from .locales import resolve_locale
from .pricing import price_range

DEFAULT_CURRENCY = "EUR"
MINOR_UNITS_PER_MAJOR = 100
MAX_FRACTION_DIGITS = 2


def format_money(
    amount_minor: int | float,
    currency: str = DEFAULT_CURRENCY,
    *,
    locale: Locale | str | None = None,
) -> str:
    """Format an amount in minor units as a locale-aware currency string.

    Args:
        amount_minor: Amount in cents (or the currency's equivalent).
        currency: ISO 4217 code, case-insensitive.
        locale: Override for the environment's locale (see ``resolve_locale``).

    Raises:
        InvalidCurrencyCode: ``currency`` is not a known currency.

    Example::

        >>> format_money(12345, "USD", locale="en_US")
        '$123.45'
        >>> format_money(123456, "EUR", locale="de_DE")
        '1.234,56\\xa0€'
    """
    amount = amount_minor / MINOR_UNITS_PER_MAJOR
    code = _normalize_currency(currency)
    return format_currency(
        _round_major(amount),
        code,
        locale=resolve_locale(locale),
        currency_digits=get_currency_precision(code) <= MAX_FRACTION_DIGITS,
        decimal_quantization=False,
    )


def format_money_range(
    prices_cents: Iterable[int],
    currency: str = DEFAULT_CURRENCY,
    *,
    locale: Locale | str | None = None,
    empty: str = "N/A",
) -> str:
    """Format the price span of a product's variants.

    Returns ``empty`` for no prices, a single amount when all prices are
    equal, and ``"<min> - <max>"`` otherwise.
    """
    bounds = price_range(prices_cents, currency)
    if bounds is None:
        return empty

    resolved = resolve_locale(locale)
    low = format_money(bounds.min_cents, bounds.currency, locale=resolved)
    if bounds.is_single:
        return low
    high = format_money(bounds.max_cents, bounds.currency, locale=resolved)
    return f"{low} - {high}"


def format_money_lenient(
    amount_minor: int | float | None,
    currency: str | None = DEFAULT_CURRENCY,
    *,
    locale: Locale | str | None = None,
    log_fallbacks: bool = True,
) -> str:
    """Cart formatter that never fails on a bad currency code.

    Unlike format_money(), amounts are shown with the currency's own number
    of fraction digits (JPY 150 -> "¥2"). Missing or NaN amounts count as 0
    and a missing currency as EUR. An unknown currency renders as plain
    ``"<amount> <currency>"`` and emits a MONEYFMT_FALLBACK line to stderr
    (unless ``log_fallbacks`` is False).
    """
    if not amount_minor or math.isnan(amount_minor):
        amount_minor = 0
    currency = currency or DEFAULT_CURRENCY
    try:
        code = _normalize_currency(currency)
        precision = get_currency_precision(code)
        return format_currency(
            _round_major(amount_minor / MINOR_UNITS_PER_MAJOR, precision),
            code,
            locale=resolve_locale(locale),
        )
    except InvalidCurrencyCode as exc:
        if log_fallbacks:
            _log_fallback(amount_minor, currency, exc)
        return f"{_plain_number(amount_minor / MINOR_UNITS_PER_MAJOR)} {currency}"


def to_major_string(amount_minor: int) -> str:
    """Major units with two decimals and no symbol, for form inputs (1234 -> "12.34")."""
    return f"{amount_minor / MINOR_UNITS_PER_MAJOR:.{MAX_FRACTION_DIGITS}f}"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _normalize_currency(currency: str) -> str:
    if not isinstance(currency, str):
        raise InvalidCurrencyCode(currency)
    code = currency.upper()
    if not is_currency(code):
        raise InvalidCurrencyCode(currency)
    return code


def _round_major(amount: float, digits: int = MAX_FRACTION_DIGITS) -> Decimal:
    """Round half away from zero to ``digits`` places. NaN and infinity pass through to Babel."""
    value = Decimal(str(amount))
    if not value.is_finite():
        return value
    return value.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)


def _plain_number(value: float) -> str:
    # 5.0 -> "5", 12.34 -> "12.34"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _log_fallback(amount_minor: int | float, currency: str, exc: InvalidCurrencyCode) -> None:
    """Emit structured MONEYFMT_FALLBACK log line to stderr."""
    parts = [
        "MONEYFMT_FALLBACK",
        f"amount={amount_minor}",
        f"currency={currency}",
        f"reason={exc.code}",
    ]
    print(" ".join(parts), file=sys.stderr)
