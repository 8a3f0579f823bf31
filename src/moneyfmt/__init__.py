"""moneyfmt: locale-aware formatting for amounts stored in minor units."""
from .errors import InvalidCurrencyCode, InvalidLocale, MixedCurrencies, MoneyFormatError
from .format import (
    DEFAULT_CURRENCY,
    format_money,
    format_money_lenient,
    format_money_range,
    to_major_string,
)
from .locales import resolve_locale
from .pricing import (
    line_total_cents,
    price_range,
    pricing_delta_cents,
    subtotal_cents,
)
from .types import CartLine, PriceRange

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CURRENCY",
    "format_money",
    "format_money_lenient",
    "format_money_range",
    "to_major_string",
    "resolve_locale",
    "pricing_delta_cents",
    "line_total_cents",
    "subtotal_cents",
    "price_range",
    "CartLine",
    "PriceRange",
    "MoneyFormatError",
    "InvalidCurrencyCode",
    "InvalidLocale",
    "MixedCurrencies",
]
