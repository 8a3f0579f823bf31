"""Error classes for moneyfmt."""
from __future__ import annotations

from babel.numbers import UnknownCurrencyError


class MoneyFormatError(Exception):
    """Base error for moneyfmt operations."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class InvalidCurrencyCode(MoneyFormatError, UnknownCurrencyError):
    """Raised when the currency is not a code known to the CLDR data.

    Subclasses Babel's ``UnknownCurrencyError`` so callers already handling
    Babel errors keep working.
    """

    def __init__(self, currency: object):
        UnknownCurrencyError.__init__(self, currency)
        self.code = "INVALID_CURRENCY_CODE"
        self.currency = currency


class InvalidLocale(MoneyFormatError, ValueError):
    """Raised when an explicitly requested locale cannot be parsed."""

    def __init__(self, identifier: object, reason: str):
        super().__init__("INVALID_LOCALE", f"Invalid locale {identifier!r}: {reason}")
        self.identifier = identifier


class MixedCurrencies(MoneyFormatError, ValueError):
    """Raised when amounts in different currencies would be added together."""

    def __init__(self, currencies: set[str]):
        listed = ", ".join(sorted(currencies))
        super().__init__("MIXED_CURRENCIES", f"Cannot add amounts in different currencies: {listed}")
        self.currencies = currencies
