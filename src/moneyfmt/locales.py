"""Locale resolution for money formatting.

Formatting follows the locale of the environment the code runs in. The
environment is read on every call so a process can switch locale without
re-importing anything:

1. an explicit ``locale`` argument
2. ``MONEYFMT_LOCALE``
3. the POSIX variables (``LC_MONETARY``, ``LC_NUMERIC``, ``LANGUAGE``,
   ``LC_ALL``, ``LC_CTYPE``, ``LANG``)
4. ``en_US``
"""
from __future__ import annotations

import os
import sys

from babel.core import Locale, UnknownLocaleError, default_locale

from .errors import InvalidLocale

LOCALE_ENV_VAR = "MONEYFMT_LOCALE"
FALLBACK_LOCALE = "en_US"

_POSIX_CATEGORIES = ("LC_MONETARY", "LC_NUMERIC")


def resolve_locale(locale: Locale | str | None = None) -> Locale:
    """Return the Babel ``Locale`` money should be formatted in.

    Args:
        locale: Explicit override. Accepts a ``Locale`` or an identifier
            such as ``"de_DE"``, ``"de-DE"`` or ``"de_DE.UTF-8"``.

    Raises:
        InvalidLocale: ``locale`` was given but is not a known locale.
    """
    if isinstance(locale, Locale):
        return locale
    if locale is not None:
        try:
            return _parse(locale)
        except (UnknownLocaleError, ValueError, TypeError) as exc:
            raise InvalidLocale(locale, str(exc)) from exc

    source, identifier = _environment_locale()
    if identifier is None:
        return Locale.parse(FALLBACK_LOCALE)
    try:
        return _parse(identifier)
    except (UnknownLocaleError, ValueError) as exc:
        _log_locale_fallback(identifier, source, exc)
        return Locale.parse(FALLBACK_LOCALE)


def _environment_locale() -> tuple[str, str | None]:
    """Find the locale identifier configured in the environment, and where it came from."""
    override = os.environ.get(LOCALE_ENV_VAR, "").strip()
    if override:
        return LOCALE_ENV_VAR, override
    # default_locale() takes a single category name before Babel 2.17
    for category in _POSIX_CATEGORIES:
        if os.environ.get(category):
            return category, default_locale(category)
    return "POSIX", default_locale()


def _parse(identifier: str) -> Locale:
    if isinstance(identifier, str):
        identifier = identifier.strip().replace("-", "_")
    return Locale.parse(identifier)


def _log_locale_fallback(identifier: str, source: str, exc: Exception) -> None:
    """Emit structured MONEYFMT_LOCALE_FALLBACK log line to stderr."""
    parts = [
        "MONEYFMT_LOCALE_FALLBACK",
        f"locale={identifier}",
        f"fallback={FALLBACK_LOCALE}",
        f"source={source}",
        f"error={type(exc).__name__}",
    ]
    print(" ".join(parts), file=sys.stderr)
