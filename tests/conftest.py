"""Shared fixtures: pin the locale so output does not depend on the host."""
from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def en_us_locale(monkeypatch):
    monkeypatch.setenv("MONEYFMT_LOCALE", "en_US")
