# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def latin1_line() -> bytes:
    """A received line that is Latin-1, not UTF-8."""
    return "PRIVMSG #kanal :Grüße aus Köln, ça va?\r\n".encode("latin-1")


@pytest.fixture
def utf8_line() -> bytes:
    """A received line that is already UTF-8."""
    return "PRIVMSG #kanal :Grüße aus Köln, ça va? 日本語 🌍\r\n".encode()
