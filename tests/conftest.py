"""Shared pytest configuration for regbits tests."""

from __future__ import annotations

import pytest

from regbits.base import DEFAULT_WIDTH_ENV, Width


@pytest.fixture(autouse=True)
def _clear_default_width(monkeypatch):
    """Keep the host environment from changing the default width."""
    monkeypatch.delenv(DEFAULT_WIDTH_ENV, raising=False)
    monkeypatch.setattr("regbits.base._warned_env_value", None)


@pytest.fixture(params=list(Width), ids=lambda w: f"u{int(w)}")
def width(request) -> Width:
    return request.param


@pytest.fixture
def samples(width) -> list[int]:
    """A handful of bit patterns that fit the width."""
    ones = (1 << width) - 1
    return sorted({
        0,
        1,
        ones,
        1 << (width - 1),
        0xAAAAAAAAAAAAAAAA & ones,
        0x5555555555555555 & ones,
        0xD6A1F00D5EED1234 & ones,
        0x800000000000000F & ones,
    })
