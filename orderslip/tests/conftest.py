"""Shared pytest fixtures for orderslip tests."""

from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed reference date so year-less slip dates are deterministic."""
    return date(2026, 10, 19)
