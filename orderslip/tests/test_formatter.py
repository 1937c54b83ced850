"""Tests for draft formatting helpers."""

from datetime import date
from decimal import Decimal

import pytest
from orderslip.domain.order import FlowerCategory, OrderDraft, empty_flower_counts
from orderslip.slip.formatter import file_under_time, format_currency, format_order_draft


def test_format_currency() -> None:
    assert format_currency(Decimal("3200")) == "₱3,200.00"
    assert format_currency(Decimal("1234567.5")) == "₱1,234,567.50"
    assert format_currency(-150) == "-₱150.00"


@pytest.mark.parametrize(
    ("time_str", "expected"),
    [
        ("14:00", "1:00 PM - 2:00 PM"),
        ("14:30", "1:00 PM - 2:00 PM"),
        ("12:00", "11:00 AM - 12:00 PM"),
        ("13:00", "12:00 PM - 1:00 PM"),
        ("00:30", "11:00 PM - 12:00 AM"),
        ("01:00", "12:00 AM - 1:00 AM"),
    ],
)
def test_file_under_time(time_str: str, expected: str) -> None:
    assert file_under_time(time_str) == expected


def test_file_under_time_bad_input() -> None:
    assert file_under_time("") == ""
    assert file_under_time("soon") == "Invalid Time"


def test_format_order_draft() -> None:
    flowers = empty_flower_counts()
    flowers[FlowerCategory.LOCAL_RED] = 24
    draft = OrderDraft(
        target_date=date(2026, 10, 20),
        delivered_to="Ben",
        total=Decimal("3500"),
        status="UNPAID",
        flowers=flowers,
        notes="ring twice\nno tags",
    )

    lines = format_order_draft(draft).split("\n")

    assert lines[0].split() == ["Type", "DELIVERY"]
    assert "Date          2026-10-20" in lines
    assert "Total         ₱3,500.00" in lines
    assert "Flowers:" in lines
    assert any(line.split() == ["localRed", "24"] for line in lines)
    assert not any(line.split()[:1] == ["sunflower"] for line in lines)
    assert lines[-3:] == ["Notes:", "  ring twice", "  no tags"]
    assert not any(line.startswith("Balance") for line in lines)
