"""End-to-end tests for whole order slips.

Each test case consists of files in tests/slips_e2e/:
  - Required pasted text: <name>.txt
  - Required expected results: <name>.expected.json

Expected files list form fields (``OrderDraft.to_dict()`` keys) that must
match, plus ``absent`` fields that must not be set. Money is written as a
string and compared as Decimal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

import pytest
from orderslip.slip.formatter import format_order_draft
from orderslip.slip.order_text_parser import parse_order_text

SLIPS_DIR = Path(__file__).parent / "slips_e2e"

MONEY_FIELDS = {"total", "amountPaid", "balance", "deliveryFee"}


@dataclass(frozen=True)
class E2ECase:
    name: str
    text_path: Path
    expected_path: Path


def find_e2e_test_cases() -> list[E2ECase]:
    """Find test cases by <name>.expected.json next to <name>.txt."""
    test_cases: list[E2ECase] = []
    for expected_path in SLIPS_DIR.glob("*.expected.json"):
        name = expected_path.name.removesuffix(".expected.json")
        text_path = SLIPS_DIR / f"{name}.txt"
        if text_path.exists():
            test_cases.append(E2ECase(name=name, text_path=text_path, expected_path=expected_path))
    return sorted(test_cases, key=lambda c: c.name)


def load_expected(expected_path: Path) -> dict[str, Any]:
    with open(expected_path, encoding="utf-8") as f:
        return json.load(f)


def test_e2e_cases_are_present() -> None:
    assert find_e2e_test_cases(), f"no e2e slips found in {SLIPS_DIR}"


@pytest.mark.parametrize("case", find_e2e_test_cases(), ids=lambda c: c.name)
def test_e2e_slip(case: E2ECase, today: date) -> None:
    expected = load_expected(case.expected_path)
    draft = parse_order_text(case.text_path.read_text(encoding="utf-8"), today=today)
    actual = draft.to_dict()

    for key, want in expected["fields"].items():
        assert key in actual, f"{case.name}: missing {key}"
        if key in MONEY_FIELDS:
            assert actual[key] == Decimal(want), f"{case.name}: {key}"
        elif key == "flowers":
            nonzero = {k: v for k, v in actual[key].items() if v}
            assert nonzero == want, f"{case.name}: flowers"
        else:
            assert actual[key] == want, f"{case.name}: {key}"

    for key in expected.get("absent", []):
        assert key not in actual, f"{case.name}: unexpected {key}={actual.get(key)!r}"

    # The review rendering must cope with every parsed slip
    assert format_order_draft(draft)
