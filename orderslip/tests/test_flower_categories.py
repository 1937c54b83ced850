"""Tests for the flower keyword ladder."""

import dataclasses

import pytest
from orderslip.domain.order import FlowerCategory
from orderslip.slip.flower_categories import (
    FlowerKeywordRules,
    build_flower_keyword_rules,
    categorize_part,
    categorize_segment,
)


@pytest.mark.parametrize(
    ("segment", "expected"),
    [
        ("3 two tone roses", FlowerCategory.TWO_TONE_PINK),
        ("2 fuschia", FlowerCategory.CHINA_PINK),
        ("1 sunflower", FlowerCategory.SUNFLOWER),
        ("5 carnations", FlowerCategory.CARNATION),
        ("1 stargazer", FlowerCategory.STARGAZER),
        ("3 tulips", FlowerCategory.TULIPS),
        ("12 ecuador roses", FlowerCategory.IMPORTED_RED),
        ("6 red roses", FlowerCategory.LOCAL_RED),
        ("6 local white", FlowerCategory.LOCAL_WHITE),
        ("6 old rose", FlowerCategory.LOCAL_PINK),
        ("6 pink flowers", FlowerCategory.LOCAL_PINK),
    ],
)
def test_categorize_segment(segment: str, expected: FlowerCategory) -> None:
    assert categorize_segment(segment) == expected


@pytest.mark.parametrize("segment", ["12 local roses", "1 teddy bear", "red ribbon"])
def test_categorize_segment_without_category(segment: str) -> None:
    assert categorize_segment(segment) is None


def test_categorize_part_uses_outer_segment_origin() -> None:
    assert categorize_part("2 red", "imported roses (2 red)") == FlowerCategory.IMPORTED_RED
    assert categorize_part("2 red", "roses (2 red)") == FlowerCategory.LOCAL_RED


def test_categorize_part_imported_non_red_is_unmatched() -> None:
    assert categorize_part("2 white", "imported roses (2 white)") is None


def test_categorize_part_ignores_non_rose_flowers() -> None:
    assert categorize_part("2 sunflowers", "bouquet (2 sunflowers)") is None


def test_build_rules_extends_defaults_without_duplicates() -> None:
    rules = build_flower_keyword_rules(
        [
            {"keywords": {"sunflower": ["Mirasol", "sun"], "unknown_rung": ["x"]}},
            {"keywords": {"imported": "Kenya"}},
        ]
    )

    assert rules.sunflower == ("sunflower", "sun", "mirasol")
    assert rules.imported == ("imported", "ecuador", "kenya")
    assert categorize_segment("2 mirasol", rules) == FlowerCategory.SUNFLOWER
    assert categorize_segment("2 mirasol") is None
    assert categorize_segment("10 kenya roses", rules) == FlowerCategory.IMPORTED_RED


def test_rules_are_frozen() -> None:
    rules = FlowerKeywordRules()
    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.red = ("crimson",)  # type: ignore[misc]
