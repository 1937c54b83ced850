"""Keyword ladder mapping order-summary phrases to flower categories.

The category set is closed (see ``FlowerCategory``); only the keyword
vocabulary behind each rung of the ladder can be extended.

To add keywords:
1. Put a ``[keywords]`` table in a TOML file, one list per rung name
   (e.g. ``sunflower = ["mirasol"]``)
2. Load it with ``orderslip.runtime.load_flower_keyword_rules``
3. Keywords are lower-cased and matched as plain substrings
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Any

from orderslip.domain.order import FlowerCategory


@dataclass(frozen=True)
class FlowerKeywordRules:
    """Keyword vocabulary for each rung of the categorization ladder."""

    two_tone: tuple[str, ...] = ("two", "tone")
    china_pink: tuple[str, ...] = ("china", "fuschia")
    sunflower: tuple[str, ...] = ("sunflower", "sun")
    carnation: tuple[str, ...] = ("carnation",)
    stargazer: tuple[str, ...] = ("stargazer", "star")
    tulips: tuple[str, ...] = ("tulip",)
    # Origin markers deciding between the imported and local rose columns
    imported: tuple[str, ...] = ("imported", "ecuador")
    local: tuple[str, ...] = ("local",)
    rose: tuple[str, ...] = ("rose", "flower")
    # Rose colors
    red: tuple[str, ...] = ("red",)
    white: tuple[str, ...] = ("white",)
    pink: tuple[str, ...] = ("pink", "old")


RUNG_NAMES: frozenset[str] = frozenset(f.name for f in fields(FlowerKeywordRules))


def _normalize_keywords(raw: Any) -> tuple[str, ...]:
    """Normalize a TOML keywords value into a tuple of lower-case strings."""
    if isinstance(raw, str):
        value = raw.strip().lower()
        return (value,) if value else tuple()
    if isinstance(raw, list):
        return tuple(str(v).strip().lower() for v in raw if str(v).strip())
    return tuple()


def build_flower_keyword_rules(configs: Sequence[Mapping[str, Any]] | None = None) -> FlowerKeywordRules:
    """Merge ``[keywords]`` tables from in-memory configs onto the defaults.

    Config keywords are appended after the built-in ones; duplicates are
    dropped. Rung names outside ``RUNG_NAMES`` are ignored.
    """
    rules = FlowerKeywordRules()
    for config in configs or ():
        keywords = config.get("keywords", {})
        if not isinstance(keywords, Mapping):
            continue
        updates: dict[str, tuple[str, ...]] = {}
        for rung, raw in keywords.items():
            if rung not in RUNG_NAMES:
                continue
            current = updates.get(rung, getattr(rules, rung))
            extra = tuple(kw for kw in _normalize_keywords(raw) if kw not in current)
            updates[rung] = current + extra
        if updates:
            rules = replace(rules, **updates)
    return rules


@lru_cache(maxsize=1)
def default_flower_keyword_rules() -> FlowerKeywordRules:
    """Built-in vocabulary only (no file I/O)."""
    return build_flower_keyword_rules()


def _mentions(text: str, keywords: tuple[str, ...]) -> bool:
    return any(kw in text for kw in keywords)


def _local_rose_color(text: str, rules: FlowerKeywordRules) -> FlowerCategory | None:
    if _mentions(text, rules.red):
        return FlowerCategory.LOCAL_RED
    if _mentions(text, rules.white):
        return FlowerCategory.LOCAL_WHITE
    if _mentions(text, rules.pink):
        return FlowerCategory.LOCAL_PINK
    return None


def is_imported(segment: str, rules: FlowerKeywordRules | None = None) -> bool:
    """Return True if the segment names an imported rose origin."""
    rules = rules or default_flower_keyword_rules()
    return _mentions(segment.lower(), rules.imported)


def categorize_part(
    part: str,
    segment: str,
    rules: FlowerKeywordRules | None = None,
) -> FlowerCategory | None:
    """Categorize one entry of a parenthetical breakdown.

    ``segment`` is the enclosing item phrase; its origin markers decide
    whether a red part counts as imported or local.

    Example: in ``"3 imported roses (2 red, 1 two tone)"`` the part
    ``"2 red"`` is ``IMPORTED_RED`` and ``"1 two tone"`` is ``TWO_TONE_PINK``.
    """
    rules = rules or default_flower_keyword_rules()
    part = part.lower()

    if _mentions(part, rules.two_tone):
        return FlowerCategory.TWO_TONE_PINK
    if _mentions(part, rules.china_pink):
        return FlowerCategory.CHINA_PINK
    if is_imported(segment, rules):
        if _mentions(part, rules.red):
            return FlowerCategory.IMPORTED_RED
        return None
    return _local_rose_color(part, rules)


def categorize_segment(segment: str, rules: FlowerKeywordRules | None = None) -> FlowerCategory | None:
    """Categorize a whole item phrase.

    Non-rose flowers are tested before the rose branch. An imported rose is
    always counted as imported red; a local rose needs a color to land in a
    column.
    """
    rules = rules or default_flower_keyword_rules()
    segment = segment.lower()

    if _mentions(segment, rules.two_tone):
        return FlowerCategory.TWO_TONE_PINK
    if _mentions(segment, rules.china_pink):
        return FlowerCategory.CHINA_PINK
    if _mentions(segment, rules.sunflower):
        return FlowerCategory.SUNFLOWER
    if _mentions(segment, rules.carnation):
        return FlowerCategory.CARNATION
    if _mentions(segment, rules.stargazer):
        return FlowerCategory.STARGAZER
    if _mentions(segment, rules.tulips):
        return FlowerCategory.TULIPS

    imported = _mentions(segment, rules.imported)
    local = _mentions(segment, rules.local) or (not imported and _mentions(segment, rules.rose))
    if imported:
        # Only red is stocked as imported
        return FlowerCategory.IMPORTED_RED
    if local:
        return _local_rose_color(segment, rules)
    return None
