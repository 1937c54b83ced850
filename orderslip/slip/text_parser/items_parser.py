"""Order-summary item aggregation into flower inventory counts."""

import re

from orderslip.domain.order import FlowerCategory, empty_flower_counts

from ..flower_categories import FlowerKeywordRules, categorize_part, categorize_segment, default_flower_keyword_rules
from .quantity_parser import extract_qty

PAREN_PATTERN = re.compile(r"\((.*?)\)")
BREAKDOWN_SEPARATOR = re.compile(r"[,&+]")


def split_segments(text: str) -> list[str]:
    """
    Split item text on newlines and top-level commas.

    Commas inside parentheses belong to a breakdown and do not split, so
    ``"a (b, c), d"`` gives ``["a (b, c)", "d"]``.
    """
    segments: list[str] = []
    current: list[str] = []
    depth = 0

    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)

        if char == "\n" or (char == "," and depth == 0):
            segments.append("".join(current))
            current = []
            continue
        current.append(char)
    segments.append("".join(current))

    return [segment.strip() for segment in segments if segment.strip()]


def _add_breakdown(
    segment: str,
    inside: str,
    main_qty: int,
    counts: dict[FlowerCategory, int],
    rules: FlowerKeywordRules,
) -> bool:
    """Count each part of a parenthetical breakdown; return True if any matched."""
    parts = [part.strip() for part in BREAKDOWN_SEPARATOR.split(inside) if part.strip()]
    matched_any = False

    for part in parts:
        sub_qty = extract_qty(part)
        if sub_qty is not None:
            count = sub_qty
        elif len(parts) == 1:
            # A single listed color owns the whole outer quantity
            count = main_qty
        else:
            count = 1

        category = categorize_part(part, segment, rules)
        if category is not None:
            counts[category] += count
            matched_any = True

    return matched_any


def aggregate_flowers(text: str, rules: FlowerKeywordRules | None = None) -> dict[FlowerCategory, int]:
    """
    Accumulate per-category flower counts from order-summary text.

    Each segment is counted once: through its parenthetical breakdown when
    any part of it names a category, otherwise as a whole phrase.

    Args:
        text: Captured order summary, or the whole slip when none was found
        rules: Keyword vocabulary; defaults to the built-in one

    Returns:
        Counts for all ten categories, zero where nothing matched
    """
    rules = rules or default_flower_keyword_rules()
    counts = empty_flower_counts()

    for segment in split_segments(text.lower()):
        # Delivery fee lines carry prices, not items
        if "fee" in segment:
            continue

        raw_qty = extract_qty(segment)
        main_qty = raw_qty if raw_qty is not None else 1

        paren = PAREN_PATTERN.search(segment)
        if paren and _add_breakdown(segment, paren.group(1), main_qty, counts, rules):
            continue

        category = categorize_segment(segment, rules)
        if category is not None:
            counts[category] += main_qty

    return counts
