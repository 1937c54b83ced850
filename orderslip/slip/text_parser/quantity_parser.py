"""Quantity extraction from short item phrases."""

import re

DOZEN_PATTERN = re.compile(r"\b(\d+)\s*(?:dozens|dozen|doz)\b", re.IGNORECASE)
UNIT_PATTERN = re.compile(r"\b(\d+)\s*(?:stems|stem|pcs|pc)\b", re.IGNORECASE)
# "500 - 3 sunflower": a price, then the real quantity
PRICE_DASH_PATTERN = re.compile(r"^\s*\d+[\s-]+(\d+)")
BARE_NUMBER_PATTERN = re.compile(r"\b(\d+)\b")

# Bare numbers at or above this are assumed to be prices
MAX_LOOSE_QUANTITY = 100


def extract_qty(text: str) -> int | None:
    """
    Recover an item count from a phrase like "2 doz red roses".

    Rule order (first match wins):
    1. "<n> doz/dozen/dozens" -> n * 12
    2. "<n> pc/pcs/stem/stems" -> n
    3. leading "<price> - <n>" -> n
    4. first bare number under 100 -> that number

    Returns:
        The count, or None when the phrase has no usable number. Callers
        treat None as a count of 1 when a flower keyword is present.
    """
    if not text:
        return None

    dozen = DOZEN_PATTERN.search(text)
    if dozen:
        return int(dozen.group(1)) * 12

    unit = UNIT_PATTERN.search(text)
    if unit:
        return int(unit.group(1))

    price_dash = PRICE_DASH_PATTERN.match(text)
    if price_dash:
        return int(price_dash.group(1))

    for match in BARE_NUMBER_PATTERN.finditer(text):
        value = int(match.group(1))
        if value < MAX_LOOSE_QUANTITY:
            return value

    return None
