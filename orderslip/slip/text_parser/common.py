"""Shared constants and helpers for order-slip text parsing."""

import re
from decimal import Decimal, InvalidOperation

# Anything between a label and its value: "Name: Ana", "Name. Ana", "Name : Ana"
LABEL_SEPARATOR = r"\s*[:.]\s*"

# Lines that end an order summary block when it was left open
SUMMARY_RESET_PATTERN = re.compile(
    r"^(total|down|dp|paid|payment|balance|gsh|gcash|delivery fee|date|time|name|address|contact)"
)

# Section headers, tested in this order
SUMMARY_HEADER_PATTERN = re.compile(r"^order summary")
RECIPIENT_HEADER_PATTERN = re.compile(r"delivered to|recipient")
PICKUP_HEADER_PATTERN = re.compile(r"^\(?pick\s*up\s*by")
SENDER_HEADER_PATTERN = re.compile(r"ordered by|customer")
NOTES_HEADER_PATTERN = re.compile(r"^(internal notes|notes|ps|nb)[:.]", re.IGNORECASE)
NOTES_PREFIX_PATTERN = re.compile(r"^(internal notes|notes|ps|nb)[:.]\s*", re.IGNORECASE)

# Anywhere in the text flips the order to pick up
PICKUP_MARKER_PATTERN = re.compile(r"pick\s*up", re.IGNORECASE)

# Bouquet codes like "R01" or "SF3" mentioned inside an order summary
BOUQUET_CODE_PATTERN = re.compile(r"\b([A-Z]{1,2}\d{1,2})\b")

PAYMENT_LINE_PREFIXES = ("downpayment", "dp", "paid", "payment")

# Payment methods recognized on payment lines, checked in order
KNOWN_PAYMENT_METHODS = (
    ("gcash", "GCash"),
    ("paymaya", "Maya"),
    ("maya", "Maya"),
    ("bpi", "BPI"),
    ("bdo", "BDO"),
    ("bank transfer", "Bank Transfer"),
    ("cash", "Cash"),
)

_LEADING_DECIMAL = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def split_lines(text: str) -> list[str]:
    """Split text into trimmed, non-empty lines."""
    return [line.strip() for line in re.split(r"\r?\n", text) if line.strip()]


def parse_price(text: str) -> Decimal:
    """Parse a money figure out of a whole line.

    Every character that is not a digit or a dot is dropped first, so
    ``"TOTAL: P3,200.00"`` reads as ``3200.00``. Unparsable text is 0.
    """
    if not text:
        return Decimal("0")
    cleaned = re.sub(r"[^\d.]", "", text)
    match = _LEADING_DECIMAL.match(cleaned)
    if not match:
        return Decimal("0")
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return Decimal("0")


def has_digits(text: str) -> bool:
    """Return True if the text carries any number at all."""
    return re.search(r"\d", text) is not None


def detect_payment_method(text: str) -> str | None:
    """Return the display name of the first payment method named in text."""
    lower = text.lower()
    for keyword, name in KNOWN_PAYMENT_METHODS:
        if re.search(r"\b" + re.escape(keyword) + r"\b", lower):
            return name
    return None
