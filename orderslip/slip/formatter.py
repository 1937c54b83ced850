"""Format OrderDraft data for review and for the order sheet."""

from datetime import date
from decimal import Decimal

from orderslip.domain.order import OrderDraft

CURRENCY_SYMBOL = "₱"  # Philippine peso

# (label, draft attribute) in review order
_REVIEW_FIELDS = (
    ("Type", "type"),
    ("Date", "target_date"),
    ("Time", "delivery_time"),
    ("Delivered To", "delivered_to"),
    ("Ordered By", "ordered_by"),
    ("Contact", "contact_number"),
    ("Address", "address"),
    ("Card Message", "card_message"),
    ("Code", "code"),
    ("Others", "others"),
    ("MOP", "mop"),
    ("Delivery Fee", "delivery_fee"),
    ("Total", "total"),
    ("Amount Paid", "amount_paid"),
    ("Balance", "balance"),
    ("Status", "status"),
)


def format_currency(amount: Decimal | int | float) -> str:
    """Format an amount as pesos, e.g. 3200 -> "₱3,200.00"."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"))
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"


def file_under_time(time_str: str) -> str:
    """
    Return the one-hour sheet slot an order is filed under.

    Orders are filed an hour ahead of their delivery time so they are
    prepared in time: "14:00" -> "1:00 PM - 2:00 PM", "00:30" -> "11:00 PM - 12:00 AM".
    """
    if not time_str:
        return ""
    hour_str = time_str.split(":")[0].strip()
    if not hour_str.isdigit():
        return "Invalid Time"

    hour = int(hour_str) - 1
    if hour < 0:
        hour = 23
    next_hour = (hour + 1) % 24

    return f"{_twelve_hour(hour)} - {_twelve_hour(next_hour)}"


def _twelve_hour(hour: int) -> str:
    suffix = "PM" if hour >= 12 else "AM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"


def _format_value(value: object) -> str:
    if isinstance(value, Decimal):
        return format_currency(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _format_rows_aligned(rows: list[tuple[str, str]], indent: str = "") -> list[str]:
    """Left-align labels so values start in one column."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows)
    return [f"{indent}{label.ljust(width)}  {value}" for label, value in rows]


def format_order_draft(draft: OrderDraft) -> str:
    """
    Render a draft as a plain-text review block.

    Unset fields are skipped. Multi-line summary/notes and non-zero flower
    counts follow the field block under their own headings.
    """
    rows = [
        (label, _format_value(getattr(draft, attr)))
        for label, attr in _REVIEW_FIELDS
        if getattr(draft, attr) is not None
    ]
    lines = _format_rows_aligned(rows)

    if draft.flowers:
        flower_rows = [(category.value, str(count)) for category, count in draft.flowers.items() if count]
        lines.append("Flowers:")
        lines.extend(_format_rows_aligned(flower_rows, indent="  "))

    for heading, block in (("Order Summary", draft.order_summary), ("Notes", draft.notes)):
        if block:
            lines.append(f"{heading}:")
            lines.extend(f"  {line}" for line in block.split("\n"))

    return "\n".join(lines)
