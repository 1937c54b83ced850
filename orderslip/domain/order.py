"""Data models for order slips recovered from pasted chat text."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Literal

Section = Literal["NONE", "RECIPIENT", "SENDER", "SUMMARY", "NOTES"]
OrderType = Literal["DELIVERY", "PICK UP"]
PaymentStatus = Literal["PAID", "UNPAID", "DOWNPAYMENT"]


class FlowerCategory(str, Enum):
    """Inventory buckets tracked by the order sheet (one column each)."""

    LOCAL_RED = "localRed"
    LOCAL_PINK = "localPink"
    LOCAL_WHITE = "localWhite"
    IMPORTED_RED = "importedRed"
    TWO_TONE_PINK = "twoTonePink"
    CHINA_PINK = "chinaPink"
    SUNFLOWER = "sunflower"
    CARNATION = "carnation"
    TULIPS = "tulips"
    STARGAZER = "stargazer"


def empty_flower_counts() -> dict[FlowerCategory, int]:
    """Return a count map holding every category at zero."""
    return {category: 0 for category in FlowerCategory}


# Draft attribute -> form field key used by consumers of to_dict().
_FORM_KEYS = {
    "target_date": "targetDate",
    "delivery_time": "deliveryTime",
    "type": "type",
    "delivered_to": "deliveredTo",
    "ordered_by": "orderedBy",
    "contact_number": "contactNumber",
    "address": "address",
    "card_message": "cardMessage",
    "code": "code",
    "others": "others",
    "order_summary": "orderSummary",
    "notes": "notes",
    "mop": "mop",
    "total": "total",
    "amount_paid": "amountPaid",
    "balance": "balance",
    "delivery_fee": "deliveryFee",
    "status": "status",
    "flowers": "flowers",
}


@dataclass
class OrderDraft:
    """Best-effort partial order recovered from one block of text.

    Every field except ``type`` may be None, meaning nothing was found.
    """

    type: OrderType = "DELIVERY"
    target_date: date | None = None
    delivery_time: str | None = None  # canonical 24h "HH:MM"
    delivered_to: str | None = None
    ordered_by: str | None = None
    contact_number: str | None = None
    address: str | None = None
    card_message: str | None = None
    code: str | None = None
    others: str | None = None
    order_summary: str | None = None
    notes: str | None = None
    mop: str | None = None
    total: Decimal | None = None
    amount_paid: Decimal | None = None
    balance: Decimal | None = None
    delivery_fee: Decimal | None = None
    status: PaymentStatus | None = None
    flowers: dict[FlowerCategory, int] | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        """Return present fields keyed by form field name.

        Dates are ISO strings, money stays Decimal and flower counts are keyed
        by their column name (``localRed`` etc).
        """
        out: dict[str, Any] = {}
        for attr, key in _FORM_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, date):
                value = value.isoformat()
            elif attr == "flowers":
                value = {category.value: count for category, count in value.items()}
            out[key] = value
        return out
