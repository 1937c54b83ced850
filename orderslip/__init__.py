"""orderslip: recover structured flower orders from pasted chat text.

Usage:
    from orderslip import parse_order_text

    draft = parse_order_text(pasted_text)
    form_values = draft.to_dict()
"""

from orderslip.domain.order import FlowerCategory, OrderDraft
from orderslip.slip.order_text_parser import parse_order_text

__all__ = [
    "FlowerCategory",
    "OrderDraft",
    "parse_order_text",
]
