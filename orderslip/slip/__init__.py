"""Order-slip text extraction: pasted chat text in, OrderDraft out."""

from .flower_categories import FlowerKeywordRules, categorize_part, categorize_segment
from .formatter import file_under_time, format_currency, format_order_draft
from .order_text_parser import parse_order_text

__all__ = [
    "FlowerKeywordRules",
    "categorize_part",
    "categorize_segment",
    "file_under_time",
    "format_currency",
    "format_order_draft",
    "parse_order_text",
]
