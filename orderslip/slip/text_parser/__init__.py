"""Composable order-slip text parser components."""

from .common import parse_price, split_lines
from .fields_parser import _extract_fields
from .items_parser import aggregate_flowers, split_segments
from .payments_parser import _extract_payment_signals, _reconcile_payments
from .quantity_parser import extract_qty
from .sections_parser import _capture_section_content, _classify_line
from .state import SlipState
from .time_parser import normalize_time

__all__ = [
    "SlipState",
    "_capture_section_content",
    "_classify_line",
    "_extract_fields",
    "_extract_payment_signals",
    "_reconcile_payments",
    "aggregate_flowers",
    "extract_qty",
    "normalize_time",
    "parse_price",
    "split_lines",
    "split_segments",
]
