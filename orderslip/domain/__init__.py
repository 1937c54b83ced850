"""Core domain models for order slips.

Usage:
    from orderslip.domain import FlowerCategory, OrderDraft
"""

from orderslip.domain.order import (
    FlowerCategory,
    OrderDraft,
    OrderType,
    PaymentStatus,
    Section,
    empty_flower_counts,
)

__all__ = [
    "FlowerCategory",
    "OrderDraft",
    "OrderType",
    "PaymentStatus",
    "Section",
    "empty_flower_counts",
]
