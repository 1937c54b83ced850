"""Per-call accumulator threaded through the line scan."""

from dataclasses import dataclass, field
from datetime import date

from orderslip.domain.order import OrderDraft, Section


@dataclass
class SlipState:
    """Mutable parse state for a single ``parse_order_text`` call."""

    today: date
    draft: OrderDraft = field(default_factory=OrderDraft)
    section: Section = "NONE"


def append_line(existing: str | None, line: str) -> str:
    """Join multi-line field content with newlines."""
    if not existing:
        return line
    return f"{existing}\n{line}"
