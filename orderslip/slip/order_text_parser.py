"""Parse pasted order-chat text into a structured OrderDraft."""

from datetime import date

from orderslip.domain.order import OrderDraft
from orderslip.runtime.logging import get_logger

from .flower_categories import FlowerKeywordRules
from .text_parser import (
    SlipState,
    _capture_section_content,
    _classify_line,
    _extract_fields,
    _extract_payment_signals,
    _reconcile_payments,
    aggregate_flowers,
    split_lines,
)
from .text_parser.common import PICKUP_MARKER_PATTERN

logger = get_logger(__name__)


def parse_order_text(
    text: str | None,
    *,
    today: date | None = None,
    flower_rules: FlowerKeywordRules | None = None,
) -> OrderDraft:
    """
    Parse an order conversation into an OrderDraft.

    This is a best-effort parser - results should be reviewed before
    submitting. It never raises for odd input; anything it cannot read is
    simply left unset.

    Args:
        text: The pasted conversation
        today: Reference date for dates written without a year
        flower_rules: Keyword vocabulary for flower counting. Defaults to
            the built-in one; see ``orderslip.runtime.load_flower_keyword_rules``.

    Returns:
        A fresh OrderDraft; the parser keeps no state between calls
    """
    text = text or ""
    state = SlipState(today=today or date.today())
    draft = state.draft

    if PICKUP_MARKER_PATTERN.search(text):
        draft.type = "PICK UP"

    lines = split_lines(text)
    for line in lines:
        if _classify_line(state, line):
            continue
        if _capture_section_content(state, line):
            continue
        _extract_fields(state, line)
        _extract_payment_signals(state, line)

    # Count flowers from the order summary when there is one
    counts = aggregate_flowers(draft.order_summary or text, flower_rules)
    if any(counts.values()):
        draft.flowers = counts

    _reconcile_payments(draft)

    logger.debug("Parsed %d lines into %r", len(lines), draft)
    return draft
