"""Total/payment signal collection and final balance reconciliation."""

from decimal import Decimal

from orderslip.domain.order import OrderDraft
from orderslip.runtime.logging import get_logger

from .common import PAYMENT_LINE_PREFIXES, detect_payment_method, has_digits, parse_price
from .state import SlipState

logger = get_logger(__name__)

FULL_PAYMENT_WORDS = ("full", "fully", "paid")


def _apply_total_line(state: SlipState, line: str, lower: str) -> None:
    """A TOTAL line with a figure sets the total; "PAID"/"UNPAID" on it settle payment."""
    if not has_digits(line):
        logger.debug("Total line without an amount: %r", line)
        return
    draft = state.draft
    total = parse_price(line)
    draft.total = total
    if "unpaid" in lower:
        draft.amount_paid = Decimal("0")
    elif "paid" in lower:
        draft.amount_paid = total
    else:
        draft.balance = total


def _apply_payment_line(state: SlipState, line: str, lower: str) -> None:
    """
    Read a downpayment/payment line.

    A number on the line is the amount paid. Without one, "full"/"paid"
    means the whole total, but only if the total was already seen above.
    """
    draft = state.draft
    if has_digits(line):
        draft.amount_paid = parse_price(line)
    elif any(word in lower for word in FULL_PAYMENT_WORDS):
        if draft.total is not None:
            draft.amount_paid = draft.total
        else:
            logger.debug("Full payment stated before any total: %r", line)

    method = detect_payment_method(line)
    if method and not draft.mop:
        draft.mop = method


def _apply_balance_line(state: SlipState, line: str) -> None:
    """A stated balance implies the amount paid when only the total is known."""
    if not has_digits(line):
        return
    draft = state.draft
    balance = parse_price(line)
    if draft.total is not None and draft.amount_paid is None:
        draft.amount_paid = max(draft.total - balance, Decimal("0"))
    else:
        draft.balance = balance


def _extract_payment_signals(state: SlipState, line: str) -> None:
    """Feed one line's financial figures into the draft, in line order."""
    lower = line.lower()

    if lower.startswith("total"):
        _apply_total_line(state, line, lower)
    elif "delivery fee" in lower:
        state.draft.delivery_fee = parse_price(line)

    if lower.startswith(PAYMENT_LINE_PREFIXES):
        _apply_payment_line(state, line, lower)
    elif lower.startswith("balance"):
        _apply_balance_line(state, line)


def _reconcile_payments(draft: OrderDraft) -> None:
    """
    Derive balance and status from the total and amount paid.

    Nothing is derived without a total. The balance is kept as computed
    (it can go negative on overpayment); status treats anything <= 0 as paid.
    """
    if draft.total is None:
        return

    paid = draft.amount_paid if draft.amount_paid is not None else Decimal("0")
    draft.balance = draft.total - paid
    if draft.balance <= 0:
        draft.status = "PAID"
    elif paid > 0:
        draft.status = "DOWNPAYMENT"
    else:
        draft.status = "UNPAID"

    logger.debug("Reconciled total=%s paid=%s balance=%s status=%s", draft.total, paid, draft.balance, draft.status)
