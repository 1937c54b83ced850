"""Line-level field extraction for order slips.

Every extractor looks at the line on its own; several may fire on the same
line. Labels are matched case-insensitively and must be followed by ":" or ".".
"""

import re

from ..date_utils import parse_slip_date
from .common import LABEL_SEPARATOR, detect_payment_method
from .state import SlipState
from .time_parser import normalize_time

DATE_LINE_PATTERN = re.compile(r"^(?:target\s+date|delivery\s+date|date)\b\s*[:.]?\s*(.*)", re.IGNORECASE)
TIME_LINE_PATTERN = re.compile(r"^(?:delivery\s+time|time)\b\s*[:.]?\s*(.*)", re.IGNORECASE)
NAME_LINE_PATTERN = re.compile(r"^name" + LABEL_SEPARATOR + r"(.*)", re.IGNORECASE)
CONTACT_LINE_PATTERN = re.compile(
    r"^(?:contact|mobile|cp|phone)\s*(?:no|number|#)?\.?\s*[:.]?\s*([+0-9\s-]+)",
    re.IGNORECASE,
)
ADDRESS_LINE_PATTERN = re.compile(
    r"^(complete\s+address|address|location|loc|landmark)" + LABEL_SEPARATOR + r"(.*)",
    re.IGNORECASE,
)
CARD_MESSAGE_LINE_PATTERN = re.compile(
    r"^(?:short\s+greetings|card\s+message|message|card|greetings)" + LABEL_SEPARATOR + r"(.*)",
    re.IGNORECASE,
)
OTHERS_LINE_PATTERN = re.compile(r"^(?:others|add-ons|add\s+ons|addons)" + LABEL_SEPARATOR + r"(.*)", re.IGNORECASE)
MOP_LINE_PATTERN = re.compile(r"^(?:mop|mode\s+of\s+payment)" + LABEL_SEPARATOR + r"(.*)", re.IGNORECASE)


def _extract_date(state: SlipState, line: str) -> None:
    match = DATE_LINE_PATTERN.match(line)
    if not match:
        return
    parsed = parse_slip_date(match.group(1), today=state.today)
    if parsed is not None:
        state.draft.target_date = parsed


def _extract_time(state: SlipState, line: str) -> None:
    match = TIME_LINE_PATTERN.match(line)
    if not match:
        return
    normalized = normalize_time(match.group(1))
    if normalized:
        state.draft.delivery_time = normalized


def _extract_name(state: SlipState, line: str) -> None:
    """A bare "Name:" line belongs to whichever party the section is about."""
    match = NAME_LINE_PATTERN.match(line)
    if not match:
        return
    value = match.group(1).strip()
    draft = state.draft
    if state.section == "RECIPIENT":
        draft.delivered_to = value
        # Whoever picks up is also the customer
        if draft.type == "PICK UP":
            draft.ordered_by = value
    elif state.section == "SENDER":
        draft.ordered_by = value


def _extract_contact(state: SlipState, line: str) -> None:
    """
    Read a contact number, keeping only digits.

    The sender's number is the order's contact. A recipient number only
    fills an empty contact, and for deliveries is also appended to the
    recipient name so the rider sees it.
    """
    match = CONTACT_LINE_PATTERN.match(line)
    if not match:
        return
    digits = re.sub(r"\D", "", match.group(1))
    if not digits:
        return

    draft = state.draft
    if state.section == "SENDER":
        draft.contact_number = digits
    elif state.section == "RECIPIENT":
        if not draft.contact_number:
            draft.contact_number = digits
        if draft.type == "DELIVERY" and draft.delivered_to and digits not in draft.delivered_to:
            draft.delivered_to = f"{draft.delivered_to} Contact No. {digits}"


def _extract_address(state: SlipState, line: str) -> None:
    match = ADDRESS_LINE_PATTERN.match(line)
    if not match:
        return
    value = match.group(2).strip()
    if not value:
        return
    draft = state.draft
    if match.group(1).lower() == "landmark" and draft.address:
        draft.address = f"{draft.address}, {value}"
    else:
        draft.address = value


def _extract_card_message(state: SlipState, line: str) -> None:
    match = CARD_MESSAGE_LINE_PATTERN.match(line)
    if match:
        state.draft.card_message = match.group(1).strip()


def _extract_others(state: SlipState, line: str) -> None:
    match = OTHERS_LINE_PATTERN.match(line)
    if match:
        state.draft.others = match.group(1).strip()


def _extract_mop(state: SlipState, line: str) -> None:
    """Mode of payment: an explicit label wins over a method named on a payment line."""
    match = MOP_LINE_PATTERN.match(line)
    if match:
        value = match.group(1).strip()
        if value:
            state.draft.mop = detect_payment_method(value) or value


def _extract_fields(state: SlipState, line: str) -> None:
    """Run every line-level extractor over one line."""
    _extract_date(state, line)
    _extract_time(state, line)
    _extract_name(state, line)
    _extract_contact(state, line)
    _extract_address(state, line)
    _extract_card_message(state, line)
    _extract_others(state, line)
    _extract_mop(state, line)
