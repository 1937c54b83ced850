"""Section header recognition and section-scoped line capture."""

from orderslip.domain.order import Section
from orderslip.runtime.logging import get_logger

from .common import (
    BOUQUET_CODE_PATTERN,
    NOTES_HEADER_PATTERN,
    NOTES_PREFIX_PATTERN,
    PICKUP_HEADER_PATTERN,
    RECIPIENT_HEADER_PATTERN,
    SENDER_HEADER_PATTERN,
    SUMMARY_HEADER_PATTERN,
    SUMMARY_RESET_PATTERN,
)
from .state import SlipState, append_line

logger = get_logger(__name__)


def _enter(state: SlipState, section: Section, line: str) -> None:
    if state.section != section:
        logger.debug("Section %s -> %s at %r", state.section, section, line)
    state.section = section


def _classify_line(state: SlipState, line: str) -> bool:
    """
    Update the current section for one line.

    A field line that starts a new topic (total, date, name, ...) closes an
    open order summary first. Header lines are then matched in priority
    order: summary, recipient (including "pick up by"), sender, notes.

    Returns:
        True if the line was a header and must not be read as field content
    """
    lower = line.lower()

    if state.section == "SUMMARY" and SUMMARY_RESET_PATTERN.match(lower):
        _enter(state, "NONE", line)

    if SUMMARY_HEADER_PATTERN.match(lower):
        _enter(state, "SUMMARY", line)
        return True
    if RECIPIENT_HEADER_PATTERN.search(lower):
        _enter(state, "RECIPIENT", line)
        return True
    if PICKUP_HEADER_PATTERN.match(lower):
        _enter(state, "RECIPIENT", line)
        state.draft.type = "PICK UP"
        return True
    if SENDER_HEADER_PATTERN.search(lower):
        _enter(state, "SENDER", line)
        return True
    if NOTES_HEADER_PATTERN.match(line):
        _enter(state, "NOTES", line)
        content = NOTES_PREFIX_PATTERN.sub("", line, count=1).strip()
        if content:
            state.draft.notes = content
        return True

    return False


def _capture_section_content(state: SlipState, line: str) -> bool:
    """
    Accumulate free-form lines belonging to the notes or summary section.

    Notes lines are consumed. Summary lines are kept for the flower count
    and still go through field extraction; the first bouquet code seen
    there (e.g. "R01") is recorded.

    Returns:
        True if the line was consumed as notes
    """
    draft = state.draft

    if state.section == "NOTES":
        draft.notes = append_line(draft.notes, line)
        return True

    if state.section == "SUMMARY":
        draft.order_summary = append_line(draft.order_summary, line)
        code = BOUQUET_CODE_PATTERN.search(line)
        if code and not draft.code:
            draft.code = code.group(1)

    return False
