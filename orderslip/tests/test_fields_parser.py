"""Tests for line-level field extraction."""

from datetime import date

from orderslip.slip.text_parser.fields_parser import _extract_fields
from orderslip.slip.text_parser.state import SlipState


def _state(section: str = "NONE", order_type: str = "DELIVERY") -> SlipState:
    state = SlipState(today=date(2026, 10, 19))
    state.section = section  # type: ignore[assignment]
    state.draft.type = order_type  # type: ignore[assignment]
    return state


def test_name_is_scoped_by_section() -> None:
    sender = _state("SENDER")
    _extract_fields(sender, "Name: Ana")
    assert sender.draft.ordered_by == "Ana"
    assert sender.draft.delivered_to is None

    recipient = _state("RECIPIENT")
    _extract_fields(recipient, "Name: Ben")
    assert recipient.draft.delivered_to == "Ben"
    assert recipient.draft.ordered_by is None


def test_pick_up_recipient_name_is_also_customer() -> None:
    state = _state("RECIPIENT", "PICK UP")
    _extract_fields(state, "Name. Carla")
    assert state.draft.delivered_to == "Carla"
    assert state.draft.ordered_by == "Carla"


def test_name_outside_any_party_section_is_ignored() -> None:
    state = _state()
    _extract_fields(state, "Name: Nobody")
    assert state.draft.delivered_to is None
    assert state.draft.ordered_by is None


def test_recipient_contact_fills_empty_contact_and_tags_name() -> None:
    state = _state("RECIPIENT")
    state.draft.delivered_to = "Ben"
    _extract_fields(state, "Contact No: 0917 123 4567")

    assert state.draft.contact_number == "09171234567"
    assert state.draft.delivered_to == "Ben Contact No. 09171234567"

    # Seeing the same number again does not tag the name twice
    _extract_fields(state, "Mobile: 0917-123-4567")
    assert state.draft.delivered_to == "Ben Contact No. 09171234567"


def test_sender_contact_overwrites_recipient_contact() -> None:
    state = _state("RECIPIENT")
    _extract_fields(state, "Phone #: 09171234567")
    state.section = "SENDER"
    _extract_fields(state, "Contact Number: +63 918 765 4321")
    assert state.draft.contact_number == "639187654321"


def test_recipient_contact_does_not_overwrite_existing_contact() -> None:
    state = _state("RECIPIENT", "PICK UP")
    state.draft.contact_number = "09180000000"
    state.draft.delivered_to = "Carla"
    _extract_fields(state, "Cp: 09171234567")
    assert state.draft.contact_number == "09180000000"
    assert state.draft.delivered_to == "Carla"


def test_address_and_landmark() -> None:
    state = _state()
    _extract_fields(state, "Complete Address: 12 Mabini St, Pasig")
    _extract_fields(state, "Landmark: near the chapel")
    assert state.draft.address == "12 Mabini St, Pasig, near the chapel"


def test_landmark_alone_becomes_address() -> None:
    state = _state()
    _extract_fields(state, "Landmark: blue gate")
    assert state.draft.address == "blue gate"


def test_card_message_others_and_mop() -> None:
    state = _state()
    _extract_fields(state, "Card Message: Happy Birthday, Mom!")
    _extract_fields(state, "Add-ons: chocolates")
    _extract_fields(state, "MOP: gcash")
    assert state.draft.card_message == "Happy Birthday, Mom!"
    assert state.draft.others == "chocolates"
    assert state.draft.mop == "GCash"


def test_date_and_time_lines() -> None:
    state = _state()
    _extract_fields(state, "Target Date: Oct 20")
    _extract_fields(state, "Delivery Time: 2-3pm")
    assert state.draft.target_date == date(2026, 10, 20)
    assert state.draft.delivery_time == "14:00"


def test_unparsable_date_and_time_stay_absent() -> None:
    state = _state()
    _extract_fields(state, "Date: sometime next week")
    _extract_fields(state, "Time: asap")
    assert state.draft.target_date is None
    assert state.draft.delivery_time is None
