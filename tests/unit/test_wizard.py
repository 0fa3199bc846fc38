"""Unit tests for the trip-creation wizard state machine."""

from datetime import date

import pydantic
import pytest

from planner.errors import ErrorCode, ValidationError
from planner.models.wizard import DateRange, WizardState, WizardStep
from planner.services.wizard import AdvanceOutcome, WizardStateMachine

MAY_1 = date(2024, 5, 1)
MAY_10 = date(2024, 5, 10)


def _wizard(destination: str = "Paris", start: date | None = MAY_1, end: date | None = MAY_10) -> WizardStateMachine:
    return WizardStateMachine(WizardState(destination=destination, date_range=DateRange(start=start, end=end)))


def test_initial_state():
    wizard = WizardStateMachine()
    assert wizard.step == WizardStep.TRIP_DETAILS
    assert wizard.state.destination == ""
    assert wizard.state.date_range == DateRange()
    assert wizard.state.emails == ()
    assert wizard.state.is_submitting is False


def test_advance_to_guest_step():
    wizard = _wizard()
    assert wizard.advance() == AdvanceOutcome.MOVED_TO_GUESTS
    assert wizard.step == WizardStep.ADD_EMAIL


def test_advance_on_guest_step_asks_for_confirmation():
    wizard = _wizard()
    wizard.advance()
    assert wizard.advance() == AdvanceOutcome.CONFIRM_SUBMIT
    assert wizard.step == WizardStep.ADD_EMAIL


@pytest.mark.parametrize("destination", ["NYC", "Rio", "ab", "a", "  Rio  ", "   x    "])
def test_short_destination_rejected(destination):
    wizard = _wizard(destination=destination)
    with pytest.raises(ValidationError) as exc_info:
        wizard.advance()
    assert exc_info.value.code == ErrorCode.DESTINATION_TOO_SHORT
    assert wizard.step == WizardStep.TRIP_DETAILS


@pytest.mark.parametrize("destination", ["", "   ", "\t\n"])
def test_blank_destination_rejected(destination):
    wizard = _wizard(destination=destination)
    with pytest.raises(ValidationError) as exc_info:
        wizard.advance()
    assert exc_info.value.code == ErrorCode.DESTINATION_REQUIRED
    assert wizard.step == WizardStep.TRIP_DETAILS


@pytest.mark.parametrize("start,end", [(None, None), (MAY_1, None)])
def test_incomplete_dates_rejected(start, end):
    wizard = _wizard(start=start, end=end)
    with pytest.raises(ValidationError) as exc_info:
        wizard.advance()
    assert exc_info.value.code == ErrorCode.DATES_REQUIRED
    assert wizard.step == WizardStep.TRIP_DETAILS


def test_four_character_destination_accepted():
    wizard = _wizard(destination="Lima")
    assert wizard.advance() == AdvanceOutcome.MOVED_TO_GUESTS


def test_select_day_builds_range():
    wizard = WizardStateMachine()
    wizard.select_day(MAY_10)
    wizard.select_day(MAY_1)
    assert wizard.state.date_range == DateRange(start=MAY_1, end=MAY_10)
    assert wizard.display_range == "01 May - 10 May"


def test_details_locked_on_guest_step():
    wizard = _wizard()
    wizard.advance()
    with pytest.raises(ValidationError) as exc_info:
        wizard.set_destination("London")
    assert exc_info.value.code == ErrorCode.STEP_LOCKED
    with pytest.raises(ValidationError):
        wizard.select_day(date(2024, 6, 1))
    assert wizard.state.destination == "Paris"
    assert wizard.state.date_range == DateRange(start=MAY_1, end=MAY_10)


def test_guests_locked_on_details_step():
    wizard = _wizard()
    with pytest.raises(ValidationError) as exc_info:
        wizard.add_email("a@b.com")
    assert exc_info.value.code == ErrorCode.STEP_LOCKED
    with pytest.raises(ValidationError):
        wizard.remove_email("a@b.com")


def test_add_email_normalizes(filled_wizard):
    filled_wizard.add_email("  Guest@Example.COM ")
    assert filled_wizard.state.emails == ("guest@example.com",)
    assert filled_wizard.state.guest_count == 1


def test_add_email_case_variant_is_duplicate(filled_wizard):
    filled_wizard.add_email("a@b.com")
    with pytest.raises(ValidationError) as exc_info:
        filled_wizard.add_email("A@B.COM")
    assert exc_info.value.code == ErrorCode.DUPLICATE_EMAIL
    assert filled_wizard.state.emails == ("a@b.com",)


def test_invalid_email_leaves_roster_unchanged(filled_wizard):
    filled_wizard.add_email("a@b.com")
    with pytest.raises(ValidationError) as exc_info:
        filled_wizard.add_email("nope")
    assert exc_info.value.code == ErrorCode.INVALID_EMAIL
    assert filled_wizard.state.emails == ("a@b.com",)


def test_remove_email(filled_wizard):
    filled_wizard.add_email("a@b.com")
    filled_wizard.add_email("c@d.com")
    filled_wizard.remove_email("a@b.com")
    filled_wizard.remove_email("a@b.com")
    assert filled_wizard.state.emails == ("c@d.com",)


def test_retreat_preserves_data(filled_wizard):
    filled_wizard.add_email("a@b.com")
    before = filled_wizard.state

    filled_wizard.retreat()

    assert filled_wizard.step == WizardStep.TRIP_DETAILS
    assert filled_wizard.state.destination == before.destination
    assert filled_wizard.state.date_range == before.date_range
    assert filled_wizard.state.emails == before.emails
    filled_wizard.set_destination("Lisbon")
    assert filled_wizard.state.destination == "Lisbon"


def test_retreat_from_details_rejected():
    wizard = _wizard()
    with pytest.raises(ValidationError) as exc_info:
        wizard.retreat()
    assert exc_info.value.code == ErrorCode.STEP_LOCKED


def test_nothing_editable_while_submitting(filled_wizard):
    filled_wizard.set_submitting(True)
    assert not filled_wizard.guests_editable
    with pytest.raises(ValidationError):
        filled_wizard.add_email("a@b.com")
    with pytest.raises(ValidationError):
        filled_wizard.retreat()


def test_state_is_immutable():
    wizard = WizardStateMachine()
    with pytest.raises(pydantic.ValidationError):
        wizard.state.destination = "Paris"  # type: ignore[misc]
