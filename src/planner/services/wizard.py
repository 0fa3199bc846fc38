"""Trip-creation wizard state machine.

States:
- TRIP_DETAILS: destination and dates are editable (initial state)
- ADD_EMAIL: guests are editable, destination and dates are locked

The machine owns the only copy of the WizardState. Every operation either
replaces it with a new value or raises ValidationError and leaves it as is.
"""

import logging
from datetime import date
from enum import Enum

from planner.errors import ErrorCode, ValidationError
from planner.models.wizard import WizardState, WizardStep
from planner.services import date_range, roster

logger = logging.getLogger(__name__)

MIN_DESTINATION_LENGTH = 4


class AdvanceOutcome(str, Enum):
    """What the caller should do after a successful advance()."""

    MOVED_TO_GUESTS = "MOVED_TO_GUESTS"
    CONFIRM_SUBMIT = "CONFIRM_SUBMIT"


def validate_trip_details(state: WizardState) -> None:
    """Raise ValidationError if the trip details cannot be submitted."""
    destination = state.destination.strip()
    if not destination:
        raise ValidationError("Destination is empty", code=ErrorCode.DESTINATION_REQUIRED)
    if not state.date_range.is_complete:
        raise ValidationError("Date range is incomplete", code=ErrorCode.DATES_REQUIRED)
    if len(destination) < MIN_DESTINATION_LENGTH:
        raise ValidationError(
            f"Destination {destination!r} is shorter than {MIN_DESTINATION_LENGTH} characters",
            code=ErrorCode.DESTINATION_TOO_SHORT,
        )


class WizardStateMachine:
    def __init__(self, state: WizardState | None = None) -> None:
        self._state = state or WizardState()

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def step(self) -> WizardStep:
        return self._state.step

    @property
    def details_editable(self) -> bool:
        return self._state.step == WizardStep.TRIP_DETAILS and not self._state.is_submitting

    @property
    def guests_editable(self) -> bool:
        return self._state.step == WizardStep.ADD_EMAIL and not self._state.is_submitting

    @property
    def display_range(self) -> str:
        return date_range.format_range(self._state.date_range)

    # --- trip details step ---

    def set_destination(self, destination: str) -> WizardState:
        self._require(self.details_editable, "destination")
        self._state = self._state.model_copy(update={"destination": destination})
        return self._state

    def select_day(self, picked: date) -> WizardState:
        self._require(self.details_editable, "dates")
        new_range = date_range.select_day(self._state.date_range, picked)
        self._state = self._state.model_copy(update={"date_range": new_range})
        return self._state

    # --- guest step ---

    def add_email(self, raw: str) -> WizardState:
        self._require(self.guests_editable, "guests")
        emails = roster.add_email(self._state.emails, roster.normalize_email(raw))
        self._state = self._state.model_copy(update={"emails": emails})
        return self._state

    def remove_email(self, email: str) -> WizardState:
        self._require(self.guests_editable, "guests")
        self._state = self._state.model_copy(update={"emails": roster.remove_email(self._state.emails, email)})
        return self._state

    # --- transitions ---

    def advance(self) -> AdvanceOutcome:
        """Validate the trip details and move forward.

        From TRIP_DETAILS this switches to ADD_EMAIL. From ADD_EMAIL the state
        is unchanged and the caller must confirm with the user before submitting.
        """
        validate_trip_details(self._state)
        if self._state.step == WizardStep.TRIP_DETAILS:
            self._state = self._state.model_copy(update={"step": WizardStep.ADD_EMAIL})
            logger.debug("Wizard moved to %s", WizardStep.ADD_EMAIL.value)
            return AdvanceOutcome.MOVED_TO_GUESTS
        return AdvanceOutcome.CONFIRM_SUBMIT

    def retreat(self) -> WizardState:
        """Return to TRIP_DETAILS keeping destination, dates and guests."""
        if self._state.step != WizardStep.ADD_EMAIL:
            raise ValidationError(f"Cannot go back from {self._state.step.value}", code=ErrorCode.STEP_LOCKED)
        self._require(not self._state.is_submitting, "step")
        self._state = self._state.model_copy(update={"step": WizardStep.TRIP_DETAILS})
        return self._state

    def set_submitting(self, is_submitting: bool) -> WizardState:
        self._state = self._state.model_copy(update={"is_submitting": is_submitting})
        return self._state

    def _require(self, allowed: bool, field: str) -> None:
        if not allowed:
            raise ValidationError(
                f"{field} cannot be edited in step {self._state.step.value}",
                code=ErrorCode.STEP_LOCKED,
            )
