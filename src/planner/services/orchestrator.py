"""Create-trip transaction.

Builds the create request from the wizard state, calls the remote Trip
Service once, stores the returned identifier on the device and hands it to
navigation. Remote and local failures are reported separately: a trip that
exists remotely but could not be stored locally is still navigated to.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from planner.api.trips import TripService
from planner.errors import (
    CreateTripError,
    ErrorCode,
    PersistenceError,
    PlannerError,
    TripServiceError,
    ValidationError,
)
from planner.models.trip import TripCreateRequest
from planner.models.wizard import WizardState, WizardStep
from planner.services.wizard import WizardStateMachine, validate_trip_details
from planner.storage.interface import TripStorage

logger = logging.getLogger(__name__)

Navigate = Callable[[str], None]


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of one submit call.

    - success: trip_id set, error None
    - created but not stored: trip_id set, error is a PersistenceError
    - failed: trip_id None, error is a CreateTripError or ValidationError
    """

    trip_id: str | None = None
    error: PlannerError | None = None

    @property
    def created(self) -> bool:
        return self.trip_id is not None

    @property
    def ok(self) -> bool:
        return self.trip_id is not None and self.error is None


def _utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def build_create_request(state: WizardState) -> TripCreateRequest:
    """Derive the create-trip payload from a validated wizard state."""
    validate_trip_details(state)
    start, end = state.date_range.start, state.date_range.end
    if start is None or end is None:
        raise ValidationError("Date range is incomplete", code=ErrorCode.DATES_REQUIRED)
    return TripCreateRequest(
        destination=state.destination.strip(),
        starts_at=_utc_midnight(start),
        ends_at=_utc_midnight(end),
        emails_to_invite=list(state.emails),
    )


class TripCreationOrchestrator:
    def __init__(self, trip_service: TripService, storage: TripStorage, navigate: Navigate) -> None:
        self._trip_service = trip_service
        self._storage = storage
        self._navigate = navigate

    async def submit(self, wizard: WizardStateMachine) -> SubmitResult:
        if wizard.state.is_submitting:
            in_flight = CreateTripError("A create-trip request is already in flight", code=ErrorCode.SUBMISSION_IN_PROGRESS)
            return SubmitResult(error=in_flight)

        if wizard.step != WizardStep.ADD_EMAIL:
            locked = ValidationError(
                f"Cannot submit from step {wizard.step.value}", code=ErrorCode.STEP_LOCKED
            )
            return SubmitResult(error=locked)

        try:
            request = build_create_request(wizard.state)
        except PlannerError as e:
            return SubmitResult(error=e)

        wizard.set_submitting(True)
        try:
            try:
                created = await self._trip_service.create(request)
            except TripServiceError as e:
                logger.warning("Trip creation failed for %s: %s", request.destination, e.message)
                return SubmitResult(error=CreateTripError(f"Trip creation failed: {e.message}"))
            except Exception as e:
                logger.exception("Unexpected error creating trip for %s", request.destination)
                return SubmitResult(error=CreateTripError(f"Trip creation failed: {e}"))

            trip_id = created.trip_id
            logger.info(
                "Created trip %s for %s with %d guests",
                trip_id,
                request.destination,
                len(request.emails_to_invite),
            )

            persistence_error: PersistenceError | None = None
            try:
                await self._storage.save(trip_id)
            except PersistenceError as e:
                logger.warning("Trip %s created but not stored locally: %s", trip_id, e.message)
                persistence_error = e
            except Exception as e:
                logger.exception("Unexpected error storing trip %s", trip_id)
                persistence_error = PersistenceError(f"Could not save trip {trip_id}: {e}")
        finally:
            wizard.set_submitting(False)

        try:
            self._navigate(trip_id)
        except Exception:
            logger.exception("Navigation to trip %s failed", trip_id)
        return SubmitResult(trip_id=trip_id, error=persistence_error)
