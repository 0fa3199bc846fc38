"""New trip screen: destination, dates, guests and confirmation."""

import logging
from collections.abc import Awaitable, Callable

from planner.errors import PersistenceError
from planner.services.orchestrator import Navigate, SubmitResult, TripCreationOrchestrator
from planner.services.wizard import AdvanceOutcome, WizardStateMachine
from planner.storage.interface import TripStorage

logger = logging.getLogger(__name__)

Confirm = Callable[[], Awaitable[bool]]


class NewTripScreen:
    def __init__(
        self,
        orchestrator: TripCreationOrchestrator,
        storage: TripStorage,
        navigate: Navigate,
        wizard: WizardStateMachine | None = None,
    ) -> None:
        self.wizard = wizard or WizardStateMachine()
        self._orchestrator = orchestrator
        self._storage = storage
        self._navigate = navigate

    async def restore(self) -> str | None:
        """Navigate to a trip saved by a previous session, if any."""
        try:
            trip_id = await self._storage.get()
        except PersistenceError:
            logger.exception("Could not read the saved trip")
            return None
        if trip_id:
            self._navigate(trip_id)
        return trip_id

    async def on_continue(self, confirm: Confirm) -> SubmitResult | None:
        """Handle the primary button.

        Returns None when no submission happened (moved to the guest step or
        the user declined); ValidationError from advance() propagates.
        """
        if self.wizard.state.is_submitting:
            return None
        outcome = self.wizard.advance()
        if outcome == AdvanceOutcome.MOVED_TO_GUESTS:
            return None
        if not await confirm():
            return None
        return await self._orchestrator.submit(self.wizard)


def build_new_trip_screen(navigate: Navigate) -> NewTripScreen:
    from planner.api.trips import TripService
    from planner.clients import get_http_client
    from planner.storage.interface import get_trip_storage

    storage = get_trip_storage()
    orchestrator = TripCreationOrchestrator(TripService(get_http_client()), storage, navigate)
    return NewTripScreen(orchestrator, storage, navigate)
