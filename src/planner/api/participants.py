"""Trip participants (invited guests and their confirmation status)."""

import httpx
import pydantic

from planner.api.base import request_json
from planner.errors import TripServiceError
from planner.models.trip import Participant


class ParticipantsService:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def list_by_trip(self, trip_id: str) -> list[Participant]:
        data = await request_json(self._client, "GET", f"/trips/{trip_id}/participants")
        try:
            return [Participant.model_validate(item) for item in data["participants"]]
        except (KeyError, TypeError, pydantic.ValidationError) as e:
            raise TripServiceError(f"Unexpected participants response for {trip_id}: {e}") from e
