"""Trip endpoints: create a trip and fetch its details."""

import httpx
import pydantic

from planner.api.base import request_json
from planner.errors import TripServiceError
from planner.models.trip import TripCreated, TripCreateRequest, TripDetails


class TripService:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def create(self, request: TripCreateRequest) -> TripCreated:
        data = await request_json(self._client, "POST", "/trips", json=request.model_dump(mode="json"))
        try:
            return TripCreated.model_validate(data)
        except pydantic.ValidationError as e:
            raise TripServiceError(f"Unexpected create-trip response: {e}") from e

    async def get_by_id(self, trip_id: str) -> TripDetails:
        data = await request_json(self._client, "GET", f"/trips/{trip_id}")
        try:
            return TripDetails.model_validate(data["trip"])
        except (KeyError, pydantic.ValidationError) as e:
            raise TripServiceError(f"Unexpected trip response for {trip_id}: {e}") from e
