"""Important links shared with everyone on a trip."""

import httpx
import pydantic

from planner.api.base import request_json
from planner.errors import TripServiceError
from planner.models.trip import LinkCreate, TripLink


class LinksService:
    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def create(self, trip_id: str, link: LinkCreate) -> str:
        data = await request_json(self._client, "POST", f"/trips/{trip_id}/links", json=link.model_dump())
        link_id = data.get("linkId")
        if not link_id:
            raise TripServiceError(f"Create-link response for {trip_id} has no linkId")
        return str(link_id)

    async def list_by_trip(self, trip_id: str) -> list[TripLink]:
        data = await request_json(self._client, "GET", f"/trips/{trip_id}/links")
        try:
            return [TripLink.model_validate(item) for item in data["links"]]
        except (KeyError, TypeError, pydantic.ValidationError) as e:
            raise TripServiceError(f"Unexpected links response for {trip_id}: {e}") from e
