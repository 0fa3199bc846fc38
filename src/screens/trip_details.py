"""Trip details screen: important links and participants."""

import asyncio
import logging

from planner.api.links import LinksService
from planner.api.participants import ParticipantsService
from planner.errors import TripServiceError
from planner.models.trip import Participant, TripLink
from planner.services.links import validate_link

logger = logging.getLogger(__name__)


class TripDetailsScreen:
    def __init__(self, trip_id: str, links_service: LinksService, participants_service: ParticipantsService) -> None:
        self.trip_id = trip_id
        self.links: list[TripLink] = []
        self.participants: list[Participant] = []
        self.is_link_form_open = False
        self.is_creating_link = False
        self._links_service = links_service
        self._participants_service = participants_service

    async def load(self) -> None:
        await asyncio.gather(self.refresh_links(), self.refresh_participants())

    async def refresh_links(self) -> None:
        try:
            self.links = await self._links_service.list_by_trip(self.trip_id)
        except TripServiceError:
            logger.exception("Could not load links for trip %s", self.trip_id)

    async def refresh_participants(self) -> None:
        try:
            self.participants = await self._participants_service.list_by_trip(self.trip_id)
        except TripServiceError:
            logger.exception("Could not load participants for trip %s", self.trip_id)

    def open_link_form(self) -> None:
        self.is_link_form_open = True

    def close_link_form(self) -> None:
        self.is_link_form_open = False

    async def create_link(self, title: str, url: str) -> str | None:
        """Validate and create a link, then reload the list.

        Returns None without calling the service while another link is
        being created.

        Raises:
            ValidationError: Title is blank or the URL is invalid.
            TripServiceError: The service rejected the link.
        """
        if self.is_creating_link:
            return None
        link = validate_link(title, url)

        self.is_creating_link = True
        try:
            link_id = await self._links_service.create(self.trip_id, link)
        finally:
            self.is_creating_link = False

        logger.info("Created link %s on trip %s", link_id, self.trip_id)
        self.close_link_form()
        await self.refresh_links()
        return link_id


def build_trip_details_screen(trip_id: str) -> TripDetailsScreen:
    from planner.clients import get_http_client

    client = get_http_client()
    return TripDetailsScreen(trip_id, LinksService(client), ParticipantsService(client))
