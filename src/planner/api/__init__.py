"""Clients for the remote Trip Service."""

from planner.api.links import LinksService
from planner.api.participants import ParticipantsService
from planner.api.trips import TripService

__all__ = ["LinksService", "ParticipantsService", "TripService"]
