"""
Pydantic models for the trip planner.
"""

from planner.models.trip import (
    LinkCreate,
    Participant,
    TripCreated,
    TripCreateRequest,
    TripDetails,
    TripLink,
)
from planner.models.wizard import DateRange, WizardState, WizardStep

__all__ = [
    "DateRange",
    "LinkCreate",
    "Participant",
    "TripCreateRequest",
    "TripCreated",
    "TripDetails",
    "TripLink",
    "WizardState",
    "WizardStep",
]
