"""Payloads exchanged with the remote Trip Service."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TripCreateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str = Field(..., min_length=4)
    starts_at: datetime
    ends_at: datetime
    emails_to_invite: list[str] = []


class TripCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trip_id: str = Field(..., alias="tripId", min_length=1)


class TripDetails(BaseModel):
    id: str
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool


class LinkCreate(BaseModel):
    title: str = Field(..., min_length=1)
    url: str


class TripLink(BaseModel):
    id: str
    title: str
    url: str


class Participant(BaseModel):
    id: str
    name: str | None = None
    email: str
    is_confirmed: bool
