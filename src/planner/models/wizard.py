"""State carried by the trip-creation wizard."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class WizardStep(str, Enum):
    TRIP_DETAILS = "TRIP_DETAILS"
    ADD_EMAIL = "ADD_EMAIL"


class DateRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: date | None = None
    end: date | None = None

    @model_validator(mode="after")
    def start_not_after_end(self) -> "DateRange":
        if self.end is not None and self.start is None:
            raise ValueError("end requires start")
        if self.start and self.end and self.start > self.end:
            raise ValueError("start must not be after end")
        return self

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


class WizardState(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: WizardStep = WizardStep.TRIP_DETAILS
    destination: str = ""
    date_range: DateRange = DateRange()
    emails: tuple[str, ...] = ()
    is_submitting: bool = False

    @property
    def guest_count(self) -> int:
        return len(self.emails)
