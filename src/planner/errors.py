"""
Custom exceptions and error handling for the trip planner.

Defines application-specific exceptions with error codes so the
presentation layer can decide how to surface each failure.

Usage:
    from planner.errors import ValidationError, ErrorCode

    raise ValidationError("destination is empty", code=ErrorCode.DESTINATION_REQUIRED)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""

    # Trip details validation
    DESTINATION_REQUIRED = "DESTINATION_REQUIRED"
    DESTINATION_TOO_SHORT = "DESTINATION_TOO_SHORT"
    DATES_REQUIRED = "DATES_REQUIRED"
    STEP_LOCKED = "STEP_LOCKED"

    # Guest validation
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # Link validation
    LINK_TITLE_REQUIRED = "LINK_TITLE_REQUIRED"
    INVALID_URL = "INVALID_URL"

    # Trip creation
    CREATE_TRIP_FAILED = "CREATE_TRIP_FAILED"
    SUBMISSION_IN_PROGRESS = "SUBMISSION_IN_PROGRESS"

    # Local persistence
    SAVE_TRIP_FAILED = "SAVE_TRIP_FAILED"

    # Remote service
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.DESTINATION_REQUIRED: "Fill in every trip detail to continue.",
    ErrorCode.DESTINATION_TOO_SHORT: "The destination must have at least 4 characters.",
    ErrorCode.DATES_REQUIRED: "Fill in every trip detail to continue.",
    ErrorCode.STEP_LOCKED: "Go back to the trip details to change this field.",
    ErrorCode.INVALID_EMAIL: "Invalid e-mail.",
    ErrorCode.DUPLICATE_EMAIL: "This e-mail has already been added.",
    ErrorCode.LINK_TITLE_REQUIRED: "Give the link a title.",
    ErrorCode.INVALID_URL: "Invalid link.",
    ErrorCode.CREATE_TRIP_FAILED: "The trip could not be created. Please try again.",
    ErrorCode.SUBMISSION_IN_PROGRESS: "Your trip is already being created.",
    ErrorCode.SAVE_TRIP_FAILED: "The trip was created but could not be saved on this device.",
    ErrorCode.SERVICE_UNAVAILABLE: "The trip service is unavailable. Please try again later.",
    ErrorCode.TRIP_NOT_FOUND: "This trip could not be found.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class PlannerError(Exception):
    """Base exception for all trip planner errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class ValidationError(PlannerError):
    """User input was rejected. No state was changed."""

    pass


class CreateTripError(PlannerError):
    """The remote service failed to create the trip."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CREATE_TRIP_FAILED):
        super().__init__(message, code)


class PersistenceError(PlannerError):
    """The trip identifier could not be stored or read on the device."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.SAVE_TRIP_FAILED):
        super().__init__(message, code)


class TripServiceError(PlannerError):
    """Transport or protocol failure talking to the remote Trip Service."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.SERVICE_UNAVAILABLE, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, code)
