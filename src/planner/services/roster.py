"""Guest e-mail roster.

The roster is an ordered tuple of unique addresses. Insertion order is the
order shown to the user and the order sent in the create-trip payload.
"""

import re

from planner.errors import ErrorCode, ValidationError

# local-part@domain.tld, no whitespace, at least one dot in the domain and a
# non-empty segment after the last dot.
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@.]+$")


def normalize_email(raw: str) -> str:
    return raw.strip().lower()


def validate_email(email: str) -> bool:
    return bool(_EMAIL_PATTERN.match(email))


def add_email(roster: tuple[str, ...], email: str) -> tuple[str, ...]:
    """Return a new roster with ``email`` appended.

    Raises:
        ValidationError: INVALID_EMAIL if the address is malformed,
            DUPLICATE_EMAIL if it is already on the roster.
    """
    if not validate_email(email):
        raise ValidationError(f"Invalid e-mail address: {email!r}", code=ErrorCode.INVALID_EMAIL)
    if email in roster:
        raise ValidationError(f"E-mail already invited: {email!r}", code=ErrorCode.DUPLICATE_EMAIL)
    return (*roster, email)


def remove_email(roster: tuple[str, ...], email: str) -> tuple[str, ...]:
    """Drop every entry equal to ``email``. Absent addresses are a no-op."""
    return tuple(entry for entry in roster if entry != email)
