"""Validation for the "new link" form on the trip details screen."""

from urllib.parse import urlparse

from planner.errors import ErrorCode, ValidationError
from planner.models.trip import LinkCreate


def validate_url(url: str) -> bool:
    if not url or any(ch.isspace() for ch in url):
        return False
    try:
        parsed = urlparse(url)
        host = parsed.hostname
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https") or not host:
        return False
    return "." in host.strip(".")


def validate_link(title: str, url: str) -> LinkCreate:
    """Return the payload for a new link or raise ValidationError."""
    title = title.strip()
    url = url.strip()
    if not title:
        raise ValidationError("Link title is empty", code=ErrorCode.LINK_TITLE_REQUIRED)
    if not validate_url(url):
        raise ValidationError(f"Invalid link URL: {url!r}", code=ErrorCode.INVALID_URL)
    return LinkCreate(title=title, url=url)
