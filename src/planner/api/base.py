"""Shared request handling for Trip Service clients."""

import logging
from typing import Any

import httpx

from planner.errors import ErrorCode, TripServiceError

logger = logging.getLogger(__name__)


async def request_json(client: httpx.AsyncClient, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
    """Send a request and return the decoded JSON object.

    Raises:
        TripServiceError: On transport errors, non-2xx responses or a body
            that is not a JSON object.
    """
    try:
        response = await client.request(method, path, **kwargs)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPStatusError as e:
        logger.warning(
            "%s %s failed with %d: %s",
            method,
            path,
            e.response.status_code,
            e.response.text,
        )
        code = ErrorCode.TRIP_NOT_FOUND if e.response.status_code == 404 else ErrorCode.SERVICE_UNAVAILABLE
        raise TripServiceError(
            f"{method} {path} returned {e.response.status_code}",
            code=code,
            status_code=e.response.status_code,
        ) from e
    except httpx.HTTPError as e:
        logger.warning("%s %s transport error: %s", method, path, e)
        raise TripServiceError(f"{method} {path} failed: {e}") from e
    except ValueError as e:
        raise TripServiceError(f"{method} {path} returned invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise TripServiceError(f"{method} {path} returned {type(data).__name__}, expected object")
    return data
