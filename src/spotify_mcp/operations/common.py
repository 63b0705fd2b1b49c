"""Common utilities for Spotify operations modules.

This module contains shared constants and argument helpers used across the
operations modules (search, playback, tracks). All helpers here run before any
network call, so invalid input never reaches the Web API.
"""

from ..errors import InvalidArgumentError

# Operation names attached to errors and log lines
SEARCH_OPERATION = "Search"
GET_PLAYBACK_STATE_OPERATION = "Get Playback State"
START_PLAYBACK_OPERATION = "Start Playback"
PAUSE_PLAYBACK_OPERATION = "Pause Playback"
SKIP_NEXT_OPERATION = "Skip Next"
SKIP_PREVIOUS_OPERATION = "Skip Previous"
GET_TRACK_OPERATION = "Get Track Details"


def require_text(value: str | None, *, message: str, operation: str) -> str:
    """Return ``value`` stripped of surrounding whitespace, rejecting blanks.

    Args:
        value: Caller-supplied text.
        message: Error message used when the value is missing or blank.
        operation: Operation name attached to the error.

    Returns:
        The stripped value.

    Raises:
        InvalidArgumentError: If the value is ``None``, empty, or whitespace only.

    """
    if value is None or not value.strip():
        raise InvalidArgumentError(message, operation=operation)
    return value.strip()


def resolve_market(market: str | None, default_market: str) -> str:
    """Return the caller's market code, or the configured default when blank."""
    if market is None or not market.strip():
        return default_market
    return market.strip()


def device_params(device_id: str | None) -> dict[str, str] | None:
    """Build the ``device_id`` query parameter, omitting it when not provided."""
    if not device_id:
        return None
    return {"device_id": device_id}


__all__ = [
    "GET_PLAYBACK_STATE_OPERATION",
    "GET_TRACK_OPERATION",
    "PAUSE_PLAYBACK_OPERATION",
    "SEARCH_OPERATION",
    "SKIP_NEXT_OPERATION",
    "SKIP_PREVIOUS_OPERATION",
    "START_PLAYBACK_OPERATION",
    "device_params",
    "require_text",
    "resolve_market",
]
