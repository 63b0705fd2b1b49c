"""Shared HTTP client setup for Spotify requests.

Provides the async context manager that yields either a caller-supplied
``httpx.AsyncClient`` or a fresh one with the configured timeout.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx


UNKNOWN_ERROR_MESSAGE = "Unknown error"


def build_timeout(timeout_ms: int) -> httpx.Timeout:
    """Return an httpx timeout for the given number of milliseconds."""
    return httpx.Timeout(timeout_ms / 1000)


def extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of a Spotify error response.

    The Web API answers ``{"error": {"status": 401, "message": "..."}}`` while
    the accounts service answers ``{"error": "invalid_client",
    "error_description": "..."}``. Both shapes are handled; anything else falls
    back to the raw body text.

    Args:
        response: The non-2xx response returned upstream.

    Returns:
        The upstream message, or ``"Unknown error"`` when none is present.

    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or UNKNOWN_ERROR_MESSAGE

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        description = body.get("error_description")
        if description:
            return str(description)
        if isinstance(error, str) and error:
            return error
    return UNKNOWN_ERROR_MESSAGE


@asynccontextmanager
async def open_http_client(
    timeout_ms: int,
    *,
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield an HTTP client for a single request.

    An injected client is yielded as-is and left open for its owner to close.
    Otherwise a short-lived client is created and closed on exit.

    Args:
        timeout_ms: Request timeout in milliseconds for newly created clients.
        client: Optional long-lived client to reuse.

    Yields:
        An ``httpx.AsyncClient`` ready for use.

    """
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=build_timeout(timeout_ms)) as http_client:
        yield http_client


__all__ = ["UNKNOWN_ERROR_MESSAGE", "build_timeout", "extract_error_message", "open_http_client"]
