"""Fake Spotify upstream used by the unit tests.

``FakeSpotify`` stands in for both the accounts service and the Web API behind
an ``httpx.MockTransport`` and records every request it receives.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeAlias
from urllib.parse import parse_qs

import httpx

from spotify_mcp.config import SpotifyConfig

ApiHandler: TypeAlias = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class FakeSpotify:
    """Route token and API requests to canned responses and record them."""

    def __init__(self) -> None:
        self.token_requests: list[httpx.Request] = []
        self.api_requests: list[httpx.Request] = []
        self.token_status = 200
        self.token_body: Any = None
        self.token_delay = 0.0
        self.token_error: Exception | None = None
        self.expires_in = 3600
        self.api_handler: ApiHandler = lambda _request: httpx.Response(204)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        """Handle a request sent through the mock transport."""
        if request.url.host == "accounts.spotify.com":
            return await self._handle_token(request)
        self.api_requests.append(request)
        result = self.api_handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _handle_token(self, request: httpx.Request) -> httpx.Response:
        self.token_requests.append(request)
        if self.token_delay:
            await asyncio.sleep(self.token_delay)
        if self.token_error is not None:
            raise self.token_error
        if self.token_body is not None:
            if isinstance(self.token_body, str):
                return httpx.Response(self.token_status, text=self.token_body)
            return httpx.Response(self.token_status, json=self.token_body)
        return httpx.Response(
            self.token_status,
            json={
                "access_token": f"token-{len(self.token_requests)}",
                "token_type": "Bearer",
                "expires_in": self.expires_in,
            },
        )

    @property
    def request_count(self) -> int:
        """Total number of requests received."""
        return len(self.token_requests) + len(self.api_requests)


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode a form-encoded request body into single values."""
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


def make_config(**overrides: Any) -> SpotifyConfig:
    """Build a config with test credentials."""
    values: dict[str, Any] = {
        "client_id": "client-id",
        "client_secret": "client-secret",
        "redirect_uri": "http://localhost:8888/callback",
    }
    values.update(overrides)
    return SpotifyConfig(**values)


__all__ = ["ApiHandler", "FakeSpotify", "form_fields", "make_config"]
