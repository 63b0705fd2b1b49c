"""Shared fixtures for unit tests."""

from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import httpx
import pytest
from fakes import FakeSpotify, make_config

from spotify_mcp.client.spotify_client import SpotifyClient
from spotify_mcp.client.token_manager import TokenManager
from spotify_mcp.config import SpotifyConfig


@pytest.fixture
def config() -> SpotifyConfig:
    """Return a config with test credentials and default timeouts."""
    return make_config()


@pytest.fixture
def fake_spotify() -> FakeSpotify:
    """Return a fresh fake upstream."""
    return FakeSpotify()


@pytest.fixture
def make_client(
    fake_spotify: FakeSpotify,
    config: SpotifyConfig,
) -> Callable[..., AbstractAsyncContextManager[SpotifyClient]]:
    """Return a factory opening a ``SpotifyClient`` wired to the fake upstream."""

    @asynccontextmanager
    async def _make_client(client_config: SpotifyConfig | None = None) -> AsyncIterator[SpotifyClient]:
        resolved = client_config or config
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_spotify)) as http_client:
            yield SpotifyClient(
                resolved,
                token_manager=TokenManager(resolved, http_client=http_client),
                http_client=http_client,
            )

    return _make_client


@pytest.fixture
def make_token_manager(
    fake_spotify: FakeSpotify,
    config: SpotifyConfig,
) -> Callable[..., AbstractAsyncContextManager[TokenManager]]:
    """Return a factory opening a ``TokenManager`` wired to the fake upstream."""

    @asynccontextmanager
    async def _make_token_manager(client_config: SpotifyConfig | None = None) -> AsyncIterator[TokenManager]:
        async with httpx.AsyncClient(transport=httpx.MockTransport(fake_spotify)) as http_client:
            yield TokenManager(client_config or config, http_client=http_client)

    return _make_token_manager
