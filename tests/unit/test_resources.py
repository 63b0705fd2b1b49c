"""Unit tests for MCP resources."""

from collections.abc import Awaitable, Callable
from types import SimpleNamespace
from typing import Any, TypeAlias
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastmcp import Context

from spotify_mcp import resources
from spotify_mcp.errors import UpstreamUnavailableError
from spotify_mcp.models.normalized import PlaybackState

ResourceFn: TypeAlias = Callable[[Context], Awaitable[dict[str, Any]]]


class _FakeApp:
    """Minimal stand-in for FastMCP app to capture registered resources."""

    def __init__(self) -> None:
        self.resources: dict[str, ResourceFn] = {}

    def resource(self, *, uri: str, **kwargs: Any) -> Callable[[ResourceFn], ResourceFn]:
        """Return a decorator that captures the resource function by URI."""

        def _decorator(func: ResourceFn) -> ResourceFn:
            _ = kwargs
            self.resources[uri] = func
            return func

        return _decorator


@pytest.fixture
def mock_ctx() -> Context:
    """Return a Context-like AsyncMock for resource logging."""
    ctx = MagicMock(spec=Context)
    ctx.warning = AsyncMock()
    return ctx


@pytest.fixture
def app() -> _FakeApp:
    """Return a fake app with the resources registered against a stub client."""
    fake_app = _FakeApp()
    resources.register(fake_app, deps=SimpleNamespace(get_client=MagicMock()))  # type: ignore[arg-type]
    return fake_app


def test_player_resource_registered(app: _FakeApp) -> None:
    """The player resource is exposed under its URI."""
    assert "spotify://player" in app.resources


@pytest.mark.asyncio
async def test_player_resource_ok(app: _FakeApp, mock_ctx: Context) -> None:
    """An active player is reported with its snapshot."""
    state = PlaybackState(device=None, context=None, current_track=None, is_playing=True)
    with patch("spotify_mcp.resources.get_playback_state", AsyncMock(return_value=state)):
        result = await app.resources["spotify://player"](mock_ctx)

    assert "retrieved_at" in result
    assert result["player"]["status"] == "ok"
    assert result["player"]["state"]["isPlaying"] is True


@pytest.mark.asyncio
async def test_player_resource_inactive(app: _FakeApp, mock_ctx: Context) -> None:
    """No active player is reported as inactive."""
    with patch("spotify_mcp.resources.get_playback_state", AsyncMock(return_value=None)):
        result = await app.resources["spotify://player"](mock_ctx)

    assert result["player"] == {"status": "inactive", "state": None}


@pytest.mark.asyncio
async def test_player_resource_degrades_on_error(app: _FakeApp, mock_ctx: Context) -> None:
    """Failures become a structured error payload instead of raising."""
    error = UpstreamUnavailableError("No response received from Spotify (Get Playback State) within 100ms.")
    with patch("spotify_mcp.resources.get_playback_state", AsyncMock(side_effect=error)):
        result = await app.resources["spotify://player"](mock_ctx)

    assert result["player"] == {
        "status": "error",
        "error": "No response received from Spotify (Get Playback State) within 100ms.",
        "error_type": "UpstreamUnavailableError",
    }
    mock_ctx.warning.assert_awaited_once()  # type: ignore[attr-defined]
