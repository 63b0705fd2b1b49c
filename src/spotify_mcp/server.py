"""Entry point for the Spotify MCP server.

This module wires together the FastMCP app and registers tools. Implementation
logic lives in focused modules under ``spotify_mcp/``.

Registered tools:
- ``search``: search tracks, albums and artists
- ``get_playback_state``: read the current player snapshot
- ``play`` / ``pause`` / ``skip_next`` / ``skip_previous``: playback commands
- ``get_track``: detailed track lookup
- ``exchange_authorization_code``: user-delegated token exchange
"""

import logging
import os
import signal
import sys
from functools import cache
from types import SimpleNamespace

from fastmcp import FastMCP

from . import prompts, resources
from .client.spotify_client import SpotifyClient
from .client.token_manager import TokenManager
from .config import SpotifyConfig
from .tools.auth import register as register_auth
from .tools.player import register as register_player
from .tools.search import register as register_search
from .tools.tracks import register as register_tracks

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("spotify_mcp.server")

app = FastMCP(
    name="spotify-mcp",
    instructions="Expose tools that search the Spotify catalog and control Spotify playback.",
)


@cache
def get_client() -> SpotifyClient:
    """Return the server's Spotify client, building it from the environment on first use.

    The client owns the only cached credential, so every tool shares one token.
    """
    config = SpotifyConfig.from_env()
    logger.info("Configured Spotify client for %s.", config.base_url_str)
    return SpotifyClient(config, token_manager=TokenManager(config))


# Explicit re-exports for public API stability (and to satisfy linters)
__all__ = [
    "SpotifyClient",
    "SpotifyConfig",
    "TokenManager",
    "app",
    "get_client",
    "handle_interrupt",
    "main",
]


def _register_capabilities() -> None:
    """Import tool, resource, and prompt modules and register them with the app instance."""
    deps = SimpleNamespace(get_client=get_client)
    register_search(app, deps=deps)
    register_player(app, deps=deps)
    register_tracks(app, deps=deps)
    register_auth(app, deps=deps)
    resources.register(app, deps=deps)
    prompts.register(app)


# Register all capabilities with the app instance (after function is defined)
_register_capabilities()


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the spotify-mcp console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    app.run()


if __name__ == "__main__":
    main()
