"""MCP tool: get_track.

Returns detailed information about a single Spotify track.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from ..operations.tracks import get_track
from .common import build_tool_response, run_client_operation, serialize_record


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the get_track tool on the provided app instance."""

    @app.tool(
        name="get_track",
        description=(
            "Return detailed information about a Spotify track: artists, album, duration, "
            "popularity, external IDs and playability in the given market."
        ),
        annotations={
            "title": "Get track details",
            "readOnlyHint": True,
        },
    )
    async def get_track_tool(ctx: Context, track_id: str, market: str | None = None) -> dict[str, Any]:
        track = await run_client_operation(
            ctx,
            deps,
            log_message=f"Fetching Spotify track '{track_id}'.",
            operation=lambda client: get_track(client, track_id, market=market),
        )
        return build_tool_response("track", serialize_record(track))


__all__ = ["register"]
