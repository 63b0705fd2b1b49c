"""MCP tools: player snapshot and playback commands.

- ``get_playback_state``: read the current player snapshot
- ``play``: start or resume playback
- ``pause``: pause playback
- ``skip_next`` / ``skip_previous``: move through the queue

Commands only acknowledge that Spotify accepted them; query the state again to
observe their effect.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from ..models.normalized import PlaybackOffset
from ..operations.playback import get_playback_state, pause, play, skip_next, skip_previous
from .common import build_tool_response, run_client_operation, serialize_record


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the player tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with ``get_client``.

    """

    @app.tool(
        name="get_playback_state",
        description=(
            "Return the current Spotify playback snapshot (device, track, progress, shuffle and repeat). "
            "Returns null playbackState when nothing is playing."
        ),
        annotations={
            "title": "Get playback state",
            "readOnlyHint": True,
        },
    )
    async def get_playback_state_tool(
        ctx: Context,
        market: str | None = None,
        additional_types: list[str] | None = None,
    ) -> dict[str, Any]:
        state = await run_client_operation(
            ctx,
            deps,
            log_message="Reading Spotify playback state.",
            operation=lambda client: get_playback_state(client, market=market, media_types=additional_types),
        )
        return build_tool_response("playbackState", serialize_record(state))

    @app.tool(
        name="play",
        description=(
            "Start or resume Spotify playback, optionally on a specific device, from a context URI "
            "or an explicit list of track URIs."
        ),
        annotations={"title": "Start playback"},
    )
    async def play_tool(  # noqa: PLR0913 (mirrors the player endpoint's arguments)
        ctx: Context,
        device_id: str | None = None,
        context_uri: str | None = None,
        uris: list[str] | None = None,
        offset: PlaybackOffset | None = None,
        position_ms: int = 0,
    ) -> dict[str, Any]:
        ack = await run_client_operation(
            ctx,
            deps,
            log_message="Starting Spotify playback.",
            operation=lambda client: play(
                client,
                device_id=device_id,
                context_uri=context_uri,
                uris=uris,
                offset=offset,
                position_ms=position_ms,
            ),
        )
        return serialize_record(ack) or {}

    @app.tool(
        name="pause",
        description="Pause Spotify playback on the given or active device.",
        annotations={"title": "Pause playback"},
    )
    async def pause_tool(ctx: Context, device_id: str | None = None) -> dict[str, Any]:
        ack = await run_client_operation(
            ctx,
            deps,
            log_message="Pausing Spotify playback.",
            operation=lambda client: pause(client, device_id=device_id),
        )
        return serialize_record(ack) or {}

    @app.tool(
        name="skip_next",
        description="Skip to the next track in the Spotify queue.",
        annotations={"title": "Skip to next track"},
    )
    async def skip_next_tool(ctx: Context, device_id: str | None = None) -> dict[str, Any]:
        ack = await run_client_operation(
            ctx,
            deps,
            log_message="Skipping to the next Spotify track.",
            operation=lambda client: skip_next(client, device_id=device_id),
        )
        return serialize_record(ack) or {}

    @app.tool(
        name="skip_previous",
        description="Skip to the previous track in the Spotify queue.",
        annotations={"title": "Skip to previous track"},
    )
    async def skip_previous_tool(ctx: Context, device_id: str | None = None) -> dict[str, Any]:
        ack = await run_client_operation(
            ctx,
            deps,
            log_message="Skipping to the previous Spotify track.",
            operation=lambda client: skip_previous(client, device_id=device_id),
        )
        return serialize_record(ack) or {}


__all__ = ["register"]
