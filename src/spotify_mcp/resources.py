"""MCP resources for Spotify state.

Exposes the current player snapshot as a read-only resource.
"""

# pyright: reportUnusedFunction=false

from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .operations.playback import get_playback_state


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register resources on the provided app instance.

    Args:
        app: The FastMCP application instance to add resources to.
        deps: Dependencies namespace with ``get_client``.

    """

    async def _collect_player_payload(ctx: Context) -> dict[str, Any]:
        """Read the playback snapshot, downgrading failures to a structured error."""
        try:
            state = await get_playback_state(deps.get_client())
        except Exception as exc:  # noqa: BLE001 - propagated as JSON error payload
            await ctx.warning(f"Could not read Spotify playback state: {exc}")
            return {
                "status": "error",
                "error": str(exc),
                "error_type": exc.__class__.__name__,
            }
        return {
            "status": "ok" if state is not None else "inactive",
            "state": state.model_dump(mode="json", by_alias=True) if state is not None else None,
        }

    @app.resource(
        uri="spotify://player",
        name="Spotify Player",
        description="Return the current Spotify playback snapshot as JSON.",
        mime_type="application/json",
        tags={"player", "playback"},
    )
    async def get_player(ctx: Context) -> dict[str, Any]:
        return {
            "retrieved_at": datetime.now(UTC).isoformat(),
            "player": await _collect_player_payload(ctx),
        }


__all__ = ["register"]
