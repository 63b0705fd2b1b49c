"""Common utilities for MCP tool registration.

Provides helpers that give every tool the same logging, error mapping and
response envelope.
"""

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any, TypeAlias

from fastmcp import Context
from fastmcp.exceptions import ToolError
from pydantic import BaseModel

from ..client.spotify_client import SpotifyClient
from ..errors import SpotifyError

ClientOperation: TypeAlias = Callable[[SpotifyClient], Awaitable[Any]]


def serialize_record(record: BaseModel | None) -> dict[str, Any] | None:
    """Serialize a normalized record to camelCase JSON-compatible data."""
    if record is None:
        return None
    return record.model_dump(mode="json", by_alias=True)


def build_tool_response(section_name: str, data: Any) -> dict[str, Any]:
    """Build a standard tool response with metadata.

    Args:
        section_name: Name of the data section (e.g., "results", "track").
        data: Serialized data to include in the response.

    Returns:
        Standard response dictionary with a retrieval timestamp.

    """
    return {
        "retrieved_at": datetime.now(UTC).isoformat(),
        section_name: data,
    }


async def run_client_operation(
    ctx: Context,
    deps: SimpleNamespace,
    *,
    log_message: str,
    operation: ClientOperation,
) -> Any:
    """Run an operation against the shared client and map failures for MCP.

    Args:
        ctx: FastMCP context.
        deps: Dependencies namespace exposing ``get_client``.
        log_message: Progress message reported to the caller.
        operation: Coroutine function receiving the ``SpotifyClient``.

    Returns:
        Whatever the operation returns.

    Raises:
        ToolError: Wrapping any ``SpotifyError`` as ``"<kind>: <message>"``, or
            a configuration failure as ``"configuration: <message>"``.

    """
    await ctx.info(log_message)
    try:
        client: SpotifyClient = deps.get_client()
        return await operation(client)
    except SpotifyError as exc:
        await ctx.error(f"{exc.kind}: {exc.message}")
        msg = f"{exc.kind}: {exc.message}"
        raise ToolError(msg) from exc
    except RuntimeError as exc:
        await ctx.error(f"Spotify client is not configured: {exc}")
        msg = f"configuration: {exc}"
        raise ToolError(msg) from exc


__all__ = [
    "ClientOperation",
    "build_tool_response",
    "run_client_operation",
    "serialize_record",
]
