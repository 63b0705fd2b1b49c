"""MCP tool: search.

Searches the Spotify catalog for tracks, albums and artists.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from ..operations.search import DEFAULT_LIMIT, search
from .common import build_tool_response, run_client_operation, serialize_record


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the search tool on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tool to.
        deps: Dependencies namespace with ``get_client``.

    """

    @app.tool(
        name="search",
        description=(
            "Search the Spotify catalog. Returns normalized tracks, albums and artists "
            "plus the total number of upstream matches per kind."
        ),
        annotations={
            "title": "Search Spotify",
            "readOnlyHint": True,
        },
    )
    async def search_tool(  # noqa: PLR0913 (tool arguments)
        ctx: Context,
        query: str,
        types: list[str] | None = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        market: str | None = None,
    ) -> dict[str, Any]:
        results = await run_client_operation(
            ctx,
            deps,
            log_message=f"Searching Spotify for '{query}'.",
            operation=lambda client: search(client, query, types, limit=limit, offset=offset, market=market),
        )
        payload = serialize_record(results) or {}
        totals = payload.pop("totals", {})
        response = build_tool_response("results", payload)
        response["total"] = totals
        return response


__all__ = ["register"]
