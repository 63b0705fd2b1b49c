"""MCP tool: exchange_authorization_code.

Completes the user-delegated OAuth flow by trading an authorization code for a
token payload. The server's own client-credentials token is left untouched.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .common import run_client_operation


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the exchange_authorization_code tool on the provided app instance."""

    @app.tool(
        name="exchange_authorization_code",
        description=(
            "Exchange a Spotify authorization code (returned to the configured redirect URI) "
            "for an access token payload."
        ),
        annotations={"title": "Exchange authorization code"},
    )
    async def exchange_authorization_code(ctx: Context, code: str) -> dict[str, Any]:
        return await run_client_operation(
            ctx,
            deps,
            log_message="Exchanging Spotify authorization code.",
            operation=lambda client: client.token_manager.exchange_authorization_code(code),
        )


__all__ = ["register"]
