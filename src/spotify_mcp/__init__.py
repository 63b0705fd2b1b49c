"""Spotify MCP server package.

This package contains the Spotify Web API client, its credential manager, and
the FastMCP tools that expose search, playback control, and track lookup.
"""

# Intentionally do not re-export symbols from submodules to avoid importing
# heavy dependencies and triggering environment validation at package import
# time. Individual modules (e.g., ``server``) should be imported directly by
# consumers as needed.

__all__: list[str] = []
