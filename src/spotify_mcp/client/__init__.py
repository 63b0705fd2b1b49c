"""Client package for the Spotify MCP server.

Provides HTTP client setup and credential management for the Spotify Web API:
- ``http_client``: Per-request HTTP client factory and error-body parsing
- ``token_manager``: Bearer token lifecycle management with single-flight refresh
- ``spotify_client``: Authenticated request dispatch and error classification
"""
