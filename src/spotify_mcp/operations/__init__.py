"""Operational helpers for MCP tools.

Contains business logic for talking to the Spotify Web API:
- ``common``: Operation names and shared argument validation
- ``search``: Catalog search with argument filtering and clamping
- ``playback``: Player snapshot and playback commands
- ``tracks``: Single-track lookup
- ``transforms``: Pure normalizers from upstream payloads to internal records
"""
