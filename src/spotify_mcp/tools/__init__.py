"""MCP tool registrations.

Each module exposes a ``register(app, *, deps)`` function:
- ``search``: catalog search
- ``player``: playback snapshot and playback commands
- ``tracks``: single-track details
- ``auth``: authorization-code exchange
"""
