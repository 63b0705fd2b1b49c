"""Player operations against ``/me/player``.

Commands (play, pause, skip) are fire-and-forget: a 2xx answer is acknowledged
and the player state is not re-read. Call ``get_playback_state`` to observe the
effect. Concurrent commands are not ordered; Spotify serializes them.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import ValidationError

from ..client.spotify_client import SpotifyClient
from ..errors import InvalidArgumentError
from ..models.normalized import Acknowledgement, PlaybackOffset, PlaybackState
from .common import (
    GET_PLAYBACK_STATE_OPERATION,
    PAUSE_PLAYBACK_OPERATION,
    SKIP_NEXT_OPERATION,
    SKIP_PREVIOUS_OPERATION,
    START_PLAYBACK_OPERATION,
    device_params,
    resolve_market,
)
from .transforms import transform_playback_state

logger = logging.getLogger("spotify_mcp.operations.playback")

DEFAULT_MEDIA_TYPES: tuple[str, ...] = ("track", "episode")


async def get_playback_state(
    client: SpotifyClient,
    *,
    market: str | None = None,
    media_types: Iterable[str] | None = None,
) -> PlaybackState | None:
    """Return the current player snapshot, or ``None`` when nothing is active.

    Args:
        client: The Spotify client.
        market: ISO 3166-1 alpha-2 market code; defaults to the configured market.
        media_types: Item types the caller understands (track, episode).

    """
    types = [item.strip() for item in (media_types or DEFAULT_MEDIA_TYPES) if item.strip()]
    params = {
        "market": resolve_market(market, client.config.default_market),
        "additional_types": ",".join(types or DEFAULT_MEDIA_TYPES),
    }
    return await client.request(
        GET_PLAYBACK_STATE_OPERATION,
        "GET",
        "/me/player",
        params=params,
        transform=transform_playback_state,
    )


def build_play_payload(
    *,
    context_uri: str | None = None,
    uris: Sequence[str] | None = None,
    offset: PlaybackOffset | dict[str, Any] | None = None,
    position_ms: int = 0,
) -> dict[str, Any]:
    """Build the body for ``PUT /me/player/play``.

    A context URI and a URI list are both forwarded when both are given;
    Spotify decides how to treat the combination.
    """
    payload: dict[str, Any] = {}
    if context_uri:
        payload["context_uri"] = context_uri
    if uris is not None:
        payload["uris"] = list(uris)
    if offset is not None:
        try:
            offset_payload = PlaybackOffset.model_validate(offset).to_payload()
        except ValidationError as exc:
            msg = f"Invalid playback offset: {exc.errors()[0]['msg']}"
            raise InvalidArgumentError(msg, operation=START_PLAYBACK_OPERATION) from exc
        if offset_payload:
            payload["offset"] = offset_payload
    payload["position_ms"] = position_ms
    return payload


async def play(  # noqa: PLR0913 (mirrors the player endpoint's arguments)
    client: SpotifyClient,
    *,
    device_id: str | None = None,
    context_uri: str | None = None,
    uris: Sequence[str] | None = None,
    offset: PlaybackOffset | dict[str, Any] | None = None,
    position_ms: int = 0,
) -> Acknowledgement:
    """Start or resume playback.

    Args:
        client: The Spotify client.
        device_id: Target device; the active device is used when omitted.
        context_uri: Album, artist or playlist URI to play.
        uris: Explicit track URIs to play.
        offset: Where to start within the context, by position or item URI.
        position_ms: Position within the first item, in milliseconds.

    """
    payload = build_play_payload(context_uri=context_uri, uris=uris, offset=offset, position_ms=position_ms)
    logger.info("Starting playback (device=%s).", device_id or "active")
    return await client.send_command(
        START_PLAYBACK_OPERATION,
        "PUT",
        "/me/player/play",
        params=device_params(device_id),
        json_body=payload,
        message="Playback started",
    )


async def pause(client: SpotifyClient, *, device_id: str | None = None) -> Acknowledgement:
    """Pause playback on the target or active device."""
    return await client.send_command(
        PAUSE_PLAYBACK_OPERATION,
        "PUT",
        "/me/player/pause",
        params=device_params(device_id),
        json_body={},
        message="Playback paused",
    )


async def skip_next(client: SpotifyClient, *, device_id: str | None = None) -> Acknowledgement:
    """Skip to the next item in the queue."""
    return await client.send_command(
        SKIP_NEXT_OPERATION,
        "POST",
        "/me/player/next",
        params=device_params(device_id),
        json_body={},
        message="Skipped to next track",
    )


async def skip_previous(client: SpotifyClient, *, device_id: str | None = None) -> Acknowledgement:
    """Skip to the previous item in the queue."""
    return await client.send_command(
        SKIP_PREVIOUS_OPERATION,
        "POST",
        "/me/player/previous",
        params=device_params(device_id),
        json_body={},
        message="Skipped to previous track",
    )


__all__ = [
    "DEFAULT_MEDIA_TYPES",
    "build_play_payload",
    "get_playback_state",
    "pause",
    "play",
    "skip_next",
    "skip_previous",
]
