"""Helpers for looking up a single track via ``GET /tracks/{id}``."""

from urllib.parse import quote

from ..client.spotify_client import SpotifyClient
from ..models.normalized import NormalizedTrackDetail
from .common import GET_TRACK_OPERATION, require_text, resolve_market
from .transforms import transform_track_details


async def get_track(client: SpotifyClient, track_id: str, *, market: str | None = None) -> NormalizedTrackDetail:
    """Fetch a track and return its detailed normalized record.

    Args:
        client: The Spotify client.
        track_id: Spotify ID of the track.
        market: ISO 3166-1 alpha-2 market code; defaults to the configured market.

    Raises:
        InvalidArgumentError: If ``track_id`` is blank.

    """
    track_id = require_text(track_id, message="Track ID is required", operation=GET_TRACK_OPERATION)
    return await client.request(
        GET_TRACK_OPERATION,
        "GET",
        f"/tracks/{quote(track_id, safe='')}",
        params={"market": resolve_market(market, client.config.default_market)},
        transform=transform_track_details,
    )


__all__ = ["get_track"]
