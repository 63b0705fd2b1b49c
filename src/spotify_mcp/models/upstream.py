"""Pydantic models for Spotify Web API response payloads.

These models describe only the fields the normalizers read. Every model accepts
extra fields, and every field the API may omit is optional, so a well-formed
payload always validates.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

# =============================================================================
# Shared Objects
# =============================================================================


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ExternalUrls(_UpstreamModel):
    """Known external URLs for an object."""

    spotify: str | None = None


class ExternalIds(_UpstreamModel):
    """Industry identifiers for a track or album."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None


class Image(_UpstreamModel):
    """Cover art or profile image. Spotify lists the widest image first."""

    url: str
    height: int | None = None
    width: int | None = None


class Followers(_UpstreamModel):
    """Follower information for an artist."""

    total: int | None = None


class Restrictions(_UpstreamModel):
    """Reason content is restricted in the requested market."""

    reason: str | None = None


class Paging(_UpstreamModel, Generic[T]):
    """Paging object wrapping a page of search results."""

    items: list[T | None] | None = None
    total: int | None = None
    limit: int | None = None
    offset: int | None = None
    next: str | None = None


# =============================================================================
# Catalog Objects
# =============================================================================


class UpstreamArtist(_UpstreamModel):
    """Artist object (simplified or full)."""

    id: str | None = None
    name: str | None = None
    genres: list[str] | None = None
    followers: Followers | None = None
    external_urls: ExternalUrls | None = None


class UpstreamAlbum(_UpstreamModel):
    """Album object (simplified or full)."""

    id: str | None = None
    name: str | None = None
    album_type: str | None = None
    artists: list[UpstreamArtist] | None = None
    images: list[Image] | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int | None = None
    external_urls: ExternalUrls | None = None


class UpstreamTrack(_UpstreamModel):
    """Track object. Also validates episodes, which omit artists and album."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    artists: list[UpstreamArtist] | None = None
    album: UpstreamAlbum | None = None
    duration_ms: int | None = None
    track_number: int | None = None
    disc_number: int | None = None
    explicit: bool | None = None
    popularity: int | None = None
    preview_url: str | None = None
    available_markets: list[str] | None = None
    external_ids: ExternalIds | None = None
    external_urls: ExternalUrls | None = None
    is_playable: bool | None = None
    restrictions: Restrictions | None = None


class UpstreamSearchResponse(_UpstreamModel):
    """Response of ``GET /search``. Kinds that were not requested are absent."""

    tracks: Paging[UpstreamTrack] | None = None
    albums: Paging[UpstreamAlbum] | None = None
    artists: Paging[UpstreamArtist] | None = None


# =============================================================================
# Player Objects
# =============================================================================


class UpstreamDevice(_UpstreamModel):
    """Device currently attached to the player."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    is_active: bool | None = None
    volume_percent: int | None = None


class UpstreamContext(_UpstreamModel):
    """Playback context (album, playlist, artist, show)."""

    type: str | None = None
    uri: str | None = None


class UpstreamPlaybackState(_UpstreamModel):
    """Response of ``GET /me/player``."""

    device: UpstreamDevice | None = None
    repeat_state: str | None = None
    shuffle_state: bool | None = None
    context: UpstreamContext | None = None
    progress_ms: int | None = None
    is_playing: bool | None = None
    item: UpstreamTrack | None = None
    currently_playing_type: str | None = None


__all__ = [
    "ExternalIds",
    "ExternalUrls",
    "Followers",
    "Image",
    "Paging",
    "Restrictions",
    "UpstreamAlbum",
    "UpstreamArtist",
    "UpstreamContext",
    "UpstreamDevice",
    "UpstreamPlaybackState",
    "UpstreamSearchResponse",
    "UpstreamTrack",
]
