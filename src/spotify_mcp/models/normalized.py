"""Normalized records returned to callers.

Field names are snake_case in Python and serialize with camelCase aliases
(``model_dump(by_alias=True)``). Optional substructures are always present in
the output and set to ``None`` when upstream omitted them.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _NormalizedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class NormalizedTrack(_NormalizedModel):
    """Summary view of a track."""

    id: str | None = None
    name: str | None = None
    artist: str | None = None
    """Name of the first listed artist."""
    album: str | None = None
    duration: int | None = None
    """Track length in milliseconds."""
    preview_url: str | None = None
    spotify_url: str | None = None


class NormalizedAlbum(_NormalizedModel):
    """Summary view of an album."""

    id: str | None = None
    name: str | None = None
    artist: str | None = None
    release_date: str | None = None
    total_tracks: int | None = None
    cover_image: str | None = None
    """URL of the first listed image."""
    spotify_url: str | None = None


class NormalizedArtist(_NormalizedModel):
    """Summary view of an artist."""

    id: str | None = None
    name: str | None = None
    genres: list[str] = Field(default_factory=list)
    followers: int | None = None
    spotify_url: str | None = None


class SearchTotals(_NormalizedModel):
    """Upstream match counts per result kind."""

    tracks: int = 0
    albums: int = 0
    artists: int = 0


class SearchResults(_NormalizedModel):
    """Normalized search results. Kinds with no results are empty lists."""

    tracks: list[NormalizedTrack] = Field(default_factory=list)
    albums: list[NormalizedAlbum] = Field(default_factory=list)
    artists: list[NormalizedArtist] = Field(default_factory=list)
    totals: SearchTotals = Field(default_factory=SearchTotals)


class PlaybackDevice(_NormalizedModel):
    """Device the player is attached to."""

    id: str | None = None
    name: str | None = None
    type: str | None = None
    is_active: bool | None = None
    volume_percent: int | None = None


class PlaybackContext(_NormalizedModel):
    """What the player is playing from."""

    type: str | None = None
    uri: str | None = None


class PlaybackState(_NormalizedModel):
    """Point-in-time snapshot of the player.

    Playback commands do not update a snapshot; query again to observe them.
    """

    device: PlaybackDevice | None
    repeat_mode: str | None = None
    shuffle_on: bool | None = None
    context: PlaybackContext | None
    progress_ms: int | None = None
    is_playing: bool = False
    current_track: NormalizedTrack | None
    media_type: str | None = None


class ArtistRef(_NormalizedModel):
    """Artist credited on a detailed track."""

    id: str | None = None
    name: str | None = None
    spotify_url: str | None = None


class AlbumDetail(_NormalizedModel):
    """Album information embedded in a detailed track."""

    id: str | None = None
    name: str | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    total_tracks: int | None = None
    cover_image: str | None = None
    album_type: str | None = None
    spotify_url: str | None = None


class TrackExternalIds(_NormalizedModel):
    """Industry identifiers for a track."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None


class TrackRestrictions(_NormalizedModel):
    """Why a track cannot be played in the requested market."""

    reason: str | None = None


class NormalizedTrackDetail(_NormalizedModel):
    """Full view of a single track."""

    id: str | None = None
    name: str | None = None
    artists: list[ArtistRef] = Field(default_factory=list)
    album: AlbumDetail | None
    duration: int | None = None
    track_number: int | None = None
    disc_number: int | None = None
    is_explicit: bool | None = None
    popularity: int | None = None
    preview_url: str | None = None
    available_markets: list[str] = Field(default_factory=list)
    external_ids: TrackExternalIds = Field(default_factory=TrackExternalIds)
    spotify_url: str | None = None
    is_playable: bool | None = None
    restrictions: TrackRestrictions | None


class Acknowledgement(_NormalizedModel):
    """Result of a fire-and-forget playback command."""

    success: bool = True
    message: str | None = None


class PlaybackOffset(_NormalizedModel):
    """Where to start within a context: by zero-based position or by item URI."""

    position: int | None = Field(default=None, ge=0)
    uri: str | None = None

    def to_payload(self) -> dict[str, int | str]:
        """Return the offset in the shape the player endpoint expects."""
        payload: dict[str, int | str] = {}
        if self.position is not None:
            payload["position"] = self.position
        if self.uri is not None:
            payload["uri"] = self.uri
        return payload


__all__ = [
    "Acknowledgement",
    "AlbumDetail",
    "ArtistRef",
    "NormalizedAlbum",
    "NormalizedArtist",
    "NormalizedTrack",
    "NormalizedTrackDetail",
    "PlaybackContext",
    "PlaybackDevice",
    "PlaybackOffset",
    "PlaybackState",
    "SearchResults",
    "SearchTotals",
    "TrackExternalIds",
    "TrackRestrictions",
]
