"""Pydantic models for Spotify data structures.

This module provides type-safe models for upstream Web API payloads and the
normalized records returned to callers.
"""

from .normalized import (
    Acknowledgement,
    AlbumDetail,
    ArtistRef,
    NormalizedAlbum,
    NormalizedArtist,
    NormalizedTrack,
    NormalizedTrackDetail,
    PlaybackContext,
    PlaybackDevice,
    PlaybackOffset,
    PlaybackState,
    SearchResults,
    SearchTotals,
    TrackExternalIds,
    TrackRestrictions,
)
from .upstream import (
    Paging,
    UpstreamAlbum,
    UpstreamArtist,
    UpstreamPlaybackState,
    UpstreamSearchResponse,
    UpstreamTrack,
)

__all__ = [
    "Acknowledgement",
    "AlbumDetail",
    "ArtistRef",
    "NormalizedAlbum",
    "NormalizedArtist",
    "NormalizedTrack",
    "NormalizedTrackDetail",
    "Paging",
    "PlaybackContext",
    "PlaybackDevice",
    "PlaybackOffset",
    "PlaybackState",
    "SearchResults",
    "SearchTotals",
    "TrackExternalIds",
    "TrackRestrictions",
    "UpstreamAlbum",
    "UpstreamArtist",
    "UpstreamPlaybackState",
    "UpstreamSearchResponse",
    "UpstreamTrack",
]
