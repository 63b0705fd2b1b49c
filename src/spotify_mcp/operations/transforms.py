"""Pure mappings from Spotify Web API payloads to normalized records.

Each ``transform_*`` function accepts either a raw JSON object or the matching
upstream model and never performs I/O. The first listed artist is the primary
artist and the first listed image is the artwork; upstream order is kept as-is.
"""

from typing import Any, TypeVar

from ..models.normalized import (
    AlbumDetail,
    ArtistRef,
    NormalizedAlbum,
    NormalizedArtist,
    NormalizedTrack,
    NormalizedTrackDetail,
    PlaybackContext,
    PlaybackDevice,
    PlaybackState,
    SearchResults,
    SearchTotals,
    TrackExternalIds,
    TrackRestrictions,
)
from ..models.upstream import (
    ExternalUrls,
    Image,
    Paging,
    UpstreamAlbum,
    UpstreamArtist,
    UpstreamPlaybackState,
    UpstreamSearchResponse,
    UpstreamTrack,
)


def _spotify_url(external_urls: ExternalUrls | None) -> str | None:
    return external_urls.spotify if external_urls is not None else None


def _primary_artist_name(artists: list[UpstreamArtist] | None) -> str | None:
    return artists[0].name if artists else None


def _first_image_url(images: list[Image] | None) -> str | None:
    return images[0].url if images else None


_T = TypeVar("_T")


def _page_items(page: Paging[_T] | None) -> list[_T]:
    if page is None:
        return []
    return [item for item in page.items or [] if item is not None]


def _page_total(page: Paging[Any] | None) -> int:
    if page is None:
        return 0
    return page.total or 0


def transform_track(track: UpstreamTrack | dict[str, Any]) -> NormalizedTrack:
    """Project a track (or episode) onto the summary track record."""
    track = UpstreamTrack.model_validate(track)
    return NormalizedTrack(
        id=track.id,
        name=track.name,
        artist=_primary_artist_name(track.artists),
        album=track.album.name if track.album is not None else None,
        duration=track.duration_ms,
        preview_url=track.preview_url,
        spotify_url=_spotify_url(track.external_urls),
    )


def transform_album(album: UpstreamAlbum | dict[str, Any]) -> NormalizedAlbum:
    """Project an album onto the summary album record."""
    album = UpstreamAlbum.model_validate(album)
    return NormalizedAlbum(
        id=album.id,
        name=album.name,
        artist=_primary_artist_name(album.artists),
        release_date=album.release_date,
        total_tracks=album.total_tracks,
        cover_image=_first_image_url(album.images),
        spotify_url=_spotify_url(album.external_urls),
    )


def transform_artist(artist: UpstreamArtist | dict[str, Any]) -> NormalizedArtist:
    """Project an artist onto the summary artist record."""
    artist = UpstreamArtist.model_validate(artist)
    return NormalizedArtist(
        id=artist.id,
        name=artist.name,
        genres=list(artist.genres or []),
        followers=artist.followers.total if artist.followers is not None else None,
        spotify_url=_spotify_url(artist.external_urls),
    )


def transform_search_results(payload: UpstreamSearchResponse | dict[str, Any]) -> SearchResults:
    """Normalize a search response.

    Each kind is transformed independently. A kind that was not requested, or
    that came back without items, yields an empty list; totals default to 0.
    """
    response = UpstreamSearchResponse.model_validate(payload)
    return SearchResults(
        tracks=[transform_track(item) for item in _page_items(response.tracks)],
        albums=[transform_album(item) for item in _page_items(response.albums)],
        artists=[transform_artist(item) for item in _page_items(response.artists)],
        totals=SearchTotals(
            tracks=_page_total(response.tracks),
            albums=_page_total(response.albums),
            artists=_page_total(response.artists),
        ),
    )


def transform_playback_state(payload: UpstreamPlaybackState | dict[str, Any] | None) -> PlaybackState | None:
    """Normalize a player snapshot. An empty payload means nothing is active."""
    if not payload:
        return None
    state = UpstreamPlaybackState.model_validate(payload)

    device = None
    if state.device is not None:
        device = PlaybackDevice(
            id=state.device.id,
            name=state.device.name,
            type=state.device.type,
            is_active=state.device.is_active,
            volume_percent=state.device.volume_percent,
        )

    context = None
    if state.context is not None:
        context = PlaybackContext(type=state.context.type, uri=state.context.uri)

    return PlaybackState(
        device=device,
        repeat_mode=state.repeat_state,
        shuffle_on=state.shuffle_state,
        context=context,
        progress_ms=state.progress_ms,
        is_playing=bool(state.is_playing),
        current_track=transform_track(state.item) if state.item is not None else None,
        media_type=state.currently_playing_type,
    )


def _transform_album_detail(album: UpstreamAlbum | None) -> AlbumDetail | None:
    if album is None:
        return None
    return AlbumDetail(
        id=album.id,
        name=album.name,
        release_date=album.release_date,
        release_date_precision=album.release_date_precision,
        total_tracks=album.total_tracks,
        cover_image=_first_image_url(album.images),
        album_type=album.album_type,
        spotify_url=_spotify_url(album.external_urls),
    )


def transform_track_details(track: UpstreamTrack | dict[str, Any]) -> NormalizedTrackDetail:
    """Project a full track object onto the detailed track record."""
    track = UpstreamTrack.model_validate(track)
    external_ids = track.external_ids
    return NormalizedTrackDetail(
        id=track.id,
        name=track.name,
        artists=[
            ArtistRef(id=artist.id, name=artist.name, spotify_url=_spotify_url(artist.external_urls))
            for artist in track.artists or []
        ],
        album=_transform_album_detail(track.album),
        duration=track.duration_ms,
        track_number=track.track_number,
        disc_number=track.disc_number,
        is_explicit=track.explicit,
        popularity=track.popularity,
        preview_url=track.preview_url,
        available_markets=list(track.available_markets or []),
        external_ids=TrackExternalIds(
            isrc=external_ids.isrc if external_ids is not None else None,
            ean=external_ids.ean if external_ids is not None else None,
            upc=external_ids.upc if external_ids is not None else None,
        ),
        spotify_url=_spotify_url(track.external_urls),
        is_playable=track.is_playable,
        restrictions=(
            TrackRestrictions(reason=track.restrictions.reason) if track.restrictions is not None else None
        ),
    )


__all__ = [
    "transform_album",
    "transform_artist",
    "transform_playback_state",
    "transform_search_results",
    "transform_track",
    "transform_track_details",
]
