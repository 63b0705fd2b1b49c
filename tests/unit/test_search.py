"""Unit tests for catalog search."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import TypeAlias

import httpx
import pytest
from fakes import FakeSpotify

from spotify_mcp.client.spotify_client import SpotifyClient
from spotify_mcp.errors import InvalidArgumentError
from spotify_mcp.models.normalized import SearchResults
from spotify_mcp.operations.search import (
    build_search_params,
    clamp_limit,
    clamp_offset,
    filter_search_kinds,
    search,
)

ClientFactory: TypeAlias = Callable[..., AbstractAsyncContextManager[SpotifyClient]]

SEARCH_PAYLOAD = {
    "tracks": {
        "items": [
            {
                "id": "t1",
                "name": "Song",
                "artists": [{"name": "A"}, {"name": "B"}],
                "album": {"name": "Alb"},
                "duration_ms": 200000,
                "preview_url": None,
                "external_urls": {"spotify": "https://open.spotify.com/track/t1"},
            },
        ],
        "total": 1,
    },
    "albums": {
        "items": [
            {
                "id": "al1",
                "name": "Alb",
                "artists": [{"name": "A"}],
                "release_date": "2020-01-01",
                "total_tracks": 10,
                "images": [{"url": "https://i.scdn.co/image/big"}, {"url": "https://i.scdn.co/image/small"}],
            },
        ],
        "total": 7,
    },
}


class TestArgumentHelpers:
    """Tests for search argument validation and clamping."""

    @pytest.mark.parametrize(
        ("limit", "expected"),
        [(999, 50), (50, 50), (20, 20), (1, 1), (0, 1), (-3, 1)],
    )
    def test_clamp_limit(self, limit: int, expected: int) -> None:
        """Page size is clamped to the range the API accepts."""
        assert clamp_limit(limit) == expected

    @pytest.mark.parametrize(("offset", "expected"), [(-5, 0), (0, 0), (40, 40)])
    def test_clamp_offset(self, offset: int, expected: int) -> None:
        """Negative offsets are raised to zero."""
        assert clamp_offset(offset) == expected

    def test_filter_defaults(self) -> None:
        """No kinds means tracks, albums and artists."""
        assert filter_search_kinds(None) == ["track", "album", "artist"]

    def test_filter_drops_unknown_kinds(self) -> None:
        """Unsupported kinds are dropped, case and duplicates normalized."""
        assert filter_search_kinds(["Track", "bogus", "track", " album "]) == ["track", "album"]

    def test_filter_keeps_playlist(self) -> None:
        """Playlists are a supported request kind."""
        assert filter_search_kinds(["playlist"]) == ["playlist"]

    @pytest.mark.parametrize("kinds", [["bogus"], []])
    def test_filter_rejects_when_nothing_remains(self, kinds: list[str]) -> None:
        """An empty filtered list is an invalid argument."""
        with pytest.raises(InvalidArgumentError, match="Invalid search types"):
            filter_search_kinds(kinds)

    def test_build_params(self) -> None:
        """The query string carries every search parameter as text."""
        params = build_search_params(" lofi ", ["track"], limit=999, offset=-5, market="GB")
        assert params == {"q": "lofi", "type": "track", "limit": "50", "offset": "0", "market": "GB"}


class TestSearch:
    """Tests for the search operation."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   "])
    async def test_blank_query_rejected_without_network(
        self,
        query: str,
        make_client: ClientFactory,
        fake_spotify: FakeSpotify,
    ) -> None:
        """A blank query fails before any request, including the token exchange."""
        async with make_client() as client:
            with pytest.raises(InvalidArgumentError) as exc_info:
                await search(client, query)

        assert exc_info.value.message == "Search query is required and cannot be empty"
        assert exc_info.value.operation == "Search"
        assert fake_spotify.request_count == 0

    @pytest.mark.asyncio
    async def test_bogus_kinds_rejected_without_network(
        self,
        make_client: ClientFactory,
        fake_spotify: FakeSpotify,
    ) -> None:
        """Only unsupported kinds fails before any request."""
        async with make_client() as client:
            with pytest.raises(InvalidArgumentError):
                await search(client, "jazz", ["bogus"])

        assert fake_spotify.request_count == 0

    @pytest.mark.asyncio
    async def test_sends_defaults(self, make_client: ClientFactory, fake_spotify: FakeSpotify) -> None:
        """Defaults are filled in from the operation and the configured market."""
        fake_spotify.api_handler = lambda _request: httpx.Response(200, json={})
        async with make_client() as client:
            await search(client, "jazz")

        request = fake_spotify.api_requests[0]
        assert request.method == "GET"
        assert request.url.path == "/v1/search"
        assert dict(request.url.params) == {
            "q": "jazz",
            "type": "track,album,artist",
            "limit": "20",
            "offset": "0",
            "market": "US",
        }

    @pytest.mark.asyncio
    async def test_clamps_out_of_range_arguments(self, make_client: ClientFactory, fake_spotify: FakeSpotify) -> None:
        """Out-of-range limit and offset are clamped, not rejected."""
        fake_spotify.api_handler = lambda _request: httpx.Response(200, json={})
        async with make_client() as client:
            await search(client, "jazz", ["track", "bogus"], limit=999, offset=-5, market="SE")

        params = fake_spotify.api_requests[0].url.params
        assert params["type"] == "track"
        assert params["limit"] == "50"
        assert params["offset"] == "0"
        assert params["market"] == "SE"

    @pytest.mark.asyncio
    async def test_normalizes_results(self, make_client: ClientFactory, fake_spotify: FakeSpotify) -> None:
        """Matches are normalized per kind with totals; missing kinds are empty."""
        fake_spotify.api_handler = lambda _request: httpx.Response(200, json=SEARCH_PAYLOAD)
        async with make_client() as client:
            results = await search(client, "song")

        assert len(results.tracks) == 1
        track = results.tracks[0]
        assert track.artist == "A"
        assert track.album == "Alb"
        assert track.duration == 200000
        assert track.preview_url is None
        assert track.spotify_url == "https://open.spotify.com/track/t1"
        assert results.albums[0].cover_image == "https://i.scdn.co/image/big"
        assert results.artists == []
        assert results.totals.tracks == 1
        assert results.totals.albums == 7
        assert results.totals.artists == 0

    @pytest.mark.asyncio
    async def test_empty_body_yields_empty_results(self, make_client: ClientFactory, fake_spotify: FakeSpotify) -> None:
        """A bodiless answer is treated as no matches."""
        fake_spotify.api_handler = lambda _request: httpx.Response(204)
        async with make_client() as client:
            results = await search(client, "nothing")

        assert results == SearchResults()
