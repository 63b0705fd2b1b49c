"""Catalog search against ``GET /search``.

Arguments are validated and clamped before any network call: the query must
not be blank, result kinds are filtered to the supported set, the page size is
clamped to [1, 50] and the offset to >= 0.
"""

import logging
from collections.abc import Iterable

from ..client.spotify_client import SpotifyClient
from ..errors import InvalidArgumentError
from ..models.normalized import SearchResults
from .common import SEARCH_OPERATION, require_text, resolve_market
from .transforms import transform_search_results

logger = logging.getLogger("spotify_mcp.operations.search")

SEARCH_KINDS: tuple[str, ...] = ("track", "album", "artist", "playlist")
DEFAULT_SEARCH_KINDS: tuple[str, ...] = ("track", "album", "artist")
MIN_LIMIT = 1
MAX_LIMIT = 50
DEFAULT_LIMIT = 20


def filter_search_kinds(kinds: Iterable[str] | None) -> list[str]:
    """Keep only supported result kinds, lower-cased and de-duplicated in order.

    Args:
        kinds: Requested result kinds; ``None`` selects the default kinds.

    Returns:
        The supported kinds to request.

    Raises:
        InvalidArgumentError: If no supported kind remains.

    """
    if kinds is None:
        return list(DEFAULT_SEARCH_KINDS)
    filtered: list[str] = []
    for kind in kinds:
        normalized = kind.strip().lower()
        if normalized in SEARCH_KINDS and normalized not in filtered:
            filtered.append(normalized)
    if not filtered:
        msg = f"Invalid search types; expected any of: {', '.join(SEARCH_KINDS)}"
        raise InvalidArgumentError(msg, operation=SEARCH_OPERATION)
    return filtered


def clamp_limit(limit: int) -> int:
    """Clamp the page size to the range the API accepts."""
    return max(MIN_LIMIT, min(MAX_LIMIT, limit))


def clamp_offset(offset: int) -> int:
    """Clamp the page offset to a non-negative value."""
    return max(0, offset)


def build_search_params(
    query: str,
    kinds: Iterable[str] | None,
    *,
    limit: int,
    offset: int,
    market: str,
) -> dict[str, str]:
    """Validate search arguments and build the query string for ``GET /search``."""
    text = require_text(query, message="Search query is required and cannot be empty", operation=SEARCH_OPERATION)
    return {
        "q": text,
        "type": ",".join(filter_search_kinds(kinds)),
        "limit": str(clamp_limit(limit)),
        "offset": str(clamp_offset(offset)),
        "market": market,
    }


async def search(
    client: SpotifyClient,
    query: str,
    kinds: Iterable[str] | None = None,
    *,
    limit: int = DEFAULT_LIMIT,
    offset: int = 0,
    market: str | None = None,
) -> SearchResults:
    """Search the catalog and normalize the matches.

    Args:
        client: The Spotify client.
        query: Free-text search query.
        kinds: Result kinds to request (track, album, artist, playlist).
        limit: Page size, clamped to [1, 50].
        offset: Page offset, clamped to >= 0.
        market: ISO 3166-1 alpha-2 market code; defaults to the configured market.

    Returns:
        Normalized tracks, albums and artists with per-kind totals.

    """
    params = build_search_params(
        query,
        kinds,
        limit=limit,
        offset=offset,
        market=resolve_market(market, client.config.default_market),
    )
    logger.info("Searching Spotify for %r (types=%s).", params["q"], params["type"])
    results: SearchResults | None = await client.request(
        SEARCH_OPERATION,
        "GET",
        "/search",
        params=params,
        transform=transform_search_results,
    )
    return results if results is not None else SearchResults()


__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_SEARCH_KINDS",
    "MAX_LIMIT",
    "MIN_LIMIT",
    "SEARCH_KINDS",
    "build_search_params",
    "clamp_limit",
    "clamp_offset",
    "filter_search_kinds",
    "search",
]
