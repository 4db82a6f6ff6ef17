"""Spotify link expansion on top of Lavalink search.

Spotify does not serve audio, so each Spotify track is turned into an
``"<artists> - <title>"`` query and resolved on the node instead.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Any

import spotipy
from spotipy.oauth2 import SpotifyClientCredentials, SpotifyOauthError

from ...application.interfaces.audio_client import SearchBackend
from ...domain.music.entities import ResolveResult, Track
from ...domain.music.value_objects import LoadType
from ...domain.shared.exceptions import ExternalServiceError
from ...domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)

SERVICE_NAME = "spotify"

SPOTIFY_URL_RE = re.compile(
    r"open\.spotify\.com/(?:intl-[a-z]{2}/)?(track|album|playlist)/([A-Za-z0-9]+)"
)

_PAGE_SIZE = 50
_MAX_CONCURRENT_LOOKUPS = 5


def _search_query(item: dict[str, Any]) -> str | None:
    name = item.get("name")
    if not name:
        return None
    artists = ", ".join(a["name"] for a in item.get("artists", []) if a.get("name"))
    return f"{artists} - {name}" if artists else name


class SpotifySearchBackend(SearchBackend):
    """Expands open.spotify.com links, delegating everything else unchanged."""

    def __init__(
        self,
        *,
        inner: SearchBackend,
        client: spotipy.Spotify,
        playlist_limit: int = 100,
    ) -> None:
        self._inner = inner
        self._client = client
        self._playlist_limit = playlist_limit

    @classmethod
    def from_credentials(
        cls,
        *,
        inner: SearchBackend,
        client_id: str,
        client_secret: str,
        playlist_limit: int = 100,
    ) -> SpotifySearchBackend:
        client = spotipy.Spotify(
            auth_manager=SpotifyClientCredentials(client_id=client_id, client_secret=client_secret)
        )
        logger.info(LogTemplates.SPOTIFY_ENABLED, playlist_limit)
        return cls(inner=inner, client=client, playlist_limit=playlist_limit)

    async def resolve(self, query: str) -> ResolveResult:
        match = SPOTIFY_URL_RE.search(query)
        if match is None:
            return await self._inner.resolve(query)

        kind, spotify_id = match.groups()
        try:
            if kind == "track":
                name = None
                queries = [await asyncio.to_thread(self._track_query, spotify_id)]
            else:
                name, queries = await asyncio.to_thread(self._collection_queries, kind, spotify_id)
        except (spotipy.SpotifyException, SpotifyOauthError, OSError) as exc:
            raise ExternalServiceError(
                SERVICE_NAME, ErrorMessages.SPOTIFY_LOOKUP_FAILED.format(url=query, error=exc)
            ) from exc

        queries = [q for q in queries if q]
        if kind == "track":
            if not queries:
                return ResolveResult.empty()
            result = await self._inner.resolve(queries[0])
            if result.is_empty:
                return ResolveResult.empty()
            return ResolveResult(load_type=LoadType.TRACK, tracks=result.tracks[:1])

        tracks = await self._first_matches(queries)
        if not tracks:
            return ResolveResult.empty()
        return ResolveResult(load_type=LoadType.PLAYLIST, tracks=tuple(tracks), playlist_name=name)

    async def _first_matches(self, queries: list[str]) -> list[Track]:
        """Resolve each query on the node, keeping order and skipping misses."""
        semaphore = asyncio.Semaphore(_MAX_CONCURRENT_LOOKUPS)

        async def lookup(q: str) -> ResolveResult:
            async with semaphore:
                return await self._inner.resolve(q)

        results = await asyncio.gather(*(lookup(q) for q in queries), return_exceptions=True)

        tracks: list[Track] = []
        for q, result in zip(queries, results, strict=True):
            if isinstance(result, ExternalServiceError) or (
                isinstance(result, ResolveResult) and result.is_empty
            ):
                logger.debug(LogTemplates.SPOTIFY_ENTRY_SKIPPED, q)
                continue
            if isinstance(result, BaseException):
                raise result
            tracks.append(result.tracks[0])
        return tracks

    # ── Blocking spotipy calls (run in a worker thread) ─────────────

    def _track_query(self, track_id: str) -> str | None:
        return _search_query(self._client.track(track_id))

    def _collection_queries(self, kind: str, collection_id: str) -> tuple[str | None, list[str]]:
        if kind == "album":
            name = self._client.album(collection_id).get("name")
            items = self._paged(self._client.album_tracks, collection_id)
        else:
            name = self._client.playlist(collection_id, fields="name").get("name")
            items = (
                entry.get("track")
                for entry in self._paged(
                    self._client.playlist_items, collection_id, additional_types=("track",)
                )
            )

        queries: list[str] = []
        for item in items:
            if len(queries) >= self._playlist_limit:
                break
            q = _search_query(item) if item else None
            if q:
                queries.append(q)
        return name, queries

    def _paged(self, fetch, collection_id: str, **kwargs):
        offset = 0
        while offset < self._playlist_limit:
            page = fetch(collection_id, limit=_PAGE_SIZE, offset=offset, **kwargs)
            items = page.get("items", [])
            if not items:
                return
            yield from items
            if page.get("next") is None:
                return
            offset += _PAGE_SIZE
