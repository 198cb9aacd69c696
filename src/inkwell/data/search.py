"""FTS5 search across posts and pages."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from inkwell.data.collections import PageCollection, PostCollection, SearchableCollection
from inkwell.data.query import prepare_fts_query
from inkwell.models.search import SearchResult, SearchResults

if TYPE_CHECKING:
    from inkwell.data.db import Database

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
DEFAULT_SNIPPET_TOKENS = 64
# FTS5 rejects snippet windows outside 1..64 tokens.
_MAX_SNIPPET_TOKENS = 64


class SearchEngine:
    """FTS5-based search over every published collection."""

    def __init__(
        self,
        db: Database,
        collections: Sequence[SearchableCollection] | None = None,
        *,
        limit: int = DEFAULT_LIMIT,
        snippet_tokens: int = DEFAULT_SNIPPET_TOKENS,
    ) -> None:
        self._db = db
        self._collections: tuple[SearchableCollection, ...] = tuple(
            collections if collections is not None else (PostCollection(db), PageCollection(db))
        )
        self._limit = limit
        self._snippet_tokens = max(1, min(snippet_tokens, _MAX_SNIPPET_TOKENS))

    @property
    def collections(self) -> tuple[SearchableCollection, ...]:
        return self._collections

    async def search(self, query: str) -> SearchResults:
        """Search all collections with a raw user query.

        Args:
            query: Text typed by the user. ``*`` characters are stripped and
                every plain term becomes a prefix match.

        Returns:
            SearchResults ordered by FTS5 rank, at most ``limit`` hits per
            collection. An empty or blank query returns no results without
            touching the index.
        """
        fts_query = prepare_fts_query(query)
        results = await self.search_prepared(fts_query)
        return SearchResults(results=results, total_count=len(results), query=query)

    async def search_prepared(self, fts_query: str) -> list[SearchResult]:
        """Run an already prepared match expression against each collection."""
        if not fts_query:
            return []

        logger.debug("Searching %d collections for %r", len(self._collections), fts_query)
        per_collection: list[list[SearchResult]] = []
        for collection in self._collections:
            per_collection.append(await self._query_collection(collection, fts_query))
        return merge_results(*per_collection)

    async def _query_collection(
        self, collection: SearchableCollection, fts_query: str
    ) -> list[SearchResult]:
        # A broken or unavailable index only removes that collection's hits.
        try:
            hits = await collection.query_index(
                fts_query, limit=self._limit, snippet_tokens=self._snippet_tokens
            )
        except sqlite3.Error as exc:
            logger.warning("Search of %s failed for %r: %s", collection.name, fts_query, exc)
            return []
        logger.debug("%s: %d hits", collection.name, len(hits))
        return hits


def merge_results(*result_sets: Iterable[SearchResult]) -> list[SearchResult]:
    """Concatenate per-collection results and stable-sort them by rank.

    Equal ranks keep collection order first, then each collection's own
    retrieval order. Ranks from different FTS5 tables are compared as-is.
    """
    combined = [result for results in result_sets for result in results]
    return sorted(combined, key=lambda result: result.rank)
