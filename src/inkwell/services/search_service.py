"""Search service wrapping FTS5 search."""

from __future__ import annotations

from typing import TYPE_CHECKING

from result import Err, Ok, Result

from inkwell.models.search import SearchResults

if TYPE_CHECKING:
    from inkwell.data.search import SearchEngine


class SearchService:
    """Service for full-text search."""

    def __init__(self, search_engine: SearchEngine) -> None:
        self._engine = search_engine

    async def search(self, query: str | None) -> Result[SearchResults, str]:
        """Search published posts and pages. A blank query yields no results."""
        query = query or ""
        if not query.strip():
            return Ok(SearchResults(query=query))
        try:
            results = await self._engine.search(query)
            return Ok(results)
        except Exception as exc:
            return Err(f"Search failed: {exc}")
