"""Searchable content collections backed by FTS5 external-content indexes."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, ClassVar, Protocol

from inkwell.data._row_helpers import page_from_row, post_from_row, row_float, row_str
from inkwell.data.db import SNIPPET_END, SNIPPET_START
from inkwell.data.repositories import TagRepository
from inkwell.models.search import SearchKind, SearchResult

if TYPE_CHECKING:
    from aiosqlite import Row

    from inkwell.data.db import Database

HIGHLIGHT_START = "<mark>"
HIGHLIGHT_END = "</mark>"
ELLIPSIS = "..."


def highlight_snippet(raw: str) -> str:
    """Escape an FTS5 snippet and turn its raw match markers into ``<mark>`` tags."""
    escaped = html.escape(raw, quote=False)
    return escaped.replace(SNIPPET_START, HIGHLIGHT_START).replace(SNIPPET_END, HIGHLIGHT_END)


class SearchableCollection(Protocol):
    """One content table paired with its full-text index."""

    name: str

    async def query_index(
        self, fts_query: str, *, limit: int, snippet_tokens: int
    ) -> list[SearchResult]: ...


class _FtsCollection:
    """Shared MATCH query for a ``<table>`` / ``<table>_fts`` pair.

    Only published rows are selected, in FTS5 rank order (lower is better).
    The snippet column is chosen by FTS5 (``-1``) so a title-only hit still
    gets a highlighted excerpt.
    """

    name: ClassVar[str]
    kind: ClassVar[SearchKind]
    table: ClassVar[str]
    columns: ClassVar[str]

    def __init__(self, db: Database) -> None:
        self._db = db

    @property
    def fts_table(self) -> str:
        return f"{self.table}_fts"

    def _sql(self) -> str:
        fts = self.fts_table
        return (
            "SELECT\n"
            f"    {self.columns},\n"
            f"    {fts}.rank as rank,\n"
            f"    snippet({fts}, -1, char(2), char(3), ?, ?) as snippet\n"
            f"FROM {fts}\n"
            f"JOIN {self.table} p ON p.id = {fts}.rowid\n"
            f"WHERE {fts} MATCH ? AND p.published = 1\n"
            f"ORDER BY {fts}.rank, p.id\n"
            "LIMIT ?"
        )

    async def _fetch(self, fts_query: str, *, limit: int, snippet_tokens: int) -> list[Row]:
        return await self._db.fetch_all(
            self._sql(), (ELLIPSIS, snippet_tokens, fts_query, limit)
        )


class PostCollection(_FtsCollection):
    """Articles, notes, links and photos; results carry their tags."""

    name = "posts"
    kind = "post"
    table = "posts"
    columns = (
        "p.id, p.title, p.slug, p.content, p.post_type, p.published, p.created_at, p.updated_at"
    )

    def __init__(self, db: Database, tags: TagRepository | None = None) -> None:
        super().__init__(db)
        self._tags = tags or TagRepository(db)

    async def query_index(
        self, fts_query: str, *, limit: int, snippet_tokens: int
    ) -> list[SearchResult]:
        rows = await self._fetch(fts_query, limit=limit, snippet_tokens=snippet_tokens)
        tags = await self._tags.tags_for_posts([int(row["id"]) for row in rows])
        results: list[SearchResult] = []
        for row in rows:
            data = dict(row)
            post = post_from_row(data, tags.get(int(row["id"]), []))
            results.append(
                SearchResult(
                    kind=self.kind,
                    post=post,
                    rank=row_float(data, "rank"),
                    snippet=highlight_snippet(row_str(data, "snippet")),
                )
            )
        return results


class PageCollection(_FtsCollection):
    """Static pages."""

    name = "pages"
    kind = "page"
    table = "pages"
    columns = "p.id, p.title, p.slug, p.content, p.published, p.created_at, p.updated_at"

    async def query_index(
        self, fts_query: str, *, limit: int, snippet_tokens: int
    ) -> list[SearchResult]:
        rows = [
            dict(row)
            for row in await self._fetch(fts_query, limit=limit, snippet_tokens=snippet_tokens)
        ]
        return [
            SearchResult(
                kind=self.kind,
                page=page_from_row(data),
                rank=row_float(data, "rank"),
                snippet=highlight_snippet(row_str(data, "snippet")),
            )
            for data in rows
        ]
