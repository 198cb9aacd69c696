"""Tests for search functionality."""

from __future__ import annotations

import sqlite3

import pytest

from inkwell.data.collections import PageCollection, PostCollection, highlight_snippet
from inkwell.data.db import Database
from inkwell.data.search import SearchEngine, merge_results
from inkwell.models.content import Page, Post
from inkwell.models.search import SearchResult
from inkwell.services.content_service import ContentService


class RecordingCollection:
    """Collection double that records every index query."""

    def __init__(self, name: str, results: list[SearchResult] | None = None) -> None:
        self.name = name
        self.results = results or []
        self.calls: list[str] = []

    async def query_index(
        self, fts_query: str, *, limit: int, snippet_tokens: int
    ) -> list[SearchResult]:
        self.calls.append(fts_query)
        return self.results[:limit]


class FailingCollection:
    name = "broken"

    async def query_index(
        self, fts_query: str, *, limit: int, snippet_tokens: int
    ) -> list[SearchResult]:
        raise sqlite3.OperationalError("no such table: broken_fts")


def _post_hit(post_id: int, rank: float) -> SearchResult:
    post = Post(id=post_id, title=f"post {post_id}", slug=f"post-{post_id}", published=True)
    return SearchResult(kind="post", post=post, rank=rank, snippet="")


def _page_hit(page_id: int, rank: float) -> SearchResult:
    page = Page(id=page_id, title=f"page {page_id}", slug=f"page-{page_id}", published=True)
    return SearchResult(kind="page", page=page, rank=rank, snippet="")


class TestSearchEngine:
    @pytest.mark.asyncio
    async def test_published_article_found_with_highlight(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("concurrency")

        assert results.query == "concurrency"
        assert results.total_count == 1
        [hit] = results.results
        assert hit.kind == "post"
        assert hit.post is not None
        assert hit.post.slug == "go-concurrency-patterns"
        assert "<mark>Concurrency</mark>" in hit.snippet

    @pytest.mark.asyncio
    async def test_unpublished_content_never_returned(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        for query in ("generics", "type parameters", "drafts", "unfinished"):
            results = await engine.search(query)
            assert results.results == [], query

    @pytest.mark.asyncio
    async def test_prefix_matching(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("gorout")
        assert [r.post.slug for r in results.results if r.post] == ["go-concurrency-patterns"]

    @pytest.mark.asyncio
    async def test_searches_posts_and_pages(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("channels")
        kinds = sorted(r.kind for r in results.results)
        assert kinds == ["page", "post"]
        assert all(r.snippet for r in results.results)

    @pytest.mark.asyncio
    async def test_results_sorted_by_rank(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("go OR channel")
        ranks = [r.rank for r in results.results]
        assert len(ranks) >= 2
        assert ranks == sorted(ranks)

    @pytest.mark.asyncio
    async def test_repeated_search_is_stable(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        first = await engine.search("go")
        second = await engine.search("go")
        assert [(r.kind, r.title) for r in first.results] == [
            (r.kind, r.title) for r in second.results
        ]

    @pytest.mark.asyncio
    async def test_post_results_carry_tags(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("pipelines")
        [hit] = results.results
        assert hit.tags == ["concurrency", "go"]

    @pytest.mark.asyncio
    async def test_page_results_have_no_tags(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("distributed")
        [hit] = results.results
        assert hit.kind == "page"
        assert hit.page is not None and hit.page.slug == "about"
        assert hit.tags == []
        assert hit.url == "/pages/about"

    @pytest.mark.asyncio
    async def test_quoted_phrase(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        hit = await engine.search('"nil channel"')
        miss = await engine.search('"channel nil"')
        assert [r.title for r in hit.results] == ["Channel axioms"]
        assert miss.results == []

    @pytest.mark.asyncio
    async def test_boolean_not(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("channels NOT goroutines")
        titles = {r.title for r in results.results}
        assert "Go Concurrency Patterns" not in titles
        assert "About" in titles

    @pytest.mark.asyncio
    async def test_no_results(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search("xyznonexistent123")
        assert results.total_count == 0

    @pytest.mark.asyncio
    async def test_snippet_escapes_html(self, in_memory_db: Database) -> None:
        await ContentService(in_memory_db).create_post(
            title="Escaping",
            slug="escaping",
            content="<script>alert(1)</script> sanitizer notes",
            published=True,
        )
        engine = SearchEngine(in_memory_db)
        [hit] = (await engine.search("sanitizer")).results
        assert "<script>" not in hit.snippet
        assert "&lt;script&gt;" in hit.snippet
        assert "<mark>sanitizer</mark>" in hit.snippet

    @pytest.mark.asyncio
    async def test_malformed_query_degrades_to_empty(self, seeded_db: Database) -> None:
        engine = SearchEngine(seeded_db)
        results = await engine.search('"unbalanced')
        assert results.results == []
        assert results.total_count == 0

    @pytest.mark.asyncio
    async def test_missing_index_only_drops_that_collection(self, seeded_db: Database) -> None:
        await seeded_db.conn.executescript(
            """
            DROP TRIGGER posts_ai;
            DROP TRIGGER posts_ad;
            DROP TRIGGER posts_au;
            DROP TABLE posts_fts;
            """
        )
        engine = SearchEngine(seeded_db)
        results = await engine.search("channels")
        assert [r.kind for r in results.results] == ["page"]

    @pytest.mark.asyncio
    async def test_failing_collection_does_not_abort_others(self) -> None:
        pages = RecordingCollection("pages", [_page_hit(1, -2.0)])
        engine = SearchEngine(None, [FailingCollection(), pages])  # type: ignore[arg-type]
        results = await engine.search("anything")
        assert [r.kind for r in results.results] == ["page"]
        assert pages.calls == ["anything*"]

    @pytest.mark.asyncio
    async def test_empty_query_issues_no_index_query(self) -> None:
        posts = RecordingCollection("posts", [_post_hit(1, -1.0)])
        pages = RecordingCollection("pages", [_page_hit(1, -1.0)])
        engine = SearchEngine(None, [posts, pages])  # type: ignore[arg-type]

        for query in ("", "   ", "**"):
            results = await engine.search(query)
            assert results.results == []
        assert await engine.search_prepared("") == []
        assert posts.calls == []
        assert pages.calls == []

    @pytest.mark.asyncio
    async def test_default_collections(self, in_memory_db: Database) -> None:
        engine = SearchEngine(in_memory_db)
        assert [type(c) for c in engine.collections] == [PostCollection, PageCollection]

    @pytest.mark.asyncio
    async def test_limit_applies_per_collection(self, in_memory_db: Database) -> None:
        await in_memory_db.execute_many(
            "INSERT INTO posts (title, slug, content, published) VALUES (?, ?, ?, 1)",
            [(f"Widget {i}", f"widget-{i}", "widget body") for i in range(60)],
        )
        await in_memory_db.execute_many(
            "INSERT INTO pages (title, slug, content, published) VALUES (?, ?, ?, 1)",
            [(f"Widget page {i}", f"widget-page-{i}", "widget body") for i in range(60)],
        )
        await in_memory_db.commit()

        results = await SearchEngine(in_memory_db).search("widget")
        assert results.total_count == 100
        assert sum(1 for r in results.results if r.kind == "post") == 50
        assert sum(1 for r in results.results if r.kind == "page") == 50

        small = await SearchEngine(in_memory_db, limit=3).search("widget")
        assert small.total_count == 6


class TestIndexSync:
    @pytest.mark.asyncio
    async def test_update_and_delete_are_mirrored(self, in_memory_db: Database) -> None:
        content = ContentService(in_memory_db)
        engine = SearchEngine(in_memory_db)
        created = await content.create_post(
            title="Original heading", slug="sync", content="alpha body", published=True
        )
        post_id = created.ok_value.id
        assert (await engine.search("alpha")).total_count == 1

        await content.update_post(
            post_id, title="Renamed heading", slug="sync", content="beta body", published=True
        )
        assert (await engine.search("alpha")).total_count == 0
        assert (await engine.search("original")).total_count == 0
        assert (await engine.search("beta")).total_count == 1
        assert (await engine.search("renamed")).total_count == 1

        await content.update_post(
            post_id, title="Renamed heading", slug="sync", content="beta body", published=False
        )
        assert (await engine.search("beta")).total_count == 0

        await content.delete_post(post_id)
        row = await in_memory_db.fetch_one(
            "SELECT COUNT(*) as cnt FROM posts_fts WHERE posts_fts MATCH 'beta'"
        )
        assert row is not None and row["cnt"] == 0
        await in_memory_db.execute(
            "INSERT INTO posts_fts(posts_fts, rank) VALUES('integrity-check', 1)"
        )

    @pytest.mark.asyncio
    async def test_page_edits_are_mirrored(self, in_memory_db: Database) -> None:
        content = ContentService(in_memory_db)
        engine = SearchEngine(in_memory_db)
        created = await content.create_page(
            title="Colophon", slug="colophon", content="built with sqlite", published=True
        )
        page_id = created.ok_value.id
        assert (await engine.search("sqlite")).total_count == 1

        await content.update_page(
            page_id, title="Colophon", slug="colophon", content="built with postgres",
            published=True,
        )
        assert (await engine.search("sqlite")).total_count == 0
        assert (await engine.search("postgres")).total_count == 1

        await content.delete_page(page_id)
        assert (await engine.search("postgres")).total_count == 0
        await in_memory_db.execute(
            "INSERT INTO pages_fts(pages_fts, rank) VALUES('integrity-check', 1)"
        )


class TestMergeResults:
    def test_sorted_ascending_by_rank(self) -> None:
        merged = merge_results(
            [_post_hit(1, -3.0), _post_hit(2, -1.0)],
            [_page_hit(1, -2.0), _page_hit(2, -0.5)],
        )
        assert [r.rank for r in merged] == [-3.0, -2.0, -1.0, -0.5]

    def test_equal_ranks_keep_input_order(self) -> None:
        posts = [_post_hit(1, -1.0), _post_hit(2, -1.0)]
        pages = [_page_hit(1, -1.0)]
        first = merge_results(posts, pages)
        second = merge_results(posts, pages)
        expected = [("post", "post 1"), ("post", "post 2"), ("page", "page 1")]
        assert [(r.kind, r.title) for r in first] == expected
        assert [(r.kind, r.title) for r in second] == expected

    def test_empty_inputs(self) -> None:
        assert merge_results([], []) == []
        assert merge_results() == []


def test_highlight_snippet_swaps_markers_after_escaping() -> None:
    raw = "a < b and \x02Match\x03 & more"
    assert highlight_snippet(raw) == "a &lt; b and <mark>Match</mark> &amp; more"


@pytest.mark.asyncio
async def test_stored_marker_characters_never_become_highlights(
    in_memory_db: Database,
) -> None:
    content = ContentService(in_memory_db)
    await content.create_post(
        title="Control\x02 chars",
        slug="control",
        content="before \x02fake\x03 after needle",
        published=True,
    )

    results = await SearchEngine(in_memory_db).search("needle")
    assert results.total_count == 1
    assert results.results[0].title == "Control chars"
    assert results.results[0].snippet.count("<mark>") == 1
    assert "<mark>needle</mark>" in results.results[0].snippet
    assert "fake" in results.results[0].snippet
