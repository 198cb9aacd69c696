"""Shared fixtures for inkwell tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from inkwell.config import Config
from inkwell.data.db import Database
from inkwell.services.content_service import ContentService


@pytest.fixture
def test_config(tmp_path: Path) -> Config:
    """Config pointing at a temporary data directory."""
    return Config(data_dir=tmp_path / "data")


@pytest.fixture
async def test_db(tmp_path: Path) -> AsyncGenerator[Database]:
    """A fresh on-disk test database."""
    db_path = tmp_path / "test.db"
    db = Database(db_path)
    await db.__aenter__()
    yield db  # type: ignore[misc]
    await db.__aexit__(None, None, None)


@pytest.fixture
async def in_memory_db() -> AsyncGenerator[Database]:
    """SQLite in-memory database for fast unit/integration tests."""
    db = Database(Path(":memory:"))
    await db.__aenter__()
    yield db  # type: ignore[misc]
    await db.__aexit__(None, None, None)


@pytest.fixture
async def seeded_db(in_memory_db: Database) -> Database:
    """Database with a small mix of published and draft content."""
    content = ContentService(in_memory_db)
    await content.create_post(
        title="Go Concurrency Patterns",
        slug="go-concurrency-patterns",
        content="Goroutines and channels make pipelines easy to build.",
        post_type="article",
        published=True,
        tags="go, concurrency",
    )
    await content.create_post(
        title="Go Generics",
        slug="go-generics",
        content="Type parameters landed in Go 1.18, a big change for concurrency helpers.",
        post_type="article",
        published=False,
        tags="go",
    )
    await content.create_post(
        title="Channel axioms",
        slug="channel-axioms",
        content="A send to a nil channel blocks forever.",
        post_type="note",
        published=True,
        tags="go",
    )
    await content.create_page(
        title="About",
        slug="about",
        content="I write about Go, channels and distributed systems.",
        published=True,
    )
    await content.create_page(
        title="Drafts",
        slug="drafts",
        content="Unfinished thoughts on channels.",
        published=False,
    )
    return in_memory_db
