"""Content service for posts, pages and tags."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from inkwell.data._row_helpers import page_from_row, post_from_row
from inkwell.data.repositories import PageRepository, PostRepository, TagRepository
from inkwell.models.content import POST_TYPES, Page, Post, TagCount

if TYPE_CHECKING:
    from aiosqlite import Row

    from inkwell.data.db import Database

logger = logging.getLogger(__name__)


def parse_tags(raw: str) -> list[str]:
    """Split a comma-separated tag string, trimming and dropping blanks."""
    names: list[str] = []
    for part in raw.split(","):
        name = part.strip()
        if name and name not in names:
            names.append(name)
    return names


def _validate(title: str, slug: str, post_type: str | None = None) -> None:
    if not title.strip():
        raise ValueError("Title cannot be empty")
    if not slug.strip():
        raise ValueError("Slug cannot be empty")
    if post_type is not None and post_type not in POST_TYPES:
        raise ValueError(f"Unknown post type: {post_type}")


class ContentService:
    """Read and write operations for blog content.

    Every write goes through the content tables; the FTS5 triggers keep
    ``posts_fts`` and ``pages_fts`` in step within the same transaction.
    """

    def __init__(self, db: Database) -> None:
        self._db = db
        self._posts = PostRepository(db)
        self._pages = PageRepository(db)
        self._tags = TagRepository(db)

    async def _posts_with_tags(self, rows: list[Row]) -> list[Post]:
        tags = await self._tags.tags_for_posts([int(row["id"]) for row in rows])
        return [post_from_row(dict(row), tags.get(int(row["id"]), [])) for row in rows]

    async def list_posts(
        self, post_type: str | None = None, limit: int | None = None
    ) -> Result[list[Post], str]:
        """Published posts, newest first."""
        if post_type is not None and post_type not in POST_TYPES:
            return Err(f"Unknown post type: {post_type}")
        try:
            rows = await self._posts.list_published_rows(post_type=post_type, limit=limit)
            return Ok(await self._posts_with_tags(rows))
        except Exception as exc:
            return Err(f"Failed to list posts: {exc}")

    async def recent_articles(self, limit: int = 5) -> Result[list[Post], str]:
        return await self.list_posts("article", limit=limit)

    async def get_post(self, post_type: str, slug: str) -> Result[Post, str]:
        try:
            row = await self._posts.get_published_row(post_type, slug)
            if row is None:
                return Err(f"Post not found: {slug}")
            tags = await self._tags.tags_for_post(int(row["id"]))
            return Ok(post_from_row(dict(row), tags))
        except Exception as exc:
            return Err(f"Failed to load post: {exc}")

    async def get_page(self, slug: str) -> Result[Page, str]:
        try:
            row = await self._pages.get_published_row(slug)
            if row is None:
                return Err(f"Page not found: {slug}")
            return Ok(page_from_row(dict(row)))
        except Exception as exc:
            return Err(f"Failed to load page: {exc}")

    async def list_tags(self) -> Result[list[TagCount], str]:
        try:
            rows = await self._tags.tag_count_rows()
            return Ok([TagCount(name=str(row["name"]), count=int(row["count"])) for row in rows])
        except Exception as exc:
            return Err(f"Failed to list tags: {exc}")

    async def posts_for_tag(self, name: str) -> Result[list[Post], str]:
        try:
            rows = await self._posts.list_rows_for_tag(name)
            return Ok(await self._posts_with_tags(rows))
        except Exception as exc:
            return Err(f"Failed to list posts for tag: {exc}")

    async def stats(self) -> Result[dict[str, int], str]:
        try:
            return Ok({"posts": await self._posts.count(), "pages": await self._pages.count()})
        except Exception as exc:
            return Err(f"Failed to load stats: {exc}")

    async def create_post(
        self,
        *,
        title: str,
        slug: str,
        content: str = "",
        post_type: str = "article",
        published: bool = False,
        tags: str = "",
    ) -> Result[Post, str]:
        try:
            _validate(title, slug, post_type)
            post_id = await self._posts.insert(
                title=title, slug=slug, content=content, post_type=post_type, published=published
            )
            await self._tags.replace_post_tags(post_id, parse_tags(tags))
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to create post: {exc}")
        logger.info("Created %s %r (id=%d)", post_type, slug, post_id)
        return await self._load_post(post_id)

    async def update_post(
        self,
        post_id: int,
        *,
        title: str,
        slug: str,
        content: str = "",
        post_type: str = "article",
        published: bool = False,
        tags: str = "",
    ) -> Result[Post, str]:
        try:
            _validate(title, slug, post_type)
            found = await self._posts.update(
                post_id,
                title=title,
                slug=slug,
                content=content,
                post_type=post_type,
                published=published,
            )
            if not found:
                await self._db.rollback()
                return Err(f"Post not found: {post_id}")
            await self._tags.replace_post_tags(post_id, parse_tags(tags))
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to update post: {exc}")
        return await self._load_post(post_id)

    async def delete_post(self, post_id: int) -> Result[None, str]:
        try:
            found = await self._posts.delete(post_id)
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to delete post: {exc}")
        if not found:
            return Err(f"Post not found: {post_id}")
        return Ok(None)

    async def create_page(
        self, *, title: str, slug: str, content: str = "", published: bool = False
    ) -> Result[Page, str]:
        try:
            _validate(title, slug)
            page_id = await self._pages.insert(
                title=title, slug=slug, content=content, published=published
            )
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to create page: {exc}")
        logger.info("Created page %r (id=%d)", slug, page_id)
        return await self._load_page(page_id)

    async def update_page(
        self,
        page_id: int,
        *,
        title: str,
        slug: str,
        content: str = "",
        published: bool = False,
    ) -> Result[Page, str]:
        try:
            _validate(title, slug)
            found = await self._pages.update(
                page_id, title=title, slug=slug, content=content, published=published
            )
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to update page: {exc}")
        if not found:
            return Err(f"Page not found: {page_id}")
        return await self._load_page(page_id)

    async def delete_page(self, page_id: int) -> Result[None, str]:
        try:
            found = await self._pages.delete(page_id)
            await self._db.commit()
        except Exception as exc:
            await self._db.rollback()
            return Err(f"Failed to delete page: {exc}")
        if not found:
            return Err(f"Page not found: {page_id}")
        return Ok(None)

    async def get_post_by_id(self, post_id: int) -> Result[Post, str]:
        """Load any post, published or not, for editing."""
        try:
            return await self._load_post(post_id)
        except Exception as exc:
            return Err(f"Failed to load post: {exc}")

    async def get_page_by_id(self, page_id: int) -> Result[Page, str]:
        """Load any page, published or not, for editing."""
        try:
            return await self._load_page(page_id)
        except Exception as exc:
            return Err(f"Failed to load page: {exc}")

    async def _load_post(self, post_id: int) -> Result[Post, str]:
        row = await self._posts.get_row(post_id)
        if row is None:
            return Err(f"Post not found: {post_id}")
        tags = await self._tags.tags_for_post(post_id)
        return Ok(post_from_row(dict(row), tags))

    async def _load_page(self, page_id: int) -> Result[Page, str]:
        row = await self._pages.get_row(page_id)
        if row is None:
            return Err(f"Page not found: {page_id}")
        return Ok(page_from_row(dict(row)))
