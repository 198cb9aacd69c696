"""Repository layer for SQL persistence and query access."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkwell.data.db import strip_snippet_markers

if TYPE_CHECKING:
    from aiosqlite import Row

    from inkwell.data.db import Database

_POST_COLUMNS = "p.id, p.title, p.slug, p.content, p.post_type, p.published, p.created_at, p.updated_at"
_PAGE_COLUMNS = "p.id, p.title, p.slug, p.content, p.published, p.created_at, p.updated_at"


class PostRepository:
    """SQL query repository for posts."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def list_published_rows(
        self, *, post_type: str | None = None, limit: int | None = None
    ) -> list[Row]:
        conditions = ["p.published = 1"]
        params: list[str | int] = []
        if post_type:
            conditions.append("p.post_type = ?")
            params.append(post_type)
        sql = (
            f"SELECT {_POST_COLUMNS} FROM posts p WHERE {' AND '.join(conditions)} "
            "ORDER BY p.created_at DESC, p.id DESC"
        )
        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)
        return await self._db.fetch_all(sql, tuple(params))

    async def get_published_row(self, post_type: str, slug: str) -> Row | None:
        return await self._db.fetch_one(
            f"""SELECT {_POST_COLUMNS} FROM posts p
                WHERE p.slug = ? AND p.post_type = ? AND p.published = 1""",
            (slug, post_type),
        )

    async def get_row(self, post_id: int) -> Row | None:
        return await self._db.fetch_one(
            f"SELECT {_POST_COLUMNS} FROM posts p WHERE p.id = ?", (post_id,)
        )

    async def list_rows_for_tag(self, tag_name: str) -> list[Row]:
        return await self._db.fetch_all(
            f"""SELECT {_POST_COLUMNS}
                FROM posts p
                JOIN post_tags pt ON p.id = pt.post_id
                JOIN tags t ON pt.tag_id = t.id
                WHERE t.name = ? AND p.published = 1
                ORDER BY p.created_at DESC, p.id DESC""",
            (tag_name,),
        )

    async def insert(
        self, *, title: str, slug: str, content: str, post_type: str, published: bool
    ) -> int:
        cursor = await self._db.execute(
            """INSERT INTO posts (title, slug, content, post_type, published)
               VALUES (?, ?, ?, ?, ?)""",
            (
                strip_snippet_markers(title),
                slug,
                strip_snippet_markers(content),
                post_type,
                int(published),
            ),
        )
        return int(cursor.lastrowid or 0)

    async def update(
        self,
        post_id: int,
        *,
        title: str,
        slug: str,
        content: str,
        post_type: str,
        published: bool,
    ) -> bool:
        cursor = await self._db.execute(
            """UPDATE posts
               SET title = ?, slug = ?, content = ?, post_type = ?, published = ?,
                   updated_at = CURRENT_TIMESTAMP
               WHERE id = ?""",
            (
                strip_snippet_markers(title),
                slug,
                strip_snippet_markers(content),
                post_type,
                int(published),
                post_id,
            ),
        )
        return cursor.rowcount > 0

    async def delete(self, post_id: int) -> bool:
        cursor = await self._db.execute("DELETE FROM posts WHERE id = ?", (post_id,))
        return cursor.rowcount > 0

    async def count(self) -> int:
        row = await self._db.fetch_one("SELECT COUNT(*) as cnt FROM posts")
        return int(row["cnt"]) if row else 0


class PageRepository:
    """SQL query repository for static pages."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def get_published_row(self, slug: str) -> Row | None:
        return await self._db.fetch_one(
            f"SELECT {_PAGE_COLUMNS} FROM pages p WHERE p.slug = ? AND p.published = 1",
            (slug,),
        )

    async def get_row(self, page_id: int) -> Row | None:
        return await self._db.fetch_one(
            f"SELECT {_PAGE_COLUMNS} FROM pages p WHERE p.id = ?", (page_id,)
        )

    async def insert(self, *, title: str, slug: str, content: str, published: bool) -> int:
        cursor = await self._db.execute(
            "INSERT INTO pages (title, slug, content, published) VALUES (?, ?, ?, ?)",
            (strip_snippet_markers(title), slug, strip_snippet_markers(content), int(published)),
        )
        return int(cursor.lastrowid or 0)

    async def update(
        self, page_id: int, *, title: str, slug: str, content: str, published: bool
    ) -> bool:
        cursor = await self._db.execute(
            """UPDATE pages
               SET title = ?, slug = ?, content = ?, published = ?,
                   updated_at = CURRENT_TIMESTAMP
               WHERE id = ?""",
            (
                strip_snippet_markers(title),
                slug,
                strip_snippet_markers(content),
                int(published),
                page_id,
            ),
        )
        return cursor.rowcount > 0

    async def delete(self, page_id: int) -> bool:
        cursor = await self._db.execute("DELETE FROM pages WHERE id = ?", (page_id,))
        return cursor.rowcount > 0

    async def count(self) -> int:
        row = await self._db.fetch_one("SELECT COUNT(*) as cnt FROM pages")
        return int(row["cnt"]) if row else 0


class TagRepository:
    """SQL query repository for tags and post/tag links."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def tags_for_posts(self, post_ids: list[int]) -> dict[int, list[str]]:
        """Map each post id to its tag names, sorted ascending."""
        if not post_ids:
            return {}
        placeholders = ",".join("?" for _ in post_ids)
        rows = await self._db.fetch_all(
            f"""SELECT pt.post_id, t.name
                FROM tags t
                JOIN post_tags pt ON t.id = pt.tag_id
                WHERE pt.post_id IN ({placeholders})
                ORDER BY t.name ASC""",
            tuple(post_ids),
        )
        tags: dict[int, list[str]] = {post_id: [] for post_id in post_ids}
        for row in rows:
            tags[int(row["post_id"])].append(str(row["name"]))
        return tags

    async def tags_for_post(self, post_id: int) -> list[str]:
        return (await self.tags_for_posts([post_id]))[post_id]

    async def tag_count_rows(self) -> list[Row]:
        return await self._db.fetch_all(
            """SELECT t.name, COUNT(pt.post_id) as count
               FROM tags t
               LEFT JOIN post_tags pt ON t.id = pt.tag_id
               GROUP BY t.id, t.name
               ORDER BY t.name"""
        )

    async def replace_post_tags(self, post_id: int, names: list[str]) -> None:
        """Replace every tag link of ``post_id``, creating missing tags."""
        await self._db.execute("DELETE FROM post_tags WHERE post_id = ?", (post_id,))
        for name in names:
            await self._db.execute("INSERT OR IGNORE INTO tags (name) VALUES (?)", (name,))
            row = await self._db.fetch_one("SELECT id FROM tags WHERE name = ?", (name,))
            if row is None:
                continue
            await self._db.execute(
                "INSERT OR IGNORE INTO post_tags (post_id, tag_id) VALUES (?, ?)",
                (post_id, int(row["id"])),
            )
