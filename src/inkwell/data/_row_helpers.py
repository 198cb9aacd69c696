"""Shared row-to-model conversion helpers."""

from __future__ import annotations

from collections.abc import Mapping

from inkwell.models.content import Page, Post


def row_str(row: Mapping[str, object], key: str, default: str = "") -> str:
    """Extract a string value from a database row mapping."""
    v = row.get(key, default)
    return str(v) if v else default


def row_int(row: Mapping[str, object], key: str) -> int:
    """Extract an integer value from a database row mapping."""
    v = row.get(key, 0)
    if isinstance(v, bool):
        return int(v)
    if isinstance(v, int):
        return v
    if isinstance(v, float):
        return int(v)
    if isinstance(v, str):
        try:
            return int(v)
        except ValueError:
            return 0
    return 0


def row_float(row: Mapping[str, object], key: str) -> float:
    v = row.get(key, 0.0)
    if isinstance(v, int | float):
        return float(v)
    return 0.0


def post_from_row(row: Mapping[str, object], tags: list[str] | None = None) -> Post:
    return Post(
        id=row_int(row, "id"),
        title=row_str(row, "title"),
        slug=row_str(row, "slug"),
        content=row_str(row, "content"),
        post_type=row_str(row, "post_type", "article"),
        published=bool(row_int(row, "published")),
        created_at=row_str(row, "created_at"),
        updated_at=row_str(row, "updated_at"),
        tags=tags or [],
    )


def page_from_row(row: Mapping[str, object]) -> Page:
    return Page(
        id=row_int(row, "id"),
        title=row_str(row, "title"),
        slug=row_str(row, "slug"),
        content=row_str(row, "content"),
        published=bool(row_int(row, "published")),
        created_at=row_str(row, "created_at"),
        updated_at=row_str(row, "updated_at"),
    )
