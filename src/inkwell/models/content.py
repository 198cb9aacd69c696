"""Content models: posts, pages, and tags."""

from __future__ import annotations

from pydantic import BaseModel, Field

POST_TYPES: tuple[str, ...] = ("article", "note", "link", "photo")


class Post(BaseModel):
    """A blog post of one of the ``POST_TYPES`` kinds."""

    id: int
    title: str
    slug: str
    content: str = ""
    post_type: str = "article"
    published: bool = False
    created_at: str = ""
    updated_at: str = ""
    tags: list[str] = Field(default_factory=list)

    @property
    def url(self) -> str:
        return f"/{self.post_type}s/{self.slug}"


class Page(BaseModel):
    """A standalone static page."""

    id: int
    title: str
    slug: str
    content: str = ""
    published: bool = False
    created_at: str = ""
    updated_at: str = ""

    @property
    def url(self) -> str:
        return f"/pages/{self.slug}"


class TagCount(BaseModel):
    name: str
    count: int = 0
