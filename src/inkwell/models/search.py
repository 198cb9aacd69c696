"""Search models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from inkwell.models.content import Page, Post

SearchKind = Literal["post", "page"]


class SearchResult(BaseModel):
    """A single ranked match with a highlighted excerpt.

    ``rank`` is the FTS5 ``rank`` value: lower means a stronger match. It is an
    ordering key within one query's results, not a normalized score.
    """

    kind: SearchKind
    post: Post | None = None
    page: Page | None = None
    rank: float = 0.0
    snippet: str = ""

    @property
    def title(self) -> str:
        item = self.post if self.post is not None else self.page
        return item.title if item is not None else ""

    @property
    def url(self) -> str:
        item = self.post if self.post is not None else self.page
        return item.url if item is not None else ""

    @property
    def tags(self) -> list[str]:
        return self.post.tags if self.post is not None else []


class SearchResults(BaseModel):
    """Merged search results for one query."""

    results: list[SearchResult] = Field(default_factory=list)
    total_count: int = 0
    query: str = ""
