"""Protocol definitions for services."""

from __future__ import annotations

from typing import Protocol

from result import Result

from inkwell.models.content import Page, Post, TagCount
from inkwell.models.search import SearchResults


class ContentServiceProtocol(Protocol):
    """Interface for published-content reads."""

    async def list_posts(
        self, post_type: str | None = None, limit: int | None = None
    ) -> Result[list[Post], str]: ...

    async def recent_articles(self, limit: int = 5) -> Result[list[Post], str]: ...

    async def get_post(self, post_type: str, slug: str) -> Result[Post, str]: ...

    async def get_page(self, slug: str) -> Result[Page, str]: ...

    async def list_tags(self) -> Result[list[TagCount], str]: ...

    async def posts_for_tag(self, name: str) -> Result[list[Post], str]: ...


class SearchServiceProtocol(Protocol):
    """Interface for search operations."""

    async def search(self, query: str | None) -> Result[SearchResults, str]: ...
