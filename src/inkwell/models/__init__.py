"""Pydantic models for inkwell."""

from inkwell.models.content import POST_TYPES, Page, Post, TagCount
from inkwell.models.search import SearchKind, SearchResult, SearchResults

__all__ = [
    "Page",
    "Post",
    "SearchKind",
    "SearchResult",
    "SearchResults",
    "TagCount",
    "POST_TYPES",
]
