"""Service container with DI wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from inkwell.data.db import Database
from inkwell.data.search import SearchEngine
from inkwell.services.content_service import ContentService
from inkwell.services.search_service import SearchService

if TYPE_CHECKING:
    from inkwell.config import Config


@dataclass
class ServiceContainer:
    """Holds all application services. Built once at startup, immutable."""

    db: Database
    content_service: ContentService
    search_service: SearchService

    @classmethod
    async def create(cls, config: Config) -> ServiceContainer:
        """Async factory that wires all dependencies."""
        db = Database(config.db_path)
        await db.__aenter__()
        if db.requires_full_reindex:
            await db.rebuild_search_index()

        search_engine = SearchEngine(
            db, limit=config.search_limit, snippet_tokens=config.snippet_tokens
        )

        return cls(
            db=db,
            content_service=ContentService(db),
            search_service=SearchService(search_engine),
        )

    async def close(self) -> None:
        """Shut down all services."""
        await self.db.__aexit__(None, None, None)
