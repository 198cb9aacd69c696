"""NiceGUI web application: service lifecycle and page registration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from nicegui import app, ui

from inkwell.services.container import ServiceContainer
from inkwell.ui import deps
from inkwell.ui.pages import home, posts, search, static_pages, tags

if TYPE_CHECKING:
    from inkwell.config import Config

logger = logging.getLogger(__name__)


def register_pages(config: Config) -> None:
    """Register every public page with NiceGUI."""
    home.setup(config.home_article_count)
    posts.setup()
    static_pages.setup()
    tags.setup()
    search.setup()


def install_lifecycle(config: Config) -> None:
    """Open the service container on startup and close it on shutdown."""

    async def startup() -> None:
        container = await ServiceContainer.create(config)
        deps.set_services(container)
        logger.info("Serving %s on http://%s:%d", config.db_path, config.host, config.port)

    async def shutdown() -> None:
        try:
            container = deps.get_services()
        except RuntimeError:
            return
        await container.close()
        deps.set_services(None)

    app.on_startup(startup)
    app.on_shutdown(shutdown)


def run_app(config: Config) -> None:
    """Start the web server and block until it exits."""
    install_lifecycle(config)
    register_pages(config)
    ui.run(
        host=config.host,
        port=config.port,
        title=config.site_title,
        reload=False,
        show=False,
    )
