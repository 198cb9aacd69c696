"""Home page with the most recent articles."""

from __future__ import annotations

from nicegui import ui
from result import Err

from inkwell.ui.components.post_card import render_post_card
from inkwell.ui.deps import get_services
from inkwell.ui.layout import error_banner, page_layout


def setup(article_count: int = 5) -> None:
    """Register the home page."""

    @ui.page("/")
    async def home_page() -> None:
        svc = get_services()

        with page_layout():
            result = await svc.content_service.recent_articles(article_count)
            if isinstance(result, Err):
                error_banner(result.err_value)
                return

            if not result.ok_value:
                ui.label("Nothing published yet").classes("opacity-60")
                return

            for post in result.ok_value:
                render_post_card(post)
