"""Static page view."""

from __future__ import annotations

from nicegui import ui
from result import Err

from inkwell.ui.deps import get_services
from inkwell.ui.layout import error_banner, page_layout
from inkwell.ui.markdown_renderer import render_markdown


def setup() -> None:
    """Register the static page route."""

    @ui.page("/pages/{slug}")
    async def static_page(slug: str) -> None:
        svc = get_services()
        result = await svc.content_service.get_page(slug)

        with page_layout(result.ok_value.title if not isinstance(result, Err) else "Page"):
            if isinstance(result, Err):
                error_banner(result.err_value)
                return

            page = result.ok_value
            ui.label(page.title).classes("text-3xl font-bold")
            ui.html(render_markdown(page.content)).classes("w-full")
