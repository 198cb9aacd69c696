"""Tag index and per-tag post listing."""

from __future__ import annotations

from nicegui import ui
from result import Err

from inkwell.ui.components.post_card import render_post_card
from inkwell.ui.deps import get_services
from inkwell.ui.layout import error_banner, page_layout, tag_url


def setup() -> None:
    """Register the tag pages."""

    @ui.page("/tags")
    async def tags_page() -> None:
        svc = get_services()

        with page_layout("Tags"):
            ui.label("Tags").classes("text-2xl font-bold")
            result = await svc.content_service.list_tags()
            if isinstance(result, Err):
                error_banner(result.err_value)
                return
            with ui.row().classes("gap-2"):
                for tag in result.ok_value:
                    ui.link(f"#{tag.name} ({tag.count})", tag_url(tag.name))

    # ``path`` so an encoded "/" in a tag name still reaches this route.
    @ui.page("/tags/{name:path}")
    async def tag_posts_page(name: str) -> None:
        svc = get_services()

        with page_layout(f"#{name}"):
            ui.label(f"#{name}").classes("text-2xl font-bold")
            result = await svc.content_service.posts_for_tag(name)
            if isinstance(result, Err):
                error_banner(result.err_value)
                return
            for post in result.ok_value:
                render_post_card(post)
