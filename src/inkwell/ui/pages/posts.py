"""Post list and post detail pages, one pair per post type."""

from __future__ import annotations

from nicegui import ui
from result import Err

from inkwell.models.content import POST_TYPES
from inkwell.ui.components.post_card import render_post_card, render_tag_links
from inkwell.ui.deps import get_services
from inkwell.ui.layout import error_banner, page_layout
from inkwell.ui.markdown_renderer import render_markdown
from inkwell.ui.theme import COLORS, format_date, post_type_label


def _register(post_type: str) -> None:
    plural = post_type_label(post_type, plural=True)

    @ui.page(f"/{post_type}s")
    async def post_list_page() -> None:
        svc = get_services()

        with page_layout(plural):
            ui.label(plural).classes("text-2xl font-bold")
            result = await svc.content_service.list_posts(post_type)
            if isinstance(result, Err):
                error_banner(result.err_value)
                return
            if not result.ok_value:
                ui.label(f"No {plural.lower()} yet").classes("opacity-60")
                return
            for post in result.ok_value:
                render_post_card(post)

    @ui.page(f"/{post_type}s/{{slug}}")
    async def post_detail_page(slug: str) -> None:
        svc = get_services()
        result = await svc.content_service.get_post(post_type, slug)

        with page_layout(result.ok_value.title if not isinstance(result, Err) else plural):
            if isinstance(result, Err):
                error_banner(result.err_value)
                return

            post = result.ok_value
            ui.label(post.title).classes("text-3xl font-bold")
            ui.label(format_date(post.created_at)).classes("text-xs").style(
                f"color: {COLORS['text_muted']}"
            )
            ui.html(render_markdown(post.content)).classes("w-full")
            render_tag_links(post.tags)


def setup() -> None:
    """Register list and detail pages for every post type."""
    for post_type in POST_TYPES:
        _register(post_type)
