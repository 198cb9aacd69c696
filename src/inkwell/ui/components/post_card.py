"""Post summary card used by list pages."""

from __future__ import annotations

from nicegui import ui

from inkwell.models.content import Post
from inkwell.ui.layout import tag_url
from inkwell.ui.markdown_renderer import excerpt, render_markdown
from inkwell.ui.theme import COLORS, format_date, post_type_icon


def render_post_card(post: Post, *, full: bool = False) -> None:
    """Render a post title, date, tags and either its body or an excerpt.

    Notes and photos are short, so list pages show them in full.
    """
    with (
        ui.card()
        .classes("w-full p-4")
        .style(f"background-color: {COLORS['surface']}; border: 1px solid {COLORS['border']}")
    ):
        with ui.row().classes("items-center gap-2"):
            ui.icon(post_type_icon(post.post_type)).style(f"color: {COLORS['primary']}")
            ui.link(post.title, post.url).classes("text-lg font-bold no-underline")
        ui.label(format_date(post.created_at)).classes("text-xs").style(
            f"color: {COLORS['text_muted']}"
        )
        if full or post.post_type in ("note", "photo"):
            ui.html(render_markdown(post.content)).classes("text-sm")
        else:
            ui.label(excerpt(post.content)).classes("text-sm")
        render_tag_links(post.tags)


def render_tag_links(tags: list[str]) -> None:
    if not tags:
        return
    with ui.row().classes("gap-1"):
        for tag in tags:
            ui.link(f"#{tag}", tag_url(tag)).classes("text-xs")
