"""Search result component."""

from __future__ import annotations

from nicegui import ui

from inkwell.models.search import SearchResult
from inkwell.ui.components.post_card import render_tag_links
from inkwell.ui.theme import COLORS, format_date, post_type_icon, post_type_label


def result_label(result: SearchResult) -> str:
    """Kind label shown above a hit: the post type, or "Page"."""
    if result.post is not None:
        return post_type_label(result.post.post_type)
    return "Page"


def render_search_result(result: SearchResult) -> None:
    """Render a single search result with highlighted excerpt."""
    icon = post_type_icon(result.post.post_type) if result.post is not None else "description"
    item = result.post or result.page
    created_at = item.created_at if item is not None else ""
    with (
        ui.card()
        .classes("w-full p-3 cursor-pointer")
        .style(f"background-color: {COLORS['surface']}; border: 1px solid {COLORS['border']}")
        .on("click", lambda _e, url=result.url: ui.navigate.to(url))
    ):
        with ui.row().classes("items-center gap-2 mb-1"):
            ui.icon(icon).style(f"color: {COLORS['primary']}")
            ui.label(result.title).classes("text-base font-bold")
            ui.badge(result_label(result)).props("outline").classes("text-xs")
            if created_at:
                ui.label(format_date(created_at)).classes("text-xs").style(
                    f"color: {COLORS['text_muted']}"
                )

        if result.snippet:
            ui.html(result.snippet).classes("text-sm")

        render_tag_links(result.tags)
