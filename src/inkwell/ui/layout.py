"""Shared page layout with header and navigation."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from urllib.parse import quote, quote_plus

from nicegui import ui

from inkwell.ui.theme import COLORS, MARK_CSS

NAV_ITEMS = [
    ("Home", "/", "home"),
    ("Articles", "/articles", "article"),
    ("Notes", "/notes", "sticky_note_2"),
    ("Links", "/links", "link"),
    ("Photos", "/photos", "photo_camera"),
    ("Tags", "/tags", "sell"),
]

SITE_TITLE = "inkwell"


@contextmanager
def page_layout(title: str = SITE_TITLE) -> Generator[None]:
    """Shared page shell with header, nav links and a search box."""
    ui.page_title(title if title == SITE_TITLE else f"{title} · {SITE_TITLE}")
    ui.colors(
        primary=COLORS["primary"],
        secondary=COLORS["secondary"],
        accent=COLORS["accent"],
        positive=COLORS["success"],
        warning=COLORS["warning"],
        negative=COLORS["error"],
    )
    ui.add_css(MARK_CSS)

    with (
        ui.header()
        .classes("items-center justify-between px-4 q-py-sm")
        .style(f"background-color: {COLORS['surface']}; color: {COLORS['text']}")
    ):
        with ui.row().classes("items-center gap-2"):
            ui.icon("edit_note").classes("text-2xl").style(f"color: {COLORS['primary']}")
            ui.link(SITE_TITLE, "/").classes("text-lg font-bold no-underline")

        with ui.row().classes("items-center gap-1"):
            for label, path, icon in NAV_ITEMS:
                ui.button(
                    label, icon=icon, on_click=lambda _e=None, p=path: ui.navigate.to(p)
                ).props("flat dense").classes("text-xs")
            search_box(dense=True)

    with ui.column().classes("w-full max-w-3xl mx-auto p-4 gap-4"):
        yield


def search_box(value: str = "", *, dense: bool = False) -> None:
    """Query input that navigates to ``/search?q=...`` on enter."""

    def submit() -> None:
        ui.navigate.to(search_url(box.value or ""))

    box = (
        ui.input(placeholder="Search...", value=value)
        .props("outlined dense clearable" if dense else "outlined clearable")
        .on("keydown.enter", submit)
    )


def search_url(query: str) -> str:
    return f"/search?q={quote_plus(query)}"


def tag_url(name: str) -> str:
    return f"/tags/{quote(name, safe='')}"


def error_banner(message: str) -> None:
    """Display an error banner."""
    with (
        ui.card()
        .classes("w-full")
        .style(f"background-color: {COLORS['error']}22; border: 1px solid {COLORS['error']}")
    ):
        with ui.row().classes("items-center gap-2 p-2"):
            ui.icon("error").style(f"color: {COLORS['error']}")
            ui.label(message).style(f"color: {COLORS['error']}")
