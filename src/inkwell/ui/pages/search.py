"""Search page with FTS5 full-text search."""

from __future__ import annotations

from nicegui import ui
from result import Err

from inkwell.ui.components.search_result import render_search_result
from inkwell.ui.deps import get_services
from inkwell.ui.layout import error_banner, page_layout, search_box
from inkwell.ui.theme import COLORS


def results_summary(query: str, total: int) -> str:
    if total == 1:
        return f'1 result for "{query}"'
    return f'{total} results for "{query}"'


def setup() -> None:
    """Register the search page."""

    @ui.page("/search")
    async def search_page(q: str = "") -> None:
        svc = get_services()

        with page_layout("Search"):
            ui.label("Search").classes("text-2xl font-bold")
            search_box(q)

            result = await svc.search_service.search(q)
            if isinstance(result, Err):
                error_banner(result.err_value)
                return

            search_results = result.ok_value
            ui.label(results_summary(search_results.query, search_results.total_count)).classes(
                "text-sm"
            ).style(f"color: {COLORS['text_muted']}")

            if not search_results.results:
                ui.label("No results found").classes("opacity-60")
                return

            for sr in search_results.results:
                render_search_result(sr)
