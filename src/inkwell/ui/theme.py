"""Theme, color definitions, and display formatting utilities."""

from __future__ import annotations

from datetime import UTC, datetime

# ── Color palette: light theme with orange accents ──

COLORS = {
    "primary": "#E67E22",
    "primary_light": "#FFF3E0",
    "secondary": "#2D7FF9",
    "accent": "#16A085",
    "success": "#27AE60",
    "bg": "#FFFFFF",
    "surface": "#FAFAFA",
    "border": "#E0E0E0",
    "text": "#1A1A1A",
    "text_muted": "#999999",
    "highlight": "#FFE8C2",
    "error": "#E74C3C",
    "warning": "#F39C12",
}

POST_TYPE_ICONS = {
    "article": "article",
    "note": "sticky_note_2",
    "link": "link",
    "photo": "photo_camera",
}

MARK_CSS = f"""
mark {{
    background-color: {COLORS["highlight"]};
    color: {COLORS["text"]};
    padding: 0 2px;
    border-radius: 2px;
}}
"""


# ── Format helpers ──


def _parse_iso_datetime(iso_str: str) -> datetime | None:
    """Parse ISO or SQLite ``CURRENT_TIMESTAMP`` values and normalize to UTC."""
    value = iso_str.strip()
    if not value:
        return None

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    if " " in value and "T" not in value:
        value = value.replace(" ", "T")

    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        try:
            dt = datetime.fromisoformat(value[:19])
        except ValueError:
            return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_date(iso_str: str) -> str:
    """Format a timestamp as a publication date, e.g. "Mar 04, 2026"."""
    if not iso_str:
        return ""
    dt = _parse_iso_datetime(iso_str)
    if dt is None:
        return iso_str[:10]
    return dt.strftime("%b %d, %Y")


def post_type_label(post_type: str, *, plural: bool = False) -> str:
    """Display label for a post type: "article" -> "Article" / "Articles"."""
    if not post_type:
        return ""
    label = post_type[0].upper() + post_type[1:]
    return f"{label}s" if plural else label


def post_type_icon(post_type: str) -> str:
    return POST_TYPE_ICONS.get(post_type, "description")
