"""Markdown → HTML conversion for post and page bodies."""

from __future__ import annotations

import markdown

_MD = markdown.Markdown(extensions=["fenced_code", "tables", "nl2br", "toc"])


def render_markdown(text: str) -> str:
    """Convert markdown text to an HTML fragment."""
    _MD.reset()
    return _MD.convert(text)


def excerpt(text: str, limit: int = 280) -> str:
    """First paragraph of ``text``, cut at a word boundary past ``limit`` chars."""
    paragraph = text.strip().split("\n\n", 1)[0].strip()
    if len(paragraph) <= limit:
        return paragraph
    cut = paragraph[:limit].rsplit(" ", 1)[0]
    return f"{cut}..."
