"""FTS5 match-expression preparation."""

from __future__ import annotations

import re

PREFIX_MARKER = "*"
BOOLEAN_OPERATORS = frozenset({"AND", "OR", "NOT"})

# A double-quoted span bounded by whitespace stays one term even when it
# contains spaces; anything glued to a closing quote is a plain token.
_TERM_RE = re.compile(r'(?<!\S)"[^"]*"(?!\S)|\S+')


def prepare_fts_query(query: str) -> str:
    """Rewrite raw user input into a prefix-matching FTS5 expression.

    User-supplied ``*`` characters are stripped first, then every term that is
    neither a boolean operator nor a quoted phrase gets a trailing ``*``.

    Examples:
        "hello world"      -> "hello* world*"
        "hello AND world"  -> "hello* AND world*"
        '"exact phrase"'   -> '"exact phrase"'
        "a*b"              -> "ab*"
        "   "              -> ""
    """
    query = query.replace(PREFIX_MARKER, "").strip()
    if not query:
        return query

    terms: list[str] = []
    for term in split_terms(query):
        if term.upper() in BOOLEAN_OPERATORS or _is_quoted_phrase(term):
            terms.append(term)
        else:
            terms.append(term + PREFIX_MARKER)
    return " ".join(terms)


def split_terms(query: str) -> list[str]:
    """Split on whitespace, keeping whitespace-bounded quoted phrases intact."""
    return _TERM_RE.findall(query)


def _is_quoted_phrase(term: str) -> bool:
    return term.startswith('"') and term.endswith('"')
