"""Tests for FTS5 query preparation."""

from __future__ import annotations

import pytest

from inkwell.data.query import prepare_fts_query, split_terms


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", "***", " * * "])
def test_blank_input_yields_empty_query(raw: str) -> None:
    assert prepare_fts_query(raw) == ""


def test_plain_terms_get_prefix_marker() -> None:
    assert prepare_fts_query("hello world") == "hello* world*"


def test_extra_whitespace_is_collapsed() -> None:
    assert prepare_fts_query("  hello \t  world  ") == "hello* world*"


def test_boolean_operators_are_untouched() -> None:
    assert prepare_fts_query("hello AND world") == "hello* AND world*"
    assert prepare_fts_query("cats OR dogs NOT birds") == "cats* OR dogs* NOT birds*"


def test_operator_match_is_case_insensitive_and_case_preserving() -> None:
    assert prepare_fts_query("hello and world") == "hello* and world*"
    assert prepare_fts_query("a Or b") == "a* Or b*"


def test_quoted_phrase_is_untouched() -> None:
    assert prepare_fts_query('"exact phrase"') == '"exact phrase"'
    assert prepare_fts_query('"exact"') == '"exact"'


def test_quoted_phrase_mixed_with_terms() -> None:
    assert prepare_fts_query('go "worker pool" tips') == 'go* "worker pool" tips*'


def test_embedded_wildcard_is_stripped_before_tokenizing() -> None:
    assert prepare_fts_query("a*b") == "ab*"
    assert prepare_fts_query("*go* lang**") == "go* lang*"


@pytest.mark.parametrize(
    "raw",
    ["a*b", "*", "x* *y", '"phrase*" term*', "AND* OR*", "multi***star*"],
)
def test_wildcards_only_appear_at_term_ends(raw: str) -> None:
    prepared = prepare_fts_query(raw)
    for term in split_terms(prepared):
        assert "*" not in term[:-1]


def test_unbalanced_quote_is_treated_as_plain_term() -> None:
    assert prepare_fts_query('"unbalanced') == '"unbalanced*'


def test_split_terms_keeps_quoted_phrases() -> None:
    assert split_terms('one "two three" four') == ["one", '"two three"', "four"]


def test_quote_glued_to_text_is_not_a_phrase() -> None:
    assert prepare_fts_query('"foo"bar baz') == '"foo"bar* baz*'
    assert split_terms('"a b"c') == ['"a', 'b"c']


def test_lone_quote_passes_through() -> None:
    assert prepare_fts_query('"') == '"'
    assert prepare_fts_query('go " tips') == 'go* " tips*'
