"""Tests for identifier helpers."""

from bsbind.util import dedupe, lower_first, normalize_ident, strip_quotes, upper_first


def test_dedupe_keeps_first_occurrence_in_order():
    assert dedupe(["A", "B", "A", "C", "B"]) == ["A", "B", "C"]


def test_dedupe_empty_and_unique():
    assert dedupe([]) == []
    assert dedupe(["x", "y"]) == ["x", "y"]


def test_normalize_quoted_hyphenated():
    assert normalize_ident('"foo-bar"') == "foo_bar"
    assert normalize_ident("'foo-bar'") == "foo_bar"


def test_normalize_scoped_package():
    assert normalize_ident('"@types/node"') == "_types_node"


def test_normalize_is_idempotent():
    for name in ['"foo-bar"', "plain", "'a.b-c'", '"\'x\'"', '""', "a-", ""]:
        once = normalize_ident(name)
        assert normalize_ident(once) == once


def test_strip_quotes_only_matching_pair():
    assert strip_quotes('"abc"') == "abc"
    assert strip_quotes("'abc\"") == "'abc\""
    assert strip_quotes('"') == '"'


def test_first_letter_case():
    assert lower_first("Foo") == "foo"
    assert upper_first("number_or_string") == "Number_or_string"
    assert lower_first("") == ""
    assert upper_first("") == ""
