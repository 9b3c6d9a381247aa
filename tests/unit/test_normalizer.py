"""Unit tests for query normalization."""

from kcd_search.services.normalizer import normalize_text, prepare_query


def test_normalize_lowercases_and_removes_all_whitespace():
    assert normalize_text("  Type 2\tDiabetes\nMellitus ") == "type2diabetesmellitus"


def test_normalize_korean_with_spaces():
    assert normalize_text("당뇨 병") == "당뇨병"


def test_normalize_empty():
    assert normalize_text("   ") == ""


def test_prepare_query_trims():
    assert prepare_query("  당뇨  ") == "당뇨"


def test_prepare_query_blank_is_none():
    assert prepare_query("") is None
    assert prepare_query(" \t\n ") is None
    assert prepare_query(None) is None


def test_prepare_query_truncates_to_80():
    query = prepare_query("a" * 200)
    assert query == "a" * 80


def test_prepare_query_truncates_after_trim():
    query = prepare_query("   " + "b" * 81 + "   ")
    assert query == "b" * 80


def test_prepare_query_custom_length():
    assert prepare_query("abcdef", max_length=3) == "abc"


def test_prepare_query_keeps_inner_whitespace():
    assert prepare_query(" heart failure ") == "heart failure"
