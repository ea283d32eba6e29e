"""Tests for CSV normalizer functions."""

from civic_routing.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    parse_keywords,
)

# ─── normalize_column_name ───────────────────────────────────────────


def test_strip_trailing_spaces():
    assert normalize_column_name("  Latitude  ") == "latitude"


def test_remove_bom():
    assert normalize_column_name("\ufeffid") == "id"


def test_replace_spaces_with_underscore():
    assert normalize_column_name("Department Name") == "department_name"


def test_non_breaking_space():
    assert normalize_column_name("Department\u00a0Name") == "department_name"


def test_multiple_spaces():
    assert normalize_column_name("Department   Id") == "department_id"


def test_hyphen_separated():
    assert normalize_column_name("department-name ") == "department_name"


def test_punctuation_dropped():
    assert normalize_column_name("Lat.") == "lat"


def test_bom_plus_trailing_space():
    """Combined BOM + trailing spaces (common in spreadsheet exports)."""
    assert normalize_column_name("\ufeff  Name  ") == "name"


# ─── clean_string ────────────────────────────────────────────────────


def test_clean_string_strips():
    assert clean_string("  hello  ") == "hello"


def test_clean_string_empty_to_none():
    assert clean_string("   ") is None
    assert clean_string("") is None


def test_clean_string_none():
    assert clean_string(None) is None


# ─── parse_keywords ──────────────────────────────────────────────────


def test_parse_keywords_comma_separated():
    assert parse_keywords("garbage, trash, waste") == ("garbage", "trash", "waste")


def test_parse_keywords_semicolon():
    assert parse_keywords("garbage;trash") == ("garbage", "trash")


def test_parse_keywords_keeps_phrases():
    assert parse_keywords("no water,  street   light") == ("no water", "street light")


def test_parse_keywords_lowercased_and_deduplicated():
    assert parse_keywords("Leak, LEAK, pipe") == ("leak", "pipe")


def test_parse_keywords_empty():
    assert parse_keywords("") == ()
    assert parse_keywords(None) == ()
    assert parse_keywords(" , ; ") == ()
