# tests/test_dataset_table.py
# payload parsing and the per-language table

import pytest

from emoji_index.core.dataset import parse_dataset, parse_language, split_glyphs
from emoji_index.core.errors import MalformedInput
from emoji_index.core.table import LanguageTable


def test_split_glyphs_any_whitespace():
    assert split_glyphs("🐱 🐈") == ["🐱", "🐈"]
    assert split_glyphs("\t🐱\n\n🐈  ") == ["🐱", "🐈"]
    assert split_glyphs("   ") == []
    # zwj sequences and variation selectors stay one token
    assert split_glyphs("👨‍👩‍👧 ❤️") == ["👨‍👩‍👧", "❤️"]


def test_parse_dataset_lowercases():
    out = parse_dataset({"ENGLISH": {"Cat": "🐱", "DOG": "🐶 🐕"}})
    assert out == {"english": {"cat": ["🐱"], "dog": ["🐶", "🐕"]}}


def test_parse_dataset_case_collision_last_wins():
    out = parse_language({"Cat": "🐱", "cat": "😺"})
    assert out == {"cat": ["😺"]}


def test_parse_language_bytes():
    assert parse_language('{"cat": "🐱"}'.encode("utf-8")) == {"cat": ["🐱"]}


def test_parse_errors_name_the_problem():
    with pytest.raises(MalformedInput, match="'cat'"):
        parse_language({"cat": 1}, "english")
    with pytest.raises(MalformedInput, match="not valid JSON"):
        parse_dataset("{")
    with pytest.raises(MalformedInput, match="expected an object"):
        parse_dataset("null")
    with pytest.raises(MalformedInput):
        parse_dataset({1: {}})


def test_table_prefix_iteration():
    t = LanguageTable({"cat": ["🐱"], "car": ["🚗"], "cow": ["🐮"], "ca": ["x"]})
    assert [k for k, _ in t.iter_prefix("ca")] == ["ca", "car", "cat"]
    assert [k for k, _ in t.iter_prefix("CA")] == ["ca", "car", "cat"]
    assert list(t.iter_prefix("z")) == []
    assert len(t) == 4
    assert "CAT" in t
    assert t.get("Cow") == ["🐮"]
    assert t.get("horse") is None


def test_table_skips_empty_sets():
    t = LanguageTable({"cat": ["🐱"], "void": []})
    assert t.keywords() == ["cat"]
    assert t.to_dict() == {"cat": ["🐱"]}


def test_table_get_returns_copy():
    t = LanguageTable({"cat": ["🐱"]})
    t.get("cat").append("x")
    assert t.get("cat") == ["🐱"]
