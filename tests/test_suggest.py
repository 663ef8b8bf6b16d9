# tests/test_suggest.py
import random
from unittest.mock import MagicMock

import pytest

from emoji_index import EmojiIndex
from emoji_index.popularity import PopularityTracker
from emoji_index.suggest import (
    RANDOM_EMOJIS,
    EmojiSuggester,
    detect_language,
    find_trigger,
    glyph_of,
    random_emoji,
)


@pytest.fixture
def suggester():
    idx = EmojiIndex({
        "english": {"cat": "🐱 🐈", "catch": "🧤", "car": "🚗", "cathedral": "⛪ 🐱"},
        "russian": {"кот": "🐱 🐈", "кошка": "🐈"},
    })
    return EmojiSuggester(idx, PopularityTracker())


def test_detect_language():
    assert detect_language("кот") == "russian"
    assert detect_language("cat") == "english"
    assert detect_language("cat", "german") == "german"
    assert detect_language("catЁ") == "russian"


def test_find_trigger():
    m = find_trigger("I feel :hap", 11)
    assert (m.start, m.end, m.query) == (7, 11, "hap")
    assert find_trigger("I feel :hap", 11, ";") is None
    assert find_trigger("no trigger", 10) is None
    # digits break the match
    assert find_trigger("time :12", 8) is None
    # text after the cursor is ignored
    assert find_trigger(":cat and more", 4).query == "cat"
    assert find_trigger("привет :кот ", 12).query == "кот"
    # regex metacharacters in the trigger are literal
    assert find_trigger("a .sun", 6, ".").query == "sun"


def test_suggest_unique_glyphs_first_keyword_wins(suggester):
    out = suggester.suggest("cat")
    assert out == ["🐱 (cat)", "🐈 (cat)", "🧤 (catch)", "⛪ (cathedral)"]


def test_suggest_cyrillic_uses_russian(suggester):
    assert suggester.suggest("ко") == ["🐱 (кот)", "🐈 (кот)"]


def test_suggest_popularity_order(suggester):
    suggester.popularity.record("⛪")
    suggester.popularity.record("⛪")
    suggester.popularity.record("🧤")
    out = suggester.suggest("cat")
    assert out == ["⛪ (cathedral)", "🧤 (catch)", "🐱 (cat)", "🐈 (cat)"]


def test_suggest_without_keywords_and_limit(suggester):
    suggester.show_keywords = False
    suggester.max_suggestions = 2
    assert suggester.suggest("cat") == ["🐱", "🐈"]


def test_suggest_empty_and_failures(suggester):
    assert suggester.suggest("") == []
    broken = MagicMock()
    broken.search.side_effect = RuntimeError("boom")
    assert EmojiSuggester(broken).suggest("cat") == []


def test_accept_records_popularity(suggester):
    assert suggester.accept("🚗 (car)") == "🚗"
    assert suggester.popularity.count("🚗") == 1
    suggester.show_keywords = False
    assert suggester.accept("🚗") == "🚗"
    assert suggester.popularity.count("🚗") == 2


def test_glyph_of():
    assert glyph_of("❤️ (heart eyes)") == "❤️"
    assert glyph_of("🐱", show_keywords=False) == "🐱"
    assert glyph_of("🐱 plain") == "🐱"


def test_random_emoji():
    assert random_emoji(random.Random(1)) in RANDOM_EMOJIS
    assert len(RANDOM_EMOJIS) == 10
