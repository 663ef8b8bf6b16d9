# emoji_index/suggest.py
"""
Editor-style emoji suggestions on top of EmojiIndex.

  line "I feel :hap|"  -> find_trigger() -> query "hap"
  query "hap"          -> EmojiSuggester.suggest() -> ["😊 (happy)", ...]
  picked "😊 (happy)"  -> EmojiSuggester.accept() -> popularity +1

Language is picked per query: any Cyrillic letter means russian,
otherwise the configured default language.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from emoji_index.core.index import EmojiIndex
from emoji_index.popularity import PopularityTracker
from emoji_index.utils.logger_utils import Log

CYRILLIC_LANGUAGE = "russian"
_cyrillic_re = re.compile(r"[а-яА-ЯёЁ]")
_suggestion_re = re.compile(r"^(.*) \((.*)\)$")

RANDOM_EMOJIS = ["😀", "😂", "🥰", "😎", "🤔", "👍", "🎉", "✨", "🔥", "❤️"]


@dataclass(frozen=True)
class TriggerMatch:
    start: int  # column of the trigger character
    end: int    # cursor column
    query: str


def detect_language(query: str, default: str = "english") -> str:
    return CYRILLIC_LANGUAGE if _cyrillic_re.search(query) else default


def find_trigger(line: str, cursor: int, trigger_char: str = ":") -> Optional[TriggerMatch]:
    """
    Look for `trigger_char` followed by letters/spaces running up to the cursor.
    Returns None when the text before the cursor does not end in a trigger.
    """
    if not trigger_char:
        return None
    before = line[:cursor]
    pattern = re.compile(re.escape(trigger_char) + r"([a-zA-Zа-яА-ЯёЁ ]*)$")
    m = pattern.search(before)
    if not m:
        return None
    return TriggerMatch(
        start=before.rfind(trigger_char),
        end=cursor,
        query=m.group(1).strip(),
    )


def random_emoji(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(RANDOM_EMOJIS)


def glyph_of(value: str, show_keywords: bool = True) -> str:
    """Recover the emoji from a formatted suggestion string."""
    if not show_keywords:
        return value
    m = _suggestion_re.match(value)
    return m.group(1) if m else value.split(" ")[0]


class EmojiSuggester:
    """
    Turns index matches into a flat, popularity-sorted list of emoji
    suggestions. Every glyph appears once, labelled with the first
    keyword that produced it.
    """

    def __init__(
        self,
        index: EmojiIndex,
        popularity: Optional[PopularityTracker] = None,
        *,
        default_language: str = "english",
        show_keywords: bool = True,
        max_suggestions: int = 10,
    ):
        self.index = index
        self.popularity = popularity or PopularityTracker()
        self.default_language = default_language
        self.show_keywords = show_keywords
        self.max_suggestions = max_suggestions

    @classmethod
    def from_config(cls, index: EmojiIndex, cfg, popularity: Optional[PopularityTracker] = None):
        return cls(
            index,
            popularity,
            default_language=cfg.get("default_language"),
            show_keywords=cfg.get("show_keywords"),
            max_suggestions=cfg.get("max_suggestions"),
        )

    def suggest(self, query: str) -> List[str]:
        if not query:
            return []
        language = detect_language(query, self.default_language)
        try:
            matches = self.index.search(query, language)
        except Exception as e:
            # a broken index must never take the editor down with it
            Log.error(f"[Suggester] search failed for {query!r}: {e}")
            return []

        first_keyword: Dict[str, str] = {}
        for keyword, glyphs in matches:
            for glyph in glyphs:
                first_keyword.setdefault(glyph, keyword)

        # sorted() is stable: equal popularity keeps index order
        ranked = sorted(first_keyword.items(), key=lambda kv: -self.popularity.count(kv[0]))
        if self.max_suggestions > 0:
            ranked = ranked[: self.max_suggestions]

        if self.show_keywords:
            return [f"{glyph} ({keyword})" for glyph, keyword in ranked]
        return [glyph for glyph, _ in ranked]

    def accept(self, value: str) -> str:
        """Record that a suggestion was picked. Returns the emoji to insert."""
        glyph = glyph_of(value, self.show_keywords)
        self.popularity.record(glyph)
        return glyph
