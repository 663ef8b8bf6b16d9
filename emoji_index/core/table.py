# table.py - one language's keyword -> emoji table with prefix lookup
# Keywords are kept in a sorted list next to the dict so prefix scans are a
# bisect plus a short walk, and come out in lexicographic order.

from __future__ import annotations

from bisect import bisect_left
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

Keyword = str
EmojiSet = List[str]
Match = Tuple[Keyword, EmojiSet]


class LanguageTable:
    """
    Immutable-after-build mapping of lowercase keyword -> ordered glyph list.
    Built once from a parsed dataset, then only read. Updating a language
    means building a new table and swapping it in.
    """

    __slots__ = ("_entries", "_sorted")

    def __init__(self, entries: Optional[Mapping[Keyword, EmojiSet]] = None) -> None:
        self._entries: Dict[Keyword, EmojiSet] = {}
        for keyword, glyphs in (entries or {}).items():
            if glyphs:
                self._entries[keyword.lower()] = list(glyphs)
        self._sorted: List[Keyword] = sorted(self._entries)

    # lookups -------------------------------------------------------------
    def get(self, keyword: str) -> Optional[EmojiSet]:
        glyphs = self._entries.get(keyword.lower())
        return list(glyphs) if glyphs is not None else None

    def iter_prefix(self, prefix: str) -> Iterator[Match]:
        """
        Yield (keyword, glyphs) for every keyword starting with `prefix`,
        in lexicographic order. Includes the keyword equal to `prefix`.
        """
        prefix = prefix.lower()
        i = bisect_left(self._sorted, prefix)
        while i < len(self._sorted):
            keyword = self._sorted[i]
            if not keyword.startswith(prefix):
                break
            yield keyword, list(self._entries[keyword])
            i += 1

    # convenience/debugging -----------------------------------------------
    def keywords(self) -> List[Keyword]:
        return list(self._sorted)

    def to_dict(self) -> Dict[Keyword, EmojiSet]:
        return {k: list(v) for k, v in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, keyword: str) -> bool:
        return keyword.lower() in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LanguageTable):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"<LanguageTable keywords={len(self)}>"
