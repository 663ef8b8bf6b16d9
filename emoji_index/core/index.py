# index.py - multi-language keyword -> emoji index
#
# EmojiIndex keeps one LanguageTable per language id. Searches return the
# exact keyword match first, then every other keyword sharing the query as
# a prefix, in lexicographic order. All ids and keywords are lowercase.

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from emoji_index.core.codec import decode_language_list, encode_or_empty
from emoji_index.core.dataset import Payload, parse_dataset, parse_language
from emoji_index.core.errors import MalformedInput
from emoji_index.core.table import LanguageTable
from emoji_index.utils.logger_utils import Log

Match = Tuple[str, List[str]]


class EmojiIndex:
    """
    In-memory keyword -> emoji lookup, partitioned by language.

    Public API:
      initialize(dataset)            replace everything
      update_language(lang, data)    insert/replace one language
      remove_language(lang)          drop one language (no-op if absent)
      search(query, lang)
      search_multiple(query, langs)
      get_languages() / get_stats()

    Mutations parse and validate into new tables first and only then swap
    them in, so a MalformedInput leaves the index exactly as it was.
    Not thread-safe for writers; hosts serialize mutations themselves.
    """

    def __init__(self, dataset: Optional[Payload] = None) -> None:
        self._languages: Dict[str, LanguageTable] = {}
        if dataset is not None:
            self.initialize(dataset)

    # Load/update -----------------------------------------------------------
    def initialize(self, dataset: Payload) -> None:
        """Replace the whole index with `dataset` ({lang: {keyword: "glyphs"}})."""
        try:
            parsed = parse_dataset(dataset)
        except MalformedInput as e:
            Log.warning(f"[EmojiIndex] initialize rejected: {e}")
            raise
        fresh = {lang: LanguageTable(entries) for lang, entries in parsed.items()}
        self._languages = fresh
        Log.info(
            f"[EmojiIndex] initialized {len(fresh)} languages, "
            f"{sum(len(t) for t in fresh.values())} keywords"
        )

    def update_language(self, language_id: str, language_data: Payload) -> None:
        """Insert or wholly replace one language's table."""
        lang = language_id.lower()
        try:
            entries = parse_language(language_data, lang)
        except MalformedInput as e:
            Log.warning(f"[EmojiIndex] update of {lang!r} rejected: {e}")
            raise
        table = LanguageTable(entries)
        self._languages[lang] = table
        Log.info(f"[EmojiIndex] updated {lang!r}: {len(table)} keywords")

    def remove_language(self, language_id: str) -> None:
        lang = language_id.lower()
        if self._languages.pop(lang, None) is not None:
            Log.info(f"[EmojiIndex] removed {lang!r}")

    # Search ----------------------------------------------------------------
    def search(self, query: str, language_id: str) -> List[Match]:
        """
        Matches for `query` in one language: exact keyword first, then prefix
        matches in lexicographic order. Unknown language -> [].
        """
        return self.search_multiple(query, [language_id])

    def search_multiple(
        self, query: str, language_ids: Union[str, Sequence[str]]
    ) -> List[Match]:
        """
        Search several languages in the given order into one result list.
        A keyword already emitted by an earlier language is not repeated.
        Unknown languages are skipped. `language_ids` may also be JSON text.
        """
        langs = decode_language_list(language_ids)
        query = query.lower()
        results: List[Match] = []
        seen: Set[str] = set()

        for lang in langs:
            table = self._languages.get(lang.lower())
            if table is None:
                continue

            # exact match first
            exact = table.get(query)
            if exact is not None and query not in seen:
                results.append((query, exact))
                seen.add(query)

            # then prefix matches, skipping the exact keyword itself
            for keyword, glyphs in table.iter_prefix(query):
                if keyword == query or keyword in seen:
                    continue
                results.append((keyword, glyphs))
                seen.add(keyword)

        return results

    # JSON boundary ----------------------------------------------------------
    def search_json(self, query: str, language_id: str) -> str:
        """search() encoded as JSON; encode failures degrade to "[]"."""
        return encode_or_empty(self.search(query, language_id))

    def search_multiple_json(self, query: str, language_ids: Union[str, Sequence[str]]) -> str:
        """search_multiple() encoded as JSON. Still raises MalformedInput for a bad list."""
        return encode_or_empty(self.search_multiple(query, language_ids))

    # Introspection ---------------------------------------------------------
    def get_languages(self) -> Set[str]:
        return set(self._languages)

    def get_stats(self) -> Dict[str, int]:
        """Keyword count per loaded language."""
        return {lang: len(table) for lang, table in self._languages.items()}

    def table(self, language_id: str) -> Optional[LanguageTable]:
        return self._languages.get(language_id.lower())

    def __contains__(self, language_id: str) -> bool:
        return language_id.lower() in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return f"<EmojiIndex languages={sorted(self._languages)}>"
