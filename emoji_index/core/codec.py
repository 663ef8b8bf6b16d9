# codec.py - text boundary for search results and language lists
#
# Results travel as a JSON array of [keyword, [glyph, ...]] pairs.
# Hosts that cannot handle an error get "[]" on encode failure
# (encode_or_empty); hosts that want to tell "no matches" from "broken"
# use try_encode and look at SearchOutcome.ok.

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from emoji_index.core.errors import EncodingFailure, MalformedInput
from emoji_index.utils.logger_utils import Log

Match = Tuple[str, List[str]]
EMPTY_RESULT = "[]"


@dataclass(frozen=True)
class SearchOutcome:
    """Ok(json text) or Err(EncodingFailure). Never both."""
    value: Optional[str] = None
    error: Optional[EncodingFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_empty(self) -> str:
        return self.value if self.ok and self.value is not None else EMPTY_RESULT


def encode_results(results: Sequence[Match]) -> str:
    """Encode matches as JSON. Raises EncodingFailure if that is impossible."""
    try:
        return json.dumps(
            [[keyword, list(glyphs)] for keyword, glyphs in results],
            ensure_ascii=False,
        )
    except (TypeError, ValueError) as e:
        raise EncodingFailure(f"could not encode {len(results)} results: {e}") from e


def try_encode(results: Sequence[Match]) -> SearchOutcome:
    try:
        return SearchOutcome(value=encode_results(results))
    except EncodingFailure as e:
        return SearchOutcome(error=e)


def encode_or_empty(results: Sequence[Match]) -> str:
    """Encode matches, degrading any failure to an empty JSON list."""
    outcome = try_encode(results)
    if not outcome.ok:
        Log.error(f"[codec] {outcome.error}; returning empty result")
    return outcome.unwrap_or_empty()


def decode_results(text: str) -> List[Match]:
    """Inverse of encode_results, for hosts reading the JSON back."""
    try:
        raw = json.loads(text)
    except ValueError as e:
        raise MalformedInput(f"results: not valid JSON ({e})") from e
    if not isinstance(raw, list):
        raise MalformedInput("results: expected a list")
    out: List[Match] = []
    for item in raw:
        if (
            not isinstance(item, list)
            or len(item) != 2
            or not isinstance(item[0], str)
            or not isinstance(item[1], list)
        ):
            raise MalformedInput(f"results: bad entry {item!r}")
        out.append((item[0], [str(g) for g in item[1]]))
    return out


def decode_language_list(languages: Union[str, bytes, Sequence[str]]) -> List[str]:
    """
    Accept a JSON list of language ids (text) or an actual sequence of strings.
    Raises MalformedInput for anything else. An empty list is fine.
    """
    if isinstance(languages, (str, bytes, bytearray)):
        try:
            languages = json.loads(languages)
        except ValueError as e:
            raise MalformedInput(f"language list: not valid JSON ({e})") from e
    if not isinstance(languages, (list, tuple)):
        raise MalformedInput(
            f"language list: expected a list of strings, got {type(languages).__name__}"
        )
    for lang in languages:
        if not isinstance(lang, str):
            raise MalformedInput(f"language list: {lang!r} is not a string")
    return list(languages)
