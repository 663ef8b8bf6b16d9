# dataset.py - parse and validate raw keyword->emoji payloads into tables
#
# Payload shapes:
#   full dataset:   {"english": {"cat": "🐱 🐈", ...}, "russian": {...}}
#   one language:   {"cat": "🐱 🐈", "car": "🚗"}
# Either shape may arrive as JSON text or as an already decoded mapping.
# Nothing here mutates an index; callers swap in the result afterwards.

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Union

from emoji_index.core.errors import MalformedInput

Keyword = str
EmojiSet = List[str]
Payload = Union[str, bytes, Mapping[str, Any]]


def split_glyphs(raw: str) -> EmojiSet:
    """Split a glyph cell on any whitespace run, dropping empty tokens."""
    return raw.split()


def _decode(payload: Payload, what: str) -> Mapping[str, Any]:
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except (ValueError, TypeError) as e:
            raise MalformedInput(f"{what}: not valid JSON ({e})") from e
    if not isinstance(payload, Mapping):
        raise MalformedInput(f"{what}: expected an object, got {type(payload).__name__}")
    return payload


def _build_table(entries: Mapping[str, Any], where: str) -> Dict[Keyword, EmojiSet]:
    table: Dict[Keyword, EmojiSet] = {}
    for keyword, cell in entries.items():
        if not isinstance(keyword, str):
            raise MalformedInput(f"{where}: keyword {keyword!r} is not a string")
        if not isinstance(cell, str):
            raise MalformedInput(
                f"{where}: value for {keyword!r} must be a string, got {type(cell).__name__}"
            )
        glyphs = split_glyphs(cell)
        if not glyphs:
            continue  # an empty glyph set is never stored
        table[keyword.lower()] = glyphs
    return table


def parse_language(payload: Payload, language: str = "<language>") -> Dict[Keyword, EmojiSet]:
    """
    Parse one language's {keyword: "glyph glyph"} map into a fresh table.
    Raises MalformedInput if the payload has the wrong shape.
    """
    entries = _decode(payload, f"language {language!r}")
    return _build_table(entries, f"language {language!r}")


def parse_dataset(payload: Payload) -> Dict[str, Dict[Keyword, EmojiSet]]:
    """
    Parse a full {language: {keyword: "glyph glyph"}} dataset.
    Returns {lowercased language: table}. Validates everything before returning.
    """
    top = _decode(payload, "dataset")
    tables: Dict[str, Dict[Keyword, EmojiSet]] = {}
    for language, entries in top.items():
        if not isinstance(language, str):
            raise MalformedInput(f"dataset: language id {language!r} is not a string")
        if not isinstance(entries, Mapping):
            raise MalformedInput(
                f"dataset: language {language!r} must map to an object, "
                f"got {type(entries).__name__}"
            )
        tables[language.lower()] = _build_table(entries, f"language {language!r}")
    return tables
