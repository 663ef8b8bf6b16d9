"""
emoji_index.core

The index itself and everything it needs:
 - LanguageTable: one language's keyword -> glyph list table
 - EmojiIndex: the multi-language index and its search logic
 - dataset parsing and the JSON result codec
 - error types
"""

from .errors import EmojiIndexError, EncodingFailure, MalformedInput
from .table import LanguageTable
from .index import EmojiIndex
from .codec import SearchOutcome, encode_results, encode_or_empty, try_encode

__all__ = [
    "EmojiIndex",
    "LanguageTable",
    "EmojiIndexError",
    "MalformedInput",
    "EncodingFailure",
    "SearchOutcome",
    "encode_results",
    "encode_or_empty",
    "try_encode",
]
