"""
emoji_index - multi-language keyword -> emoji lookup.

    from emoji_index import EmojiIndex
    idx = EmojiIndex({"english": {"cat": "🐱 🐈", "car": "🚗"}})
    idx.search("ca", "english")   # [("car", ["🚗"]), ("cat", ["🐱", "🐈"])]
"""

from .core import EmojiIndex, EmojiIndexError, EncodingFailure, MalformedInput

__all__ = ["EmojiIndex", "EmojiIndexError", "EncodingFailure", "MalformedInput"]

__version__ = "0.1.0"
