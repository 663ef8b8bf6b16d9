# errors.py - exception types raised by the emoji index


class EmojiIndexError(Exception):
    """Base class for everything the index raises."""


class MalformedInput(EmojiIndexError):
    """
    A load/update payload (or a language list) does not have the expected shape.
    Raised before any stored state is touched.
    """


class EncodingFailure(EmojiIndexError):
    """Search results could not be encoded for the caller."""
