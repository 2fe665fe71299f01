"""Errors raised while building words from descriptions."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """The three causes a word description can be rejected for."""

    EMPTY_DESCRIPTION = "empty_description"
    UNKNOWN_SYMBOL = "unknown_symbol"
    BAD_SYLLABLE_STRUCTURE = "bad_syllable_structure"


class WordParseError(ValueError):
    """A word description could not be turned into a Word.

    The message is human readable and meant to be shown as-is; use
    ``kind`` (or the subclass) to tell causes apart.
    """

    kind: ParseErrorKind


class EmptyDescriptionError(WordParseError):
    kind = ParseErrorKind.EMPTY_DESCRIPTION

    def __init__(self) -> None:
        super().__init__("word description is empty")


class UnknownSymbolError(WordParseError):
    """The accent has no phoneme for a symbol in the description.

    Attributes:
        symbol: The lookup key that failed, combining characters included.
        position: Character offset of the symbol in the description.
    """

    kind = ParseErrorKind.UNKNOWN_SYMBOL

    def __init__(self, symbol: str, position: int | None = None) -> None:
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"unknown symbol {symbol!r}{where} has no phoneme")


class BadSyllableStructureError(WordParseError):
    """A syllable is missing its nucleus, has two, or is malformed.

    Attributes:
        reason: Description of what is wrong with the syllable.
    """

    kind = ParseErrorKind.BAD_SYLLABLE_STRUCTURE

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


__all__ = [
    "BadSyllableStructureError",
    "EmptyDescriptionError",
    "ParseErrorKind",
    "UnknownSymbolError",
    "WordParseError",
]
