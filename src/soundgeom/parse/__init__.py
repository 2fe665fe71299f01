"""Word description parsing: IPA text to structured words."""

from soundgeom.parse.graphemes import iter_symbols, split_symbols
from soundgeom.parse.parser import ParserState, WordParser, from_accent

__all__ = ["ParserState", "WordParser", "from_accent", "iter_symbols", "split_symbols"]
