"""WordParser: build a Word from a word description and an accent.

A word description is dictionary-style IPA::

    ˈhɛ.lo͡ʊ      primary stress on the first of two syllables
    1hɛ3lo͡ʊ      the same, using the numeric stress notation
    ˈbʌ.tə˞      rhotic vowel written with the rhotic hook

Syllable markers are 'ˈ' and '1' (stressed), 'ˌ' and '2' (secondary),
'.' and '3' (unstressed) and '4' (reduced). Because [syllabic] is a
feature, the parser needs no other cues: every vowel becomes the nucleus
of the current syllable, consonants before it form the onset and
consonants after it form the coda.

Parsing is a single forward scan with no backtracking. It either returns
a complete Word or raises one WordParseError for the first problem found.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from soundgeom.errors import (
    BadSyllableStructureError,
    EmptyDescriptionError,
    UnknownSymbolError,
    WordParseError,
)
from soundgeom.features.classes import is_vowel
from soundgeom.features.phoneme import Phoneme
from soundgeom.parse.graphemes import iter_symbols
from soundgeom.structure.stress import STRESS_MARKERS, Stress
from soundgeom.structure.syllable import Syllable
from soundgeom.structure.word import Word

logger = logging.getLogger(__name__)


Lookup = Callable[[str], "Phoneme | None"]


class ParserState(Enum):
    """Where the scan is within the current syllable."""

    BEFORE_FIRST_SYLLABLE = "before_first_syllable"
    IN_ONSET = "in_onset"
    NUCLEUS_REACHED = "nucleus_reached"


@dataclass
class _ProtoSyllable:
    """A syllable under construction; the nucleus is unknown until reached."""

    stress: Stress
    onset: list[Phoneme] = field(default_factory=list)
    nucleus: Phoneme | None = None
    coda: list[Phoneme] = field(default_factory=list)


class WordParser:
    """Parses word descriptions against one accent.

    Args:
        lookup: Maps a symbol to its phoneme, or None if the accent has
            no such symbol. Must be free of side effects; it is called
            once per sound symbol, left to right.
    """

    def __init__(self, lookup: Lookup) -> None:
        if not callable(lookup):
            raise ValueError(f"lookup must be callable, got {type(lookup).__name__}")
        self._lookup = lookup

    def parse(self, description: str) -> Word:
        """Parse ``description`` into a Word.

        Raises:
            EmptyDescriptionError: If ``description`` is empty.
            UnknownSymbolError: If the accent has no phoneme for a symbol.
            BadSyllableStructureError: If a syllable has no nucleus or two,
                or a combining character is malformed.
        """
        try:
            word = self._parse(description)
        except WordParseError as exc:
            logger.debug("Rejected word description %r: %s", description, exc)
            raise
        logger.debug(
            "Parsed %r into %d syllable(s)", description, len(word.syllables)
        )
        return word

    def _parse(self, description: str) -> Word:
        if not description:
            raise EmptyDescriptionError()

        proto_word: list[_ProtoSyllable] = []
        state = ParserState.BEFORE_FIRST_SYLLABLE

        for position, unit in iter_symbols(description):
            if unit in STRESS_MARKERS:
                proto_word.append(_ProtoSyllable(stress=Stress.from_marker(unit)))
                state = ParserState.IN_ONSET
                continue

            # No leading marker: the first syllable is implicitly unstressed.
            if state is ParserState.BEFORE_FIRST_SYLLABLE:
                proto_word.append(_ProtoSyllable(stress=Stress.UNSTRESSED))
                state = ParserState.IN_ONSET

            phoneme = self._lookup(unit)
            if phoneme is None:
                raise UnknownSymbolError(unit, position)

            current = proto_word[-1]
            if is_vowel(phoneme):
                if state is ParserState.NUCLEUS_REACHED:
                    raise BadSyllableStructureError(
                        f"{phoneme.symbol}: nucleus is already occupied by "
                        f"{current.nucleus.symbol}"
                    )
                current.nucleus = phoneme
                state = ParserState.NUCLEUS_REACHED
            elif state is ParserState.IN_ONSET:
                current.onset.append(phoneme)
            else:
                current.coda.append(phoneme)

        return self._build(proto_word)

    @staticmethod
    def _build(proto_word: list[_ProtoSyllable]) -> Word:
        if not proto_word:
            raise BadSyllableStructureError("word description has no syllables")

        for index, proto in enumerate(proto_word, start=1):
            if proto.nucleus is None:
                raise BadSyllableStructureError(f"syllable {index} has no nucleus")

        # Stress is relative between syllables; a lone syllable has none.
        keep_stress = len(proto_word) > 1
        return Word(
            tuple(
                Syllable(
                    nucleus=proto.nucleus,
                    onset=tuple(proto.onset),
                    coda=tuple(proto.coda),
                    stress=proto.stress if keep_stress else None,
                )
                for proto in proto_word
            )
        )


def from_accent(lookup: Lookup, description: str) -> Word:
    """Parse ``description`` using an accent's lookup function."""
    return WordParser(lookup).parse(description)
