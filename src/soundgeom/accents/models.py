"""Accent: an immutable table from IPA symbols to phonemes.

Pure data container with no I/O. An accent supplies the ``lookup``
function the word parser consumes, plus introspection over its symbols
and phonemes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from soundgeom.features.classes import is_vowel
from soundgeom.features.feature_set import feature_set
from soundgeom.features.phoneme import Disegment, Phoneme
from soundgeom.parse.parser import WordParser
from soundgeom.structure.word import Word


@dataclass(frozen=True, eq=False)
class Accent:
    """The phoneme inventory of one accent.

    Attributes:
        code: Short identifier (e.g., 'genam').
        name: Human-readable name (e.g., 'General American English').
        sounds: Mapping from IPA symbol to phoneme. Copied into a
            read-only view on construction.
    """

    code: str
    name: str
    sounds: Mapping[str, Phoneme] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sounds", MappingProxyType(dict(self.sounds)))

    # --- Lookup ---

    def lookup(self, symbol: str) -> Phoneme | None:
        """Return the phoneme for ``symbol``, or None if there is none."""
        return self.sounds.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.sounds

    def symbols(self) -> frozenset[str]:
        """The set of IPA symbols in this accent."""
        return frozenset(self.sounds)

    def phonemes(self) -> frozenset[Phoneme]:
        """The set of phonemes in this accent."""
        return frozenset(self.sounds.values())

    # --- Symbol lists by class ---

    @property
    def consonants(self) -> list[str]:
        """Consonant symbols, in table order."""
        return [s for s, p in self.sounds.items() if not is_vowel(p)]

    @property
    def vowels(self) -> list[str]:
        """Vowel symbols (diphthongs and rhotic vowels included), in table order."""
        return [s for s, p in self.sounds.items() if is_vowel(p)]

    @property
    def size(self) -> int:
        """Number of symbols."""
        return len(self.sounds)

    # --- Parsing ---

    def parse(self, description: str) -> Word:
        """Parse a word description using this accent.

        Raises:
            WordParseError: If the description cannot be parsed.
        """
        return WordParser(self.lookup).parse(description)

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Export as a plain Python dict, suitable for JSON serialization."""
        return {
            "code": self.code,
            "name": self.name,
            "phonemes": [
                {
                    "symbol": symbol,
                    "class": "vowel" if is_vowel(p) else "consonant",
                    "disegment": isinstance(p, Disegment),
                    "features": sorted(f.value for f in feature_set(p)),
                }
                for symbol, p in self.sounds.items()
            ],
        }

    def __repr__(self) -> str:
        return f"Accent(code={self.code!r}, name={self.name!r}, symbols={self.size})"
