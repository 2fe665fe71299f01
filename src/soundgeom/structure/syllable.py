"""Syllables: onset, nucleus and coda, with a level of stress.

The nucleus and coda together form the rhyme. Stress only means
something relative to the other syllables of the same word, so it is not
rendered by ``Syllable.symbols()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from soundgeom.errors import BadSyllableStructureError
from soundgeom.features.classes import is_vowel
from soundgeom.features.phoneme import Phoneme
from soundgeom.structure.stress import Stress


@dataclass(frozen=True)
class Syllable:
    """An immutable syllable.

    Exactly one phoneme, the nucleus, is a vowel. Construction rejects a
    non-vowel nucleus and any vowel in the onset or coda.

    Attributes:
        nucleus: The syllabic phoneme.
        onset: Phonemes before the nucleus, in order.
        coda: Phonemes after the nucleus, in order.
        stress: Lexical stress, or None where it carries no meaning.
    """

    nucleus: Phoneme
    onset: tuple[Phoneme, ...] = field(default_factory=tuple)
    coda: tuple[Phoneme, ...] = field(default_factory=tuple)
    stress: Stress | None = None

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the syllable stays hashable.
        object.__setattr__(self, "onset", tuple(self.onset))
        object.__setattr__(self, "coda", tuple(self.coda))

        if not is_vowel(self.nucleus):
            raise BadSyllableStructureError(
                f"{self.nucleus.symbol}: nucleus must be syllabic"
            )
        for part, phonemes in (("onset", self.onset), ("coda", self.coda)):
            for p in phonemes:
                if is_vowel(p):
                    raise BadSyllableStructureError(
                        f"{p.symbol}: second syllabic phoneme in {part}, "
                        f"nucleus is already occupied by {self.nucleus.symbol}"
                    )

    def rhyme(self) -> tuple[Phoneme, ...]:
        """Nucleus followed by coda."""
        return (self.nucleus, *self.coda)

    def phonemes(self) -> tuple[Phoneme, ...]:
        """Onset, nucleus and coda flattened into one sequence."""
        return (*self.onset, self.nucleus, *self.coda)

    def symbols(self) -> str:
        """The syllable's phoneme symbols, without stress."""
        return "".join(p.symbol for p in self.phonemes())

    def __repr__(self) -> str:
        stress = self.stress.name if self.stress is not None else None
        return f"Syllable({self.symbols()!r}, stress={stress})"
