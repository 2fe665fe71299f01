"""Words: ordered sequences of syllables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from soundgeom.features.phoneme import Phoneme
from soundgeom.structure.stress import SYLLABLE_BREAK, Stress
from soundgeom.structure.syllable import Syllable


@dataclass(frozen=True)
class Word:
    """An immutable word, i.e. the pronunciation behind a written word.

    Lexical stress is relative across syllables, so a one-syllable word
    has no meaningful stress: ``stresses()`` and ``symbols()`` ignore
    whatever value that syllable stores.

    Attributes:
        syllables: The word's syllables, in order.
    """

    syllables: tuple[Syllable, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "syllables", tuple(self.syllables))

    def __iter__(self) -> Iterator[Syllable]:
        return iter(self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    def __getitem__(self, index: int) -> Syllable:
        return self.syllables[index]

    @property
    def has_stress(self) -> bool:
        """Whether stress is meaningful for this word (two or more syllables)."""
        return len(self.syllables) > 1

    def phonemes(self) -> tuple[Phoneme, ...]:
        """All phonemes in order. Syllable structure is lost."""
        return tuple(p for syl in self.syllables for p in syl.phonemes())

    def stresses(self) -> list[Stress]:
        """Stress of each syllable that has one."""
        if not self.has_stress:
            return []
        return [syl.stress for syl in self.syllables if syl.stress is not None]

    def symbols(self) -> str:
        """Render the syllabified word, e.g. 'ˈpʌmp.kɪn'.

        Syllables are separated by '.', or by the IPA stress mark of the
        following syllable when it has one. The first syllable is only
        prefixed when it carries a stress mark.
        """
        parts: list[str] = []
        for i, syl in enumerate(self.syllables):
            stress = syl.stress if self.has_stress else None
            if stress is None:
                stress = Stress.UNSTRESSED
            separator = stress.symbol or SYLLABLE_BREAK
            if i != 0 or separator != SYLLABLE_BREAK:
                parts.append(separator)
            parts.append(syl.symbols())
        return "".join(parts)

    def __str__(self) -> str:
        return self.symbols()
