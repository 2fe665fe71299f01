"""Levels of lexical stress for syllables.

Four levels are kept so that no distinction is lost; ``to_binary()``
reduces them to two where a coarser measure is wanted. The CMU
Pronouncing Dictionary's three levels map to Unstressed (0), Stressed (1)
and SecondaryStress (2).
"""

from __future__ import annotations

from enum import IntEnum


PRIMARY_STRESS_MARK = "ˈ"
SECONDARY_STRESS_MARK = "ˌ"
SYLLABLE_BREAK = "."


class BinaryStress(IntEnum):
    UNSTRESSED = 0
    STRESSED = 1


class Stress(IntEnum):
    """Four ordered levels: REDUCED < UNSTRESSED < SECONDARY < STRESSED."""

    REDUCED_STRESS = 0
    UNSTRESSED = 1
    SECONDARY_STRESS = 2
    STRESSED = 3

    def to_binary(self) -> BinaryStress:
        if self in (Stress.REDUCED_STRESS, Stress.UNSTRESSED):
            return BinaryStress.UNSTRESSED
        return BinaryStress.STRESSED

    @property
    def symbol(self) -> str | None:
        """IPA mark for this level, or None for the unmarked levels."""
        return _SYMBOLS.get(self)

    @classmethod
    def from_marker(cls, marker: str) -> Stress:
        """Map a syllable marker from a word description to a level.

        Raises:
            ValueError: If ``marker`` is not a stress or syllable marker.
        """
        try:
            return _MARKERS[marker]
        except KeyError:
            raise ValueError(
                f"Invalid stress marker: {marker!r}. "
                f"Must be one of {''.join(_MARKERS)!r}"
            ) from None


_SYMBOLS: dict[Stress, str] = {
    Stress.STRESSED: PRIMARY_STRESS_MARK,
    Stress.SECONDARY_STRESS: SECONDARY_STRESS_MARK,
}

# Reduced stress has no standard IPA mark, hence the numeric 1-4 notation.
_MARKERS: dict[str, Stress] = {
    PRIMARY_STRESS_MARK: Stress.STRESSED,
    SECONDARY_STRESS_MARK: Stress.SECONDARY_STRESS,
    SYLLABLE_BREAK: Stress.UNSTRESSED,
    "1": Stress.STRESSED,
    "2": Stress.SECONDARY_STRESS,
    "3": Stress.UNSTRESSED,
    "4": Stress.REDUCED_STRESS,
}

STRESS_MARKERS: frozenset[str] = frozenset(_MARKERS)
"""Every character that opens a new syllable in a word description."""
