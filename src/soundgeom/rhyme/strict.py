"""Strict rhyme: equality between parts of syllables.

Two syllables either do or do not match; stress is not compared.
"""

from __future__ import annotations

from soundgeom.structure.syllable import Syllable


def rhymes(syl1: Syllable, syl2: Syllable) -> bool:
    """Whether the rhymes (nucleus + coda) are identical."""
    return syl1.rhyme() == syl2.rhyme()


def assonates(syl1: Syllable, syl2: Syllable) -> bool:
    """Whether the nuclei are identical."""
    return syl1.nucleus == syl2.nucleus


def alliterates(syl1: Syllable, syl2: Syllable) -> bool:
    """Whether the onsets are identical. Two empty onsets match."""
    return syl1.onset == syl2.onset
