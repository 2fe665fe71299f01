"""Natural classes of phonemes derived from their features.

Use these predicates to ask "is this phoneme an X (vowel, nasal,
fricative, ...)" instead of inspecting features ad hoc.

Every predicate except ``is_affricate`` holds for a Disegment when it
holds for either of its segments.
"""

from __future__ import annotations

from typing import Callable

from soundgeom.features.models import BinaryFeature, Segment, UnaryFeature
from soundgeom.features.phoneme import Disegment, Phoneme


_MARKED = BinaryFeature.MARKED
_UNMARKED = BinaryFeature.UNMARKED


def _any_segment(phoneme: Phoneme, predicate: Callable[[Segment], bool]) -> bool:
    return any(predicate(seg) for seg in phoneme.segments)


# --- Segment-level tests ---

def _vowel(seg: Segment) -> bool:
    return seg.syllabic == _MARKED


def _semivowel(seg: Segment) -> bool:
    return seg.syllabic == _UNMARKED and seg.consonantal == _UNMARKED


def _voiced(seg: Segment) -> bool:
    return seg.voice == _MARKED


def _stop(seg: Segment) -> bool:
    return seg.sonorant == _UNMARKED and seg.continuant == _UNMARKED


def _fricative(seg: Segment) -> bool:
    return seg.sonorant == _UNMARKED and seg.continuant == _MARKED


def _approximant(seg: Segment) -> bool:
    return (
        seg.sonorant == _MARKED
        and seg.syllabic == _UNMARKED
        and seg.continuant == _MARKED
    )


def _nasal(seg: Segment) -> bool:
    return seg.nasal == UnaryFeature.MARKED


def _lateral(seg: Segment) -> bool:
    return seg.lateral == UnaryFeature.MARKED


def _high_vowel(seg: Segment) -> bool:
    return seg.syllabic == _MARKED and seg.high == _MARKED


def _low_vowel(seg: Segment) -> bool:
    return seg.syllabic == _MARKED and seg.low == _MARKED


def _mid_vowel(seg: Segment) -> bool:
    return (
        seg.syllabic == _MARKED
        and seg.high == _UNMARKED
        and seg.low == _UNMARKED
    )


# --- Phoneme-level predicates ---

def is_vowel(phoneme: Phoneme) -> bool:
    """A vowel goes in the nucleus of a syllable: (+syllabic)."""
    return _any_segment(phoneme, _vowel)


def is_consonant(phoneme: Phoneme) -> bool:
    """A consonant is anything that is not a vowel, semivowels included."""
    return not is_vowel(phoneme)


def is_semivowel(phoneme: Phoneme) -> bool:
    """(-consonantal, -syllabic)."""
    return _any_segment(phoneme, _semivowel)


def is_voiced(phoneme: Phoneme) -> bool:
    """(+voice)."""
    return _any_segment(phoneme, _voiced)


def is_stop(phoneme: Phoneme) -> bool:
    """(-sonorant, -continuant). [continuant] must be specified."""
    return _any_segment(phoneme, _stop)


def is_fricative(phoneme: Phoneme) -> bool:
    """(-sonorant, +continuant). [continuant] must be specified."""
    return _any_segment(phoneme, _fricative)


def is_approximant(phoneme: Phoneme) -> bool:
    """(+sonorant, -syllabic, +continuant)."""
    return _any_segment(phoneme, _approximant)


def is_affricate(phoneme: Phoneme) -> bool:
    """A disegment whose first segment is a stop and second a fricative.

    The order matters: a fricative followed by a stop is not an affricate,
    and a monosegment never is.
    """
    if not isinstance(phoneme, Disegment):
        return False
    return _stop(phoneme.first) and _fricative(phoneme.second)


def is_nasal(phoneme: Phoneme) -> bool:
    """[nasal]."""
    return _any_segment(phoneme, _nasal)


def is_lateral(phoneme: Phoneme) -> bool:
    """[lateral]."""
    return _any_segment(phoneme, _lateral)


def is_high_vowel(phoneme: Phoneme) -> bool:
    """(+syllabic, +high)."""
    return _any_segment(phoneme, _high_vowel)


def is_low_vowel(phoneme: Phoneme) -> bool:
    """(+syllabic, +low)."""
    return _any_segment(phoneme, _low_vowel)


def is_mid_vowel(phoneme: Phoneme) -> bool:
    """(+syllabic, -high, -low)."""
    return _any_segment(phoneme, _mid_vowel)
