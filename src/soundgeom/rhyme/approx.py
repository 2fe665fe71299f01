"""Approximate rhyme: continuous similarity between phoneme collections.

Similarity is the Jaccard index of the two sides' flattened feature
sets: shared feature tokens over all distinct feature tokens. It is
symmetric and reflexive, but not a metric.
"""

from __future__ import annotations

from typing import Iterable

from soundgeom.features.feature_set import Feature, feature_set
from soundgeom.features.phoneme import Phoneme
from soundgeom.structure.syllable import Syllable


def gather_features(phonemes: Iterable[Phoneme]) -> frozenset[Feature]:
    """Union of the feature sets of every phoneme."""
    features: set[Feature] = set()
    for phoneme in phonemes:
        features |= feature_set(phoneme)
    return frozenset(features)


def similarity(s1: Iterable[Phoneme], s2: Iterable[Phoneme]) -> float:
    """Similarity from 0.0 (nothing shared) to 1.0 (identical feature sets).

    Two collections with no features at all (e.g. two empty onsets) have
    nothing to tell them apart and score 1.0.
    """
    fs1 = gather_features(s1)
    fs2 = gather_features(s2)
    all_features = fs1 | fs2
    if not all_features:
        return 1.0
    return len(fs1 & fs2) / len(all_features)


def rhyme(syl1: Syllable, syl2: Syllable) -> float:
    """Compare the rhymes (nucleus + coda) of two syllables."""
    return similarity(syl1.rhyme(), syl2.rhyme())


def assonance(syl1: Syllable, syl2: Syllable) -> float:
    """Compare the nuclei of two syllables."""
    return similarity([syl1.nucleus], [syl2.nucleus])


def alliteration(syl1: Syllable, syl2: Syllable) -> float:
    """Compare the onsets of two syllables."""
    return similarity(syl1.onset, syl2.onset)
