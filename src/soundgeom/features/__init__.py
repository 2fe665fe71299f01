"""Feature geometry: segments, phonemes, natural classes and feature sets."""

from soundgeom.features.classes import (
    is_affricate,
    is_approximant,
    is_consonant,
    is_fricative,
    is_high_vowel,
    is_lateral,
    is_low_vowel,
    is_mid_vowel,
    is_nasal,
    is_semivowel,
    is_stop,
    is_voiced,
    is_vowel,
)
from soundgeom.features.feature_set import Feature, feature_set, segment_feature_set
from soundgeom.features.models import (
    AutosegmentalFeatures,
    BinaryFeature,
    CoronalFeature,
    DorsalFeature,
    LabialFeature,
    LaryngealFeatures,
    PharyngealFeature,
    Place,
    RootFeatures,
    Segment,
    UnaryFeature,
)
from soundgeom.features.phoneme import TIE_BAR, Disegment, Monosegment, Phoneme

__all__ = [
    "AutosegmentalFeatures",
    "BinaryFeature",
    "CoronalFeature",
    "Disegment",
    "DorsalFeature",
    "Feature",
    "LabialFeature",
    "LaryngealFeatures",
    "Monosegment",
    "PharyngealFeature",
    "Phoneme",
    "Place",
    "RootFeatures",
    "Segment",
    "TIE_BAR",
    "UnaryFeature",
    "feature_set",
    "is_affricate",
    "is_approximant",
    "is_consonant",
    "is_fricative",
    "is_high_vowel",
    "is_lateral",
    "is_low_vowel",
    "is_mid_vowel",
    "is_nasal",
    "is_semivowel",
    "is_stop",
    "is_voiced",
    "is_vowel",
    "segment_feature_set",
]
