"""Flat sets of feature tokens, used for similarity measurement.

The structured feature geometry is the primary representation; this
module flattens it into a set of discrete tokens so that phoneme
collections can be compared with set operations.
"""

from __future__ import annotations

from enum import Enum

from soundgeom.features.classes import is_affricate
from soundgeom.features.models import BinaryFeature, Segment, UnaryFeature
from soundgeom.features.phoneme import Disegment, Phoneme


class Feature(Enum):
    """Every markable feature state a segment can contribute."""

    PLUS_SYLLABIC = "+syllabic"
    MINUS_SYLLABIC = "-syllabic"
    PLUS_CONSONANTAL = "+consonantal"
    MINUS_CONSONANTAL = "-consonantal"
    PLUS_SONORANT = "+sonorant"
    MINUS_SONORANT = "-sonorant"
    PLUS_CONTINUANT = "+continuant"
    MINUS_CONTINUANT = "-continuant"
    PLUS_STRIDENT = "+strident"
    MINUS_STRIDENT = "-strident"
    NASAL = "nasal"
    LATERAL = "lateral"
    RHOTIC = "rhotic"
    LARYNGEAL = "laryngeal"
    PLUS_VOICE = "+voice"
    MINUS_VOICE = "-voice"
    SPREAD_GLOTTIS = "spreadGlottis"
    CONSTRICTED_GLOTTIS = "constrictedGlottis"
    LABIAL = "labial"
    ROUND = "round"
    CORONAL = "coronal"
    PLUS_ANTERIOR = "+anterior"
    MINUS_ANTERIOR = "-anterior"
    PLUS_DISTRIB = "+distrib"
    MINUS_DISTRIB = "-distrib"
    DORSAL = "dorsal"
    PLUS_HIGH = "+high"
    MINUS_HIGH = "-high"
    PLUS_LOW = "+low"
    MINUS_LOW = "-low"
    PLUS_BACK = "+back"
    MINUS_BACK = "-back"
    PHARYNGEAL = "pharyngeal"
    PLUS_ADVANCED_TONGUE_ROOT = "+ATR"
    MINUS_ADVANCED_TONGUE_ROOT = "-ATR"
    DEL_REL = "delrel"


# (accessor name, token when marked, token when unmarked)
_BINARY_TOKENS: tuple[tuple[str, Feature, Feature], ...] = (
    ("syllabic", Feature.PLUS_SYLLABIC, Feature.MINUS_SYLLABIC),
    ("sonorant", Feature.PLUS_SONORANT, Feature.MINUS_SONORANT),
    ("consonantal", Feature.PLUS_CONSONANTAL, Feature.MINUS_CONSONANTAL),
    ("anterior", Feature.PLUS_ANTERIOR, Feature.MINUS_ANTERIOR),
    ("distrib", Feature.PLUS_DISTRIB, Feature.MINUS_DISTRIB),
    ("high", Feature.PLUS_HIGH, Feature.MINUS_HIGH),
    ("low", Feature.PLUS_LOW, Feature.MINUS_LOW),
    ("back", Feature.PLUS_BACK, Feature.MINUS_BACK),
    (
        "advanced_tongue_root",
        Feature.PLUS_ADVANCED_TONGUE_ROOT,
        Feature.MINUS_ADVANCED_TONGUE_ROOT,
    ),
    ("continuant", Feature.PLUS_CONTINUANT, Feature.MINUS_CONTINUANT),
    ("strident", Feature.PLUS_STRIDENT, Feature.MINUS_STRIDENT),
    ("voice", Feature.PLUS_VOICE, Feature.MINUS_VOICE),
)

_UNARY_TOKENS: tuple[tuple[str, Feature], ...] = (
    ("round", Feature.ROUND),
    ("nasal", Feature.NASAL),
    ("lateral", Feature.LATERAL),
    ("rhotic", Feature.RHOTIC),
    ("spread_glottis", Feature.SPREAD_GLOTTIS),
    ("constricted_glottis", Feature.CONSTRICTED_GLOTTIS),
)

# Group nodes contribute a token by being present at all.
_GROUP_TOKENS: tuple[tuple[str, Feature], ...] = (
    ("labial", Feature.LABIAL),
    ("coronal", Feature.CORONAL),
    ("dorsal", Feature.DORSAL),
    ("pharyngeal", Feature.PHARYNGEAL),
    ("laryngeal", Feature.LARYNGEAL),
)


def segment_feature_set(seg: Segment) -> frozenset[Feature]:
    """Flatten a single segment. Absent features contribute nothing."""
    features: set[Feature] = set()

    for name, plus, minus in _BINARY_TOKENS:
        value = getattr(seg, name)
        if value is BinaryFeature.MARKED:
            features.add(plus)
        elif value is BinaryFeature.UNMARKED:
            features.add(minus)

    for name, token in _UNARY_TOKENS:
        if getattr(seg, name) is UnaryFeature.MARKED:
            features.add(token)

    for name, token in _GROUP_TOKENS:
        if getattr(seg, name) is not None:
            features.add(token)

    return frozenset(features)


def feature_set(phoneme: Phoneme) -> frozenset[Feature]:
    """Flatten a phoneme into its set of feature tokens.

    A Disegment yields the union of both segments' tokens, plus
    ``Feature.DEL_REL`` when it is an affricate, so that a true affricate
    differs from an arbitrary stop + fricative pair.
    """
    if isinstance(phoneme, Disegment):
        features = segment_feature_set(phoneme.first) | segment_feature_set(
            phoneme.second
        )
        if is_affricate(phoneme):
            features = features | {Feature.DEL_REL}
        return features
    return segment_feature_set(phoneme.segment)
