"""Distinctive-feature data model for phonological segments.

Pure data containers with no I/O. A Segment is a bundle of distinctive
features organised as a feature geometry: three required root features
and a tree of optional autosegmental feature groups.

Absence (``None``) on an optional feature means the feature is
articulatorily inapplicable to the segment. It is never used to mean
"unmarked": binary features carry an explicit ``UNMARKED`` value for that,
and unary features have no unmarked state at all.

Feature geometry::

      [round]  [+/-anterior][+/-distrib]  [+/-high][+/-low][+/-back]  [+/-ATR]
         |              \\    /                   \\    |    /            |
      [labial]         [coronal]                  [dorsal]        [pharyngeal]
          \\_______________|__________________________|_______________/
                                        |
                                      place
                                        |
                                    X SEGMENT
                           (+/-consonantal, +/-sonorant, +/-syllabic)
         _______________________________|____________________________
        /               |            |         |         |           \\
    [+/-continuant] [+/-strident] [lateral] [nasal] [laryngeal]   [rhotic]
                                                     /    |    \\
                                                   [SG]  [CG]  [+/-voice]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BinaryFeature(Enum):
    """A contrastive feature: both values form natural classes."""

    MARKED = "+"
    UNMARKED = "-"


class UnaryFeature(Enum):
    """A feature that is only meaningful when marked (e.g. [nasal])."""

    MARKED = "+"


@dataclass(frozen=True)
class RootFeatures:
    """Features bound to every segment.

    Attributes:
        consonantal: Constriction of the vocal tract: consonants (+).
        sonorant: Resonant vs turbulent: nasals, liquids, vowels (+).
        syllabic: Occupies a syllable nucleus: vowels (+).
    """

    consonantal: BinaryFeature = BinaryFeature.UNMARKED
    sonorant: BinaryFeature = BinaryFeature.UNMARKED
    syllabic: BinaryFeature = BinaryFeature.UNMARKED


@dataclass(frozen=True)
class LabialFeature:
    """Articulation with the lips."""

    round: UnaryFeature | None = None


@dataclass(frozen=True)
class CoronalFeature:
    """Articulation with the front of the tongue."""

    anterior: BinaryFeature | None = None
    distrib: BinaryFeature | None = None


@dataclass(frozen=True)
class DorsalFeature:
    """Articulation with the body of the tongue.

    Vowel height uses both [high] and [low]: high vowels are (+high, -low),
    low vowels (-high, +low) and mid vowels (-high, -low).
    """

    high: BinaryFeature | None = None
    low: BinaryFeature | None = None
    back: BinaryFeature | None = None


@dataclass(frozen=True)
class PharyngealFeature:
    """Articulation with the tongue root. ATR doubles as [+/-tense]."""

    advanced_tongue_root: BinaryFeature | None = None


@dataclass(frozen=True)
class Place:
    """Place of articulation. The four articulators are not exclusive."""

    labial: LabialFeature | None = None
    coronal: CoronalFeature | None = None
    dorsal: DorsalFeature | None = None
    pharyngeal: PharyngealFeature | None = None


@dataclass(frozen=True)
class LaryngealFeatures:
    """Behaviour of the vocal folds."""

    spread_glottis: UnaryFeature | None = None
    constricted_glottis: UnaryFeature | None = None
    voice: BinaryFeature | None = None


@dataclass(frozen=True)
class AutosegmentalFeatures:
    """Optional features that can behave independently of their segment."""

    nasal: UnaryFeature | None = None
    lateral: UnaryFeature | None = None
    rhotic: UnaryFeature | None = None
    strident: BinaryFeature | None = None
    continuant: BinaryFeature | None = None
    place: Place | None = None
    laryngeal: LaryngealFeatures | None = None


@dataclass(frozen=True)
class Segment:
    """A single phonological segment.

    Immutable and hashable; equality is structural, so two segments are
    equal iff every feature (absence included) and the symbol match.

    The accessor properties walk the feature tree and return ``None`` as
    soon as any ancestor group is absent.

    Attributes:
        root_features: The three required root features.
        autosegmental_features: The optional feature tree.
        symbol: IPA symbol for this segment alone (e.g. 'p', 'e').
    """

    root_features: RootFeatures = field(default_factory=RootFeatures)
    autosegmental_features: AutosegmentalFeatures = field(
        default_factory=AutosegmentalFeatures
    )
    symbol: str = ""

    # --- Root features ---

    @property
    def consonantal(self) -> BinaryFeature:
        return self.root_features.consonantal

    @property
    def sonorant(self) -> BinaryFeature:
        return self.root_features.sonorant

    @property
    def syllabic(self) -> BinaryFeature:
        return self.root_features.syllabic

    # --- Non-place autosegmental features ---

    @property
    def nasal(self) -> UnaryFeature | None:
        return self.autosegmental_features.nasal

    @property
    def lateral(self) -> UnaryFeature | None:
        return self.autosegmental_features.lateral

    @property
    def rhotic(self) -> UnaryFeature | None:
        return self.autosegmental_features.rhotic

    @property
    def strident(self) -> BinaryFeature | None:
        return self.autosegmental_features.strident

    @property
    def continuant(self) -> BinaryFeature | None:
        return self.autosegmental_features.continuant

    # --- Place groups ---

    @property
    def place(self) -> Place | None:
        return self.autosegmental_features.place

    @property
    def labial(self) -> LabialFeature | None:
        place = self.place
        return place.labial if place is not None else None

    @property
    def coronal(self) -> CoronalFeature | None:
        place = self.place
        return place.coronal if place is not None else None

    @property
    def dorsal(self) -> DorsalFeature | None:
        place = self.place
        return place.dorsal if place is not None else None

    @property
    def pharyngeal(self) -> PharyngealFeature | None:
        place = self.place
        return place.pharyngeal if place is not None else None

    # --- Place leaves ---

    @property
    def round(self) -> UnaryFeature | None:
        labial = self.labial
        return labial.round if labial is not None else None

    @property
    def anterior(self) -> BinaryFeature | None:
        coronal = self.coronal
        return coronal.anterior if coronal is not None else None

    @property
    def distrib(self) -> BinaryFeature | None:
        coronal = self.coronal
        return coronal.distrib if coronal is not None else None

    @property
    def high(self) -> BinaryFeature | None:
        dorsal = self.dorsal
        return dorsal.high if dorsal is not None else None

    @property
    def low(self) -> BinaryFeature | None:
        dorsal = self.dorsal
        return dorsal.low if dorsal is not None else None

    @property
    def back(self) -> BinaryFeature | None:
        dorsal = self.dorsal
        return dorsal.back if dorsal is not None else None

    @property
    def advanced_tongue_root(self) -> BinaryFeature | None:
        pharyngeal = self.pharyngeal
        return pharyngeal.advanced_tongue_root if pharyngeal is not None else None

    # --- Laryngeal ---

    @property
    def laryngeal(self) -> LaryngealFeatures | None:
        return self.autosegmental_features.laryngeal

    @property
    def spread_glottis(self) -> UnaryFeature | None:
        laryngeal = self.laryngeal
        return laryngeal.spread_glottis if laryngeal is not None else None

    @property
    def constricted_glottis(self) -> UnaryFeature | None:
        laryngeal = self.laryngeal
        return laryngeal.constricted_glottis if laryngeal is not None else None

    @property
    def voice(self) -> BinaryFeature | None:
        laryngeal = self.laryngeal
        return laryngeal.voice if laryngeal is not None else None

    def __repr__(self) -> str:
        return f"Segment(symbol={self.symbol!r})"
