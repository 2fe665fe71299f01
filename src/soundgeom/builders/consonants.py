"""Builders for constructing consonants.

Manner builders (``stop``, ``nasal``, ``fricative``, ``glide``,
``approximant``) reset all three root features, so apply them before any
builder that should override part of what they set.
"""

from __future__ import annotations

from dataclasses import replace

from soundgeom.builders import with_autosegmental, with_group, with_place, with_root
from soundgeom.features.models import (
    BinaryFeature,
    CoronalFeature,
    DorsalFeature,
    LabialFeature,
    LaryngealFeatures,
    Segment,
    UnaryFeature,
)


_MARKED = BinaryFeature.MARKED
_UNMARKED = BinaryFeature.UNMARKED


def _with_laryngeal(seg: Segment, **changes) -> Segment:
    laryngeal = seg.laryngeal if seg.laryngeal is not None else LaryngealFeatures()
    return with_autosegmental(seg, laryngeal=replace(laryngeal, **changes))


def vd(seg: Segment) -> Segment:
    """Voiced: (+voice)."""
    return _with_laryngeal(seg, voice=_MARKED)


def vl(seg: Segment) -> Segment:
    """Voiceless: (-voice)."""
    return _with_laryngeal(seg, voice=_UNMARKED)


def stop(seg: Segment) -> Segment:
    """(+consonantal, -sonorant, -syllabic, -continuant)."""
    seg = with_root(
        seg, consonantal=_MARKED, sonorant=_UNMARKED, syllabic=_UNMARKED
    )
    return with_autosegmental(seg, continuant=_UNMARKED)


def nasal(seg: Segment) -> Segment:
    """(+consonantal, +sonorant, -syllabic, -continuant, nasal)."""
    seg = with_root(seg, consonantal=_MARKED, sonorant=_MARKED, syllabic=_UNMARKED)
    return with_autosegmental(
        seg, continuant=_UNMARKED, nasal=UnaryFeature.MARKED
    )


def fricative(seg: Segment) -> Segment:
    """(+consonantal, -sonorant, -syllabic, +continuant, -strident)."""
    seg = with_root(
        seg, consonantal=_MARKED, sonorant=_UNMARKED, syllabic=_UNMARKED
    )
    return with_autosegmental(seg, continuant=_MARKED, strident=_UNMARKED)


def glide(seg: Segment) -> Segment:
    """A semivowel: (-consonantal, +sonorant, -syllabic, +continuant)."""
    seg = with_root(seg, consonantal=_UNMARKED, sonorant=_MARKED, syllabic=_UNMARKED)
    return with_autosegmental(seg, continuant=_MARKED)


def approximant(seg: Segment) -> Segment:
    """(+consonantal, +sonorant, -syllabic, +continuant)."""
    seg = with_root(seg, consonantal=_MARKED, sonorant=_MARKED, syllabic=_UNMARKED)
    return with_autosegmental(seg, continuant=_MARKED)


def strident(seg: Segment) -> Segment:
    return with_autosegmental(seg, strident=_MARKED)


def distrib(seg: Segment) -> Segment:
    """(+distrib), adding a coronal place if there is none."""
    return with_group(seg, "coronal", CoronalFeature(), distrib=_MARKED)


def lateral(seg: Segment) -> Segment:
    return with_autosegmental(seg, lateral=UnaryFeature.MARKED)


def rhotic(seg: Segment) -> Segment:
    return with_autosegmental(seg, rhotic=UnaryFeature.MARKED)


def bilabial(seg: Segment) -> Segment:
    """Labial place. Keeps any rounding already specified."""
    return with_group(seg, "labial", LabialFeature())


def labiodental(seg: Segment) -> Segment:
    """Same features as ``bilabial``."""
    return bilabial(seg)


def alveolar(seg: Segment) -> Segment:
    """Coronal place, replaced with (+anterior, -distrib)."""
    return with_place(
        seg, coronal=CoronalFeature(anterior=_MARKED, distrib=_UNMARKED)
    )


def dental(seg: Segment) -> Segment:
    """Same features as ``alveolar``."""
    return alveolar(seg)


def postalveolar(seg: Segment) -> Segment:
    """Coronal place, replaced with (-anterior, -distrib)."""
    return with_place(
        seg, coronal=CoronalFeature(anterior=_UNMARKED, distrib=_UNMARKED)
    )


def velar(seg: Segment) -> Segment:
    """Dorsal place. Keeps any vowel-space features already specified."""
    return with_group(seg, "dorsal", DorsalFeature())


def palatal(seg: Segment) -> Segment:
    """Same features as ``velar``."""
    return velar(seg)


def glottal(seg: Segment) -> Segment:
    """Adds an (empty) laryngeal group if there is none."""
    if seg.laryngeal is not None:
        return seg
    return with_autosegmental(seg, laryngeal=LaryngealFeatures())
