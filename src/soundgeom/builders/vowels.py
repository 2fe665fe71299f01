"""Builders for constructing vowels."""

from __future__ import annotations

from soundgeom.builders import with_autosegmental, with_group
from soundgeom.features.models import (
    BinaryFeature,
    DorsalFeature,
    LabialFeature,
    PharyngealFeature,
    Segment,
    UnaryFeature,
)


_MARKED = BinaryFeature.MARKED
_UNMARKED = BinaryFeature.UNMARKED


def _dorsal(seg: Segment, **changes) -> Segment:
    return with_group(seg, "dorsal", DorsalFeature(), **changes)


def back(seg: Segment) -> Segment:
    """Tongue behind neutral position. Back and central vowels are [+back]."""
    return _dorsal(seg, back=_MARKED)


def front(seg: Segment) -> Segment:
    """Tongue forward of neutral position: (-back)."""
    return _dorsal(seg, back=_UNMARKED)


def central(seg: Segment) -> Segment:
    """Tongue near neutral position. Central contrasts as [+back]."""
    return _dorsal(seg, back=_MARKED)


def high(seg: Segment) -> Segment:
    """(+high, -low)."""
    return _dorsal(seg, high=_MARKED, low=_UNMARKED)


def mid(seg: Segment) -> Segment:
    """(-high, -low)."""
    return _dorsal(seg, high=_UNMARKED, low=_UNMARKED)


def low(seg: Segment) -> Segment:
    """(-high, +low)."""
    return _dorsal(seg, high=_UNMARKED, low=_MARKED)


def rounded(seg: Segment) -> Segment:
    """Lip rounding: labial place with [round]."""
    return with_group(seg, "labial", LabialFeature(), round=UnaryFeature.MARKED)


def unrounded(seg: Segment) -> Segment:
    """Remove [round], leaving a labial place behind.

    Rounding is unary, so unrounded vowels can simply omit ``rounded``;
    this exists to undo an earlier builder.
    """
    return with_group(seg, "labial", LabialFeature(), round=None)


def tense(seg: Segment) -> Segment:
    """Advanced tongue root: (+ATR)."""
    return with_group(
        seg, "pharyngeal", PharyngealFeature(), advanced_tongue_root=_MARKED
    )


def lax(seg: Segment) -> Segment:
    """Retracted tongue root: (-ATR). ATR should stay unset for low vowels."""
    return with_group(
        seg, "pharyngeal", PharyngealFeature(), advanced_tongue_root=_UNMARKED
    )


def rhotic(seg: Segment) -> Segment:
    """r-coloring from a raised or curled tongue tip."""
    return with_autosegmental(seg, rhotic=UnaryFeature.MARKED)
