"""Builders for constructing segments and phonemes.

A builder is a function ``Segment -> Segment`` returning an updated copy
(segments are immutable). The base constructors apply builders in the
order given, left to right; when two builders touch the same field the
later one wins, so order them to match your intent::

    from soundgeom.builders import consonant
    from soundgeom.builders.consonants import vd, bilabial, nasal

    m = consonant([vd, bilabial, nasal], "m")
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable

from soundgeom.features.models import (
    BinaryFeature,
    Place,
    RootFeatures,
    Segment,
)
from soundgeom.features.phoneme import Disegment, Monosegment


Builder = Callable[[Segment], Segment]


def _apply(base: Segment, builders: Iterable[Builder]) -> Segment:
    for build in builders:
        base = build(base)
    return base


def segment(builders: Iterable[Builder] = (), symbol: str = "") -> Segment:
    """Build from an all-unmarked base with no autosegmental features."""
    return _apply(Segment(symbol=symbol), builders)


def consonant(builders: Iterable[Builder] = (), symbol: str = "") -> Segment:
    """Build from a (+consonantal, -sonorant, -syllabic) base."""
    base = Segment(
        root_features=RootFeatures(consonantal=BinaryFeature.MARKED),
        symbol=symbol,
    )
    return _apply(base, builders)


def vowel(builders: Iterable[Builder] = (), symbol: str = "") -> Segment:
    """Build from a (-consonantal, +sonorant, +syllabic) base."""
    base = Segment(
        root_features=RootFeatures(
            sonorant=BinaryFeature.MARKED,
            syllabic=BinaryFeature.MARKED,
        ),
        symbol=symbol,
    )
    return _apply(base, builders)


def monosegment(seg: Segment) -> Monosegment:
    return Monosegment(seg)


def disegment(first: Segment, second: Segment) -> Disegment:
    return Disegment(first, second)


# --- Helpers shared by the builder modules ---

def with_root(seg: Segment, **changes) -> Segment:
    return replace(seg, root_features=replace(seg.root_features, **changes))


def with_autosegmental(seg: Segment, **changes) -> Segment:
    return replace(
        seg,
        autosegmental_features=replace(seg.autosegmental_features, **changes),
    )


def with_place(seg: Segment, **changes) -> Segment:
    place = seg.place if seg.place is not None else Place()
    return with_autosegmental(seg, place=replace(place, **changes))


def with_group(seg: Segment, group: str, default, **changes) -> Segment:
    """Update a place sub-group, creating it (and place) if absent."""
    current = getattr(seg, group)
    if current is None:
        current = default
    return with_place(seg, **{group: replace(current, **changes)})


__all__ = [
    "Builder",
    "consonant",
    "disegment",
    "monosegment",
    "segment",
    "vowel",
]
