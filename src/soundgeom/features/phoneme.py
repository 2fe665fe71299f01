"""Phonemes: one or two segments behaving as a single contrastive sound."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from soundgeom.features.models import Segment


TIE_BAR = "\u0361"
"""Combining double inverted breve, joining the two halves of a disegment."""


@dataclass(frozen=True)
class Monosegment:
    """A phoneme made of a single segment, like 'ɪ' or 't'."""

    segment: Segment

    @property
    def segments(self) -> tuple[Segment, ...]:
        return (self.segment,)

    @property
    def symbol(self) -> str:
        return self.segment.symbol

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Disegment:
    """A phoneme made of an ordered pair of segments.

    Covers diphthongs ('a͡ɪ') and affricates ('t͡ʃ'). Order is significant:
    'o͡ʊ' and 'ʊ͡o' are different phonemes.
    """

    first: Segment
    second: Segment

    @property
    def segments(self) -> tuple[Segment, ...]:
        return (self.first, self.second)

    @property
    def symbol(self) -> str:
        return f"{self.first.symbol}{TIE_BAR}{self.second.symbol}"

    def __str__(self) -> str:
        return self.symbol


Phoneme = Union[Monosegment, Disegment]
