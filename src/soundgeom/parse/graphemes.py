"""Split a word description into symbols ready for accent lookup.

A unit is either a single syllable marker (see ``STRESS_MARKERS``) or a
sound symbol: a base character together with everything attached to it.
Attached characters are combining marks, the rhotic hook and modifier
letters such as the length mark 'ː'. A tie-bar also pulls in the next
base character, so 't͡ʃ' and 'o͡ʊ' come out as single lookup keys.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

from soundgeom.errors import BadSyllableStructureError
from soundgeom.structure.stress import STRESS_MARKERS


TIE_BARS = frozenset({"\u0361", "\u035c"})
"""Combining double inverted breve (above) and double breve below."""

RHOTIC_HOOK = "\u02de"
"""Modifier letter rhotic hook, as in 'ɚ' written 'ə˞'."""


def _is_attached(ch: str) -> bool:
    """Whether ``ch`` belongs to the symbol before it."""
    if ch in STRESS_MARKERS:
        return False
    if ch == RHOTIC_HOOK:
        return True
    category = unicodedata.category(ch)
    # Combining marks (Mn, Mc, Me) and modifier letters (Lm)
    return category.startswith("M") or category == "Lm"


def iter_symbols(description: str) -> Iterator[tuple[int, str]]:
    """Yield ``(position, unit)`` pairs from left to right.

    Args:
        description: A word description such as 'ˈhɛ.lo͡ʊ'.

    Yields:
        Character offset of each unit and the unit itself.

    Raises:
        BadSyllableStructureError: On a combining character with no base
            symbol, or a tie-bar with no symbol to join after it.
    """
    i = 0
    n = len(description)
    while i < n:
        ch = description[i]

        if ch in STRESS_MARKERS:
            yield i, ch
            i += 1
            continue

        if _is_attached(ch):
            raise BadSyllableStructureError(
                f"combining character {ch!r} at position {i} has no base symbol"
            )

        start = i
        i += 1
        while i < n and _is_attached(description[i]):
            if description[i] in TIE_BARS:
                i += 1
                if i >= n:
                    raise BadSyllableStructureError(
                        f"tie-bar at end of description after "
                        f"{description[start:i - 1]!r} joins nothing"
                    )
                if description[i] in STRESS_MARKERS or _is_attached(description[i]):
                    raise BadSyllableStructureError(
                        f"tie-bar at position {i - 1} must join two symbols, "
                        f"found {description[i]!r}"
                    )
            i += 1

        yield start, description[start:i]


def split_symbols(description: str) -> list[str]:
    """Return the units of ``description`` as a list of strings."""
    return [unit for _, unit in iter_symbols(description)]
