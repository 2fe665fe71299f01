"""Syllable and word structure built from phonemes."""

from soundgeom.structure.stress import BinaryStress, Stress, STRESS_MARKERS
from soundgeom.structure.syllable import Syllable
from soundgeom.structure.word import Word

__all__ = ["BinaryStress", "STRESS_MARKERS", "Stress", "Syllable", "Word"]
