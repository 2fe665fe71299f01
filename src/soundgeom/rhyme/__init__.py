"""Measuring similarity between collections of phonemes.

Two approaches are offered. Strict rhyme is an equality relation between
parts of syllables: they either match or they don't. Approximate rhyme
is a continuous measure that says *how* similar two collections are.
"""

from soundgeom.rhyme import approx, strict
from soundgeom.rhyme.approx import alliteration, assonance, rhyme, similarity

__all__ = ["alliteration", "approx", "assonance", "rhyme", "similarity", "strict"]
