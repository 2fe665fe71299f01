"""Tests for Syllable construction and views."""

import dataclasses

import pytest

from soundgeom.errors import BadSyllableStructureError, ParseErrorKind
from soundgeom.structure import Stress, Syllable


@pytest.fixture
def prop(phons):
    """Syllable for 'pɹɑp'."""
    p, r, a = phons("p", "ɹ", "ɑ")
    return Syllable(nucleus=a, onset=(p, r), coda=(p,))


class TestSyllableViews:

    def test_symbols(self, prop):
        assert prop.symbols() == "pɹɑp"

    def test_rhyme(self, prop, phons):
        assert prop.rhyme() == phons("ɑ", "p")

    def test_phonemes(self, prop, phons):
        assert prop.phonemes() == phons("p", "ɹ", "ɑ", "p")

    def test_empty_onset_and_coda(self, phon):
        syl = Syllable(nucleus=phon("a͡ɪ"))
        assert syl.onset == ()
        assert syl.coda == ()
        assert syl.rhyme() == (phon("a͡ɪ"),)
        assert syl.symbols() == "a͡ɪ"

    def test_stress_not_rendered(self, phon):
        syl = Syllable(nucleus=phon("i"), stress=Stress.STRESSED)
        assert syl.symbols() == "i"

    def test_lists_are_stored_as_tuples(self, phons):
        p, a = phons("p", "ɑ")
        syl = Syllable(nucleus=a, onset=[p], coda=[p])
        assert syl.onset == (p,)
        assert hash(syl) == hash(Syllable(nucleus=a, onset=(p,), coda=(p,)))

    def test_immutable(self, prop):
        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.stress = Stress.STRESSED

    def test_repr(self, prop):
        assert repr(prop) == "Syllable('pɹɑp', stress=None)"


class TestSyllableValidation:

    def test_consonant_nucleus_rejected(self, phon):
        with pytest.raises(BadSyllableStructureError, match="nucleus must be syllabic"):
            Syllable(nucleus=phon("p"))

    def test_vowel_in_onset_rejected(self, phons):
        i, a = phons("i", "ɑ")
        with pytest.raises(BadSyllableStructureError, match="onset"):
            Syllable(nucleus=a, onset=(i,))

    def test_vowel_in_coda_rejected(self, phons):
        i, a = phons("i", "ɑ")
        with pytest.raises(BadSyllableStructureError) as exc_info:
            Syllable(nucleus=a, coda=(i,))
        assert exc_info.value.kind is ParseErrorKind.BAD_SYLLABLE_STRUCTURE

    def test_semivowel_allowed_in_onset(self, phons):
        j, u = phons("j", "u")
        assert Syllable(nucleus=u, onset=(j,)).symbols() == "ju"
