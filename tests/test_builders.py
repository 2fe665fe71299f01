"""Tests for the segment builders."""

from dataclasses import replace

from soundgeom.builders import consonant, disegment, monosegment, segment, vowel
from soundgeom.builders import consonants as c
from soundgeom.builders import vowels as v
from soundgeom.features.models import (
    AutosegmentalFeatures,
    BinaryFeature,
    CoronalFeature,
    DorsalFeature,
    LabialFeature,
    LaryngealFeatures,
    PharyngealFeature,
    RootFeatures,
    Segment,
    UnaryFeature,
)
from soundgeom.features.phoneme import Disegment, Monosegment

M = BinaryFeature.MARKED
U = BinaryFeature.UNMARKED


# ---------------------------------------------------------------------------
# Base constructors
# ---------------------------------------------------------------------------


class TestBaseConstructors:

    def test_segment_is_unmarked_and_empty(self):
        assert segment([], "p") == Segment(
            root_features=RootFeatures(consonantal=U, sonorant=U, syllabic=U),
            autosegmental_features=AutosegmentalFeatures(),
            symbol="p",
        )

    def test_consonant_base(self):
        """(+consonantal, -sonorant, -syllabic) with no autosegmental features."""
        seg = consonant([], "p")
        assert seg.root_features == RootFeatures(consonantal=M, sonorant=U, syllabic=U)
        assert seg.autosegmental_features == AutosegmentalFeatures()

    def test_vowel_base(self):
        """(-consonantal, +sonorant, +syllabic) with no autosegmental features."""
        seg = vowel([], "a")
        assert seg.root_features == RootFeatures(consonantal=U, sonorant=M, syllabic=M)
        assert seg.autosegmental_features == AutosegmentalFeatures()

    def test_builders_apply_left_to_right(self):
        """Later builders override earlier ones on the same field."""
        seg = segment(
            [
                lambda s: replace(s, symbol="arbitrary"),
                lambda s: replace(s, symbol="arbitrary two"),
            ],
            "overwritten",
        )
        assert seg.symbol == "arbitrary two"

    def test_order_changes_result(self):
        assert consonant([c.vd, c.vl]).voice == U
        assert consonant([c.vl, c.vd]).voice == M

    def test_builders_do_not_mutate_input(self):
        base = consonant([], "p")
        c.stop(base)
        assert base.continuant is None

    def test_phoneme_wrappers(self):
        t, sh = consonant([], "t"), consonant([], "ʃ")
        assert monosegment(t) == Monosegment(t)
        assert disegment(t, sh) == Disegment(t, sh)


# ---------------------------------------------------------------------------
# Consonant builders
# ---------------------------------------------------------------------------


class TestConsonantBuilders:

    def test_vd(self):
        assert segment([c.vd]).laryngeal.voice == M

    def test_vl(self):
        assert segment([c.vl]).laryngeal.voice == U

    def test_voicing_keeps_other_laryngeal_features(self):
        seg = segment([c.glottal, c.vd])
        assert seg.laryngeal == LaryngealFeatures(voice=M)

    def test_stop(self):
        seg = segment([c.stop])
        assert seg.consonantal == M
        assert seg.sonorant == U
        assert seg.continuant == U

    def test_nasal(self):
        seg = segment([c.nasal])
        assert seg.sonorant == M
        assert seg.continuant == U
        assert seg.nasal == UnaryFeature.MARKED

    def test_fricative(self):
        seg = segment([c.fricative])
        assert seg.sonorant == U
        assert seg.continuant == M
        assert seg.strident == U

    def test_glide(self):
        seg = consonant([c.glide])
        assert seg.consonantal == U
        assert seg.sonorant == M
        assert seg.syllabic == U
        assert seg.continuant == M

    def test_approximant(self):
        seg = segment([c.approximant])
        assert seg.consonantal == M
        assert seg.sonorant == M
        assert seg.continuant == M

    def test_strident(self):
        assert segment([c.strident]).strident == M

    def test_strident_after_fricative_overrides(self):
        assert segment([c.fricative, c.strident]).strident == M
        assert segment([c.strident, c.fricative]).strident == U

    def test_distrib(self):
        assert segment([c.distrib]).coronal == CoronalFeature(distrib=M)

    def test_lateral(self):
        assert segment([c.lateral]).lateral == UnaryFeature.MARKED

    def test_rhotic(self):
        assert segment([c.rhotic]).rhotic == UnaryFeature.MARKED

    def test_bilabial(self):
        assert segment([c.bilabial]).labial == LabialFeature(round=None)

    def test_labiodental_same_as_bilabial(self):
        assert segment([c.labiodental]) == segment([c.bilabial])

    def test_alveolar(self):
        assert segment([c.alveolar]).coronal == CoronalFeature(anterior=M, distrib=U)

    def test_dental_same_as_alveolar(self):
        assert segment([c.dental]) == segment([c.alveolar])

    def test_postalveolar(self):
        assert segment([c.postalveolar]).coronal == CoronalFeature(anterior=U, distrib=U)

    def test_velar(self):
        assert segment([c.velar]).dorsal == DorsalFeature(high=None, low=None, back=None)

    def test_palatal_same_as_velar(self):
        assert segment([c.palatal]) == segment([c.velar])

    def test_glottal(self):
        assert segment([c.glottal]).laryngeal == LaryngealFeatures()

    def test_places_combine(self):
        """Labial and dorsal can both be present, as in 'w'."""
        seg = segment([c.bilabial, c.velar])
        assert seg.labial is not None
        assert seg.dorsal is not None
        assert seg.coronal is None


# ---------------------------------------------------------------------------
# Vowel builders
# ---------------------------------------------------------------------------


class TestVowelBuilders:

    def test_front(self):
        assert vowel([v.front]).back == U

    def test_central(self):
        assert vowel([v.central]).back == M

    def test_back(self):
        assert vowel([v.back]).back == M

    def test_high(self):
        seg = vowel([v.high])
        assert seg.high == M
        assert seg.low == U

    def test_mid(self):
        seg = vowel([v.mid])
        assert seg.high == U
        assert seg.low == U

    def test_low(self):
        seg = vowel([v.low])
        assert seg.high == U
        assert seg.low == M

    def test_height_and_backness_combine(self):
        assert vowel([v.high, v.front]).dorsal == DorsalFeature(high=M, low=U, back=U)

    def test_rounded(self):
        assert vowel([v.rounded]).round == UnaryFeature.MARKED

    def test_unrounded(self):
        """Rounding is removed; the labial group stays."""
        seg = vowel([v.rounded, v.unrounded])
        assert seg.labial == LabialFeature()
        assert seg.round is None

    def test_tense(self):
        assert vowel([v.tense]).pharyngeal == PharyngealFeature(advanced_tongue_root=M)

    def test_lax(self):
        assert vowel([v.lax]).advanced_tongue_root == U

    def test_rhotic(self):
        assert vowel([v.rhotic]).rhotic == UnaryFeature.MARKED
