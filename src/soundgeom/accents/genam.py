"""General American English.

Maps the IPA symbols of the 'General American English' accent
(https://en.wikipedia.org/wiki/General_American_English) to phonemes.
Diphthongs and affricates are disegments written with a tie-bar; the
r-colored vowels use the rhotic hook.
"""

from __future__ import annotations

from soundgeom.accents.models import Accent
from soundgeom.builders import consonant, disegment, monosegment, vowel
from soundgeom.builders.consonants import (
    alveolar,
    approximant,
    bilabial,
    dental,
    distrib,
    fricative,
    glide,
    glottal,
    labiodental,
    lateral,
    nasal,
    palatal,
    postalveolar,
    stop,
    strident,
    vd,
    velar,
    vl,
)
from soundgeom.builders.consonants import rhotic as rhotic_consonant
from soundgeom.builders.vowels import (
    back,
    central,
    front,
    high,
    lax,
    low,
    mid,
    rhotic,
    rounded,
    tense,
)
from soundgeom.features.phoneme import Phoneme


CODE = "genam"
NAME = "General American English"


def _sounds() -> dict[str, Phoneme]:
    # Segments reused inside disegments
    t = consonant([vl, alveolar, stop], "t")
    d = consonant([vd, alveolar, stop], "d")
    sh = consonant([vl, postalveolar, fricative, strident, distrib], "ʃ")
    zh = consonant([vd, postalveolar, fricative, strident, distrib], "ʒ")

    a = vowel([low, front], "a")
    e = vowel([mid, front, tense], "e")
    o = vowel([mid, back, rounded, tense], "o")
    open_o = vowel([mid, back, rounded, lax], "ɔ")
    near_i = vowel([high, front, lax], "ɪ")
    near_u = vowel([high, back, rounded, lax], "ʊ")

    sounds: dict[str, Phoneme] = {
        # Nasals
        "m": monosegment(consonant([vd, bilabial, nasal], "m")),
        "n": monosegment(consonant([vd, alveolar, nasal], "n")),
        "ŋ": monosegment(consonant([vd, velar, nasal], "ŋ")),
        # Stops
        "p": monosegment(consonant([vl, bilabial, stop], "p")),
        "b": monosegment(consonant([vd, bilabial, stop], "b")),
        "t": monosegment(t),
        "d": monosegment(d),
        "k": monosegment(consonant([vl, velar, stop], "k")),
        "ɡ": monosegment(consonant([vd, velar, stop], "ɡ")),
        # Affricates
        "t͡ʃ": disegment(t, sh),
        "d͡ʒ": disegment(d, zh),
        # Fricatives
        "f": monosegment(consonant([vl, labiodental, fricative], "f")),
        "v": monosegment(consonant([vd, labiodental, fricative], "v")),
        "θ": monosegment(consonant([vl, dental, fricative, distrib], "θ")),
        "ð": monosegment(consonant([vd, dental, fricative, distrib], "ð")),
        "s": monosegment(consonant([vl, alveolar, fricative, strident], "s")),
        "z": monosegment(consonant([vd, alveolar, fricative, strident], "z")),
        "ʃ": monosegment(sh),
        "ʒ": monosegment(zh),
        "h": monosegment(consonant([glottal, vl, fricative], "h")),
        # Approximants and glides
        "l": monosegment(consonant([vd, alveolar, approximant, lateral], "l")),
        "ɹ": monosegment(
            consonant([vd, alveolar, approximant, rhotic_consonant], "ɹ")
        ),
        "j": monosegment(consonant([vd, palatal, glide], "j")),
        "ʍ": monosegment(consonant([vl, bilabial, velar, glide], "ʍ")),
        "w": monosegment(consonant([vd, bilabial, velar, glide], "w")),
        # Monophthongs
        "i": monosegment(vowel([high, front, tense], "i")),
        "ɪ": monosegment(near_i),
        "ɛ": monosegment(vowel([mid, front, lax], "ɛ")),
        "ə": monosegment(vowel([mid, central, lax], "ə")),
        "æ": monosegment(vowel([low, front], "æ")),
        "ʌ": monosegment(vowel([mid, back, lax], "ʌ")),
        "ɑ": monosegment(vowel([low, back], "ɑ")),
        "u": monosegment(vowel([high, back, rounded, tense], "u")),
        "ʊ": monosegment(near_u),
        "ɔ": monosegment(open_o),
        # Diphthongs
        "e͡ɪ": disegment(e, near_i),
        "a͡ɪ": disegment(a, near_i),
        "a͡ʊ": disegment(a, near_u),
        "o͡ʊ": disegment(o, near_u),
        "ɔ͡ɪ": disegment(open_o, near_i),
        # R-colored vowels
        "ɜ˞": monosegment(vowel([mid, central, tense, rhotic], "ɜ˞")),
        "ə˞": monosegment(vowel([mid, central, lax, rhotic], "ə˞")),
    }
    return sounds


def build() -> Accent:
    """Construct the General American accent table."""
    return Accent(code=CODE, name=NAME, sounds=_sounds())
