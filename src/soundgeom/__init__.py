"""soundgeom: Phonological feature geometry, word parsing and rhyme similarity."""

__version__ = "0.1.0"

from soundgeom.accents import DEFAULT_ACCENT, get_accent
from soundgeom.accents.models import Accent
from soundgeom.errors import WordParseError
from soundgeom.features.phoneme import Disegment, Monosegment, Phoneme
from soundgeom.structure import Stress, Syllable, Word


def parse_word(description: str, accent: str | Accent = DEFAULT_ACCENT) -> Word:
    """Parse a word description such as 'ˈhɛ.lo͡ʊ' into a Word.

    Args:
        description: Dictionary-style IPA with syllable/stress markers.
        accent: An Accent, or the code/alias of a registered accent.

    Returns:
        The parsed Word.

    Raises:
        KeyError: If ``accent`` names no registered accent.
        WordParseError: If the description cannot be parsed.
    """
    if isinstance(accent, str):
        accent = get_accent(accent)
    return accent.parse(description)


__all__ = [
    "Accent",
    "Disegment",
    "Monosegment",
    "Phoneme",
    "Stress",
    "Syllable",
    "Word",
    "WordParseError",
    "get_accent",
    "parse_word",
    "__version__",
]
