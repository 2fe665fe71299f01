"""soundgeom compare: measure similarity between two words."""

from __future__ import annotations

import json
import sys

import click

from soundgeom import get_accent
from soundgeom.accents import DEFAULT_ACCENT
from soundgeom.errors import WordParseError
from soundgeom.rhyme import approx

_SYLLABLE_MEASURES = {
    "rhyme": approx.rhyme,
    "assonance": approx.assonance,
    "alliteration": approx.alliteration,
}


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--mode", "-m",
    type=click.Choice(["similarity", *_SYLLABLE_MEASURES]),
    default="rhyme",
    help="What to compare. 'similarity' uses every phoneme of both words; "
    "the others compare one syllable of each. Default: rhyme.",
)
@click.option(
    "--syllable", "-s",
    type=int,
    default=-1,
    show_default=True,
    help="Index of the syllable to compare (negative counts from the end).",
)
@click.option(
    "--accent", "-a",
    default=DEFAULT_ACCENT,
    show_default=True,
    help="Accent code or alias (e.g., genam, en-us).",
)
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format. Default: text.",
)
def compare_cmd(
    first: str,
    second: str,
    mode: str,
    syllable: int,
    accent: str,
    output_format: str,
) -> None:
    """Score how similar two word descriptions sound (0.0 to 1.0).

    \b
    Examples:
        soundgeom compare ˈkæt ˈhæt
        soundgeom compare ˈkæt ˈkɪt --mode alliteration
        soundgeom compare ˈhɛ.lo͡ʊ ˈjɛ.lo͡ʊ --mode similarity
    """
    try:
        acc = get_accent(accent)
        word1 = acc.parse(first)
        word2 = acc.parse(second)
    except (KeyError, WordParseError) as exc:
        message = exc.args[0] if exc.args else str(exc)
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)

    if mode == "similarity":
        score = approx.similarity(word1.phonemes(), word2.phonemes())
    else:
        try:
            syl1, syl2 = word1[syllable], word2[syllable]
        except IndexError:
            click.echo(
                f"Error: syllable index {syllable} is out of range "
                f"({len(word1)} and {len(word2)} syllables)",
                err=True,
            )
            sys.exit(1)
        score = _SYLLABLE_MEASURES[mode](syl1, syl2)

    if output_format == "json":
        data = {
            "first": word1.symbols(),
            "second": word2.symbols(),
            "mode": mode,
            "score": score,
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        click.echo(f"{mode}: {score:.4f}")
