"""soundgeom parse: parse word descriptions into syllables."""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from soundgeom import get_accent
from soundgeom.accents import DEFAULT_ACCENT
from soundgeom.errors import WordParseError
from soundgeom.structure.word import Word


def word_to_dict(description: str, word: Word) -> dict[str, Any]:
    """Plain-dict view of a parsed word, for JSON output."""
    return {
        "description": description,
        "symbols": word.symbols(),
        "syllables": [
            {
                "onset": [p.symbol for p in syl.onset],
                "nucleus": syl.nucleus.symbol,
                "coda": [p.symbol for p in syl.coda],
                "stress": syl.stress.name.lower() if syl.stress is not None else None,
            }
            for syl in word
        ],
    }


def _render_text(description: str, word: Word) -> str:
    lines = [f"{description} -> {word.symbols()}"]
    for i, syl in enumerate(word, start=1):
        stress = syl.stress.name.lower() if syl.stress is not None else "-"
        onset = " ".join(p.symbol for p in syl.onset) or "-"
        coda = " ".join(p.symbol for p in syl.coda) or "-"
        lines.append(
            f"  {i}. stress: {stress:<16} onset: {onset:<8} "
            f"nucleus: {syl.nucleus.symbol:<4} coda: {coda}"
        )
    return "\n".join(lines)


@click.command()
@click.argument("descriptions", nargs=-1, required=True)
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
def parse_cmd(descriptions: tuple[str, ...], accent: str, output_format: str) -> None:
    """Parse IPA word descriptions into syllables.

    \b
    Examples:
        soundgeom parse ˈhɛ.lo͡ʊ
        soundgeom parse 1pʌmp3kɪn tɛst --format json
    """
    try:
        acc = get_accent(accent)
        words = [(d, acc.parse(d)) for d in descriptions]
    except (KeyError, WordParseError) as exc:
        message = exc.args[0] if exc.args else str(exc)
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)

    if output_format == "json":
        data = [word_to_dict(d, w) for d, w in words]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
    else:
        for d, w in words:
            click.echo(_render_text(d, w))
