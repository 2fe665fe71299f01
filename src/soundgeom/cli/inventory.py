"""soundgeom inventory: show the phoneme inventory of an accent."""

from __future__ import annotations

import json
import sys

import click

from soundgeom import get_accent
from soundgeom.accents import DEFAULT_ACCENT


@click.command()
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
def inventory(accent: str, output_format: str) -> None:
    """Show the phoneme inventory of an accent."""
    try:
        acc = get_accent(accent)
    except KeyError as exc:
        click.echo(f"Error: {exc.args[0]}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(json.dumps(acc.to_dict(), ensure_ascii=False, indent=2))
    else:
        click.echo(f"{acc.name} ({acc.code})")
        click.echo()
        click.echo(f"Consonants ({len(acc.consonants)}): {' '.join(acc.consonants)}")
        click.echo(f"Vowels ({len(acc.vowels)}): {' '.join(acc.vowels)}")
        click.echo(f"Total: {acc.size} phonemes")
