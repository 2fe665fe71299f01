"""Command-line interface for soundgeom."""

import click

from soundgeom.cli.compare import compare_cmd
from soundgeom.cli.inventory import inventory
from soundgeom.cli.parse import parse_cmd


@click.group()
@click.version_option()
def main() -> None:
    """soundgeom: Parse IPA word descriptions and measure rhyme similarity."""


main.add_command(inventory)
main.add_command(parse_cmd, name="parse")
main.add_command(compare_cmd, name="compare")
