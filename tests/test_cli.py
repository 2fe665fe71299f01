"""Tests for the soundgeom CLI.

All subcommands run against the built-in General American accent through
Click's CliRunner; no files or network are involved.

Each subcommand is tested for:
    - Happy path with default and custom options
    - Error handling (missing args, invalid inputs)
    - Output formats (text, json)
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from soundgeom.cli import main


# ===========================================================================
# Helpers
# ===========================================================================


@pytest.fixture
def runner():
    """Click CLI test runner."""
    return CliRunner()


# ===========================================================================
# soundgeom --help / --version
# ===========================================================================


class TestTopLevel:
    """Top-level CLI group."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "soundgeom" in result.output.lower()

    def test_help_lists_subcommands(self, runner):
        result = runner.invoke(main, ["--help"])
        for name in ("inventory", "parse", "compare"):
            assert name in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ===========================================================================
# soundgeom inventory
# ===========================================================================


class TestInventoryCommand:
    """soundgeom inventory: show an accent's phonemes."""

    def test_default_accent(self, runner):
        result = runner.invoke(main, ["inventory"])
        assert result.exit_code == 0
        assert "General American English (genam)" in result.output
        assert "Total: 42 phonemes" in result.output

    def test_shows_counts_and_symbols(self, runner):
        result = runner.invoke(main, ["inventory"])
        assert "Consonants (25):" in result.output
        assert "Vowels (17):" in result.output
        assert "t͡ʃ" in result.output
        assert "ə˞" in result.output

    def test_alias(self, runner):
        result = runner.invoke(main, ["inventory", "--accent", "en-us"])
        assert result.exit_code == 0
        assert "(genam)" in result.output

    def test_json_format(self, runner):
        result = runner.invoke(main, ["inventory", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["code"] == "genam"
        assert len(data["phonemes"]) == 42

    def test_unknown_accent_reports_error(self, runner):
        result = runner.invoke(main, ["inventory", "--accent", "xx-nonexistent"])
        assert result.exit_code == 1
        assert "Error: Unknown accent" in result.output


# ===========================================================================
# soundgeom parse
# ===========================================================================


class TestParseCommand:
    """soundgeom parse: word descriptions to syllables."""

    def test_text_output(self, runner):
        result = runner.invoke(main, ["parse", "1hɛ3lo͡ʊ"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "1hɛ3lo͡ʊ -> ˈhɛ.lo͡ʊ"
        assert "stress: stressed" in lines[1]
        assert "onset: h" in lines[1]
        assert "nucleus: ɛ" in lines[1]
        assert "stress: unstressed" in lines[2]
        assert "nucleus: o͡ʊ" in lines[2]

    def test_empty_parts_shown_as_dash(self, runner):
        result = runner.invoke(main, ["parse", "a͡ɪ"])
        assert result.exit_code == 0
        line = result.output.splitlines()[1]
        assert "stress: -" in line
        assert "onset: -" in line
        assert line.endswith("coda: -")

    def test_multiple_descriptions(self, runner):
        result = runner.invoke(main, ["parse", "ˈkæt", "ˈpʌmp.kɪn"])
        assert result.exit_code == 0
        assert "ˈkæt -> kæt" in result.output
        assert "ˈpʌmp.kɪn -> ˈpʌmp.kɪn" in result.output

    def test_json_format(self, runner):
        result = runner.invoke(main, ["parse", "ˈstɹɛŋθs", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == [
            {
                "description": "ˈstɹɛŋθs",
                "symbols": "stɹɛŋθs",
                "syllables": [
                    {
                        "onset": ["s", "t", "ɹ"],
                        "nucleus": "ɛ",
                        "coda": ["ŋ", "θ", "s"],
                        "stress": None,
                    }
                ],
            }
        ]

    def test_json_stress_names(self, runner):
        result = runner.invoke(main, ["parse", "2kæn4di", "-f", "json"])
        data = json.loads(result.output)
        stresses = [s["stress"] for s in data[0]["syllables"]]
        assert stresses == ["secondary_stress", "reduced_stress"]

    def test_unknown_symbol(self, runner):
        result = runner.invoke(main, ["parse", "ˈhɛ.xo͡ʊ"])
        assert result.exit_code == 1
        assert "Error: unknown symbol 'x' at position 4" in result.output

    def test_bad_structure(self, runner):
        result = runner.invoke(main, ["parse", "ˈhɛ."])
        assert result.exit_code == 1
        assert "syllable 2 has no nucleus" in result.output

    def test_unknown_accent(self, runner):
        result = runner.invoke(main, ["parse", "kæt", "--accent", "klingon"])
        assert result.exit_code == 1
        assert "Unknown accent" in result.output

    def test_missing_description_errors(self, runner):
        result = runner.invoke(main, ["parse"])
        assert result.exit_code == 2


# ===========================================================================
# soundgeom compare
# ===========================================================================


class TestCompareCommand:
    """soundgeom compare: similarity between two words."""

    def test_rhyme_default(self, runner):
        result = runner.invoke(main, ["compare", "ˈkæt", "ˈhæt"])
        assert result.exit_code == 0
        assert result.output.strip() == "rhyme: 1.0000"

    def test_word_without_vowel_errors(self, runner):
        result = runner.invoke(main, ["compare", "p", "b", "--mode", "similarity"])
        assert result.exit_code == 1
        assert "has no nucleus" in result.output

    def test_similarity_json(self, runner):
        result = runner.invoke(main, [
            "compare", "ˈkæt", "ˈkæt", "--mode", "similarity", "--format", "json",
        ])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data == {
            "first": "kæt",
            "second": "kæt",
            "mode": "similarity",
            "score": 1.0,
        }

    def test_alliteration(self, runner):
        result = runner.invoke(main, ["compare", "kæt", "kɪd", "-m", "alliteration"])
        assert result.exit_code == 0
        assert result.output.strip() == "alliteration: 1.0000"

    def test_assonance_partial(self, runner):
        result = runner.invoke(main, ["compare", "kæt", "kit", "-m", "assonance"])
        assert result.exit_code == 0
        score = float(result.output.strip().split(": ")[1])
        assert 0.0 <= score < 1.0

    def test_syllable_index(self, runner):
        result = runner.invoke(main, [
            "compare", "ˈpʌmp.kɪn", "ˈkæt", "--syllable", "0", "-m", "alliteration",
        ])
        assert result.exit_code == 0
        assert result.output.strip() != "alliteration: 1.0000"

    def test_syllable_out_of_range(self, runner):
        result = runner.invoke(main, ["compare", "kæt", "hæt", "--syllable", "3"])
        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_parse_error(self, runner):
        result = runner.invoke(main, ["compare", "kæt", ""])
        assert result.exit_code == 1
        assert "word description is empty" in result.output

    def test_invalid_mode(self, runner):
        result = runner.invoke(main, ["compare", "kæt", "hæt", "--mode", "meter"])
        assert result.exit_code == 2
