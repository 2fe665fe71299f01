"""Shared test fixtures for soundgeom."""

import pytest

from soundgeom.accents import get_accent


@pytest.fixture
def genam():
    """The General American English accent."""
    return get_accent("genam")


@pytest.fixture
def phon(genam):
    """Look up a General American phoneme by symbol, failing loudly if absent."""

    def _phon(symbol: str):
        phoneme = genam.lookup(symbol)
        assert phoneme is not None, f"genam has no phoneme for {symbol!r}"
        return phoneme

    return _phon


@pytest.fixture
def phons(phon):
    """Look up several General American phonemes at once."""

    def _phons(*symbols: str):
        return tuple(phon(s) for s in symbols)

    return _phons
