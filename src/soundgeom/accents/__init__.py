"""Accents: symbol-to-phoneme tables consumed by the word parser."""

from __future__ import annotations

import logging
from typing import Callable

from soundgeom.accents import genam
from soundgeom.accents.models import Accent

logger = logging.getLogger(__name__)


DEFAULT_ACCENT = genam.CODE

_BUILDERS: dict[str, Callable[[], Accent]] = {
    genam.CODE: genam.build,
}

_ALIASES: dict[str, str] = {
    "en-us": genam.CODE,
    "general-american": genam.CODE,
}

# Accent tables never change once built, so one instance per process.
_CACHE: dict[str, Accent] = {}


def available_accents() -> list[str]:
    """Codes of all registered accents."""
    return sorted(_BUILDERS)


def get_accent(name: str = DEFAULT_ACCENT) -> Accent:
    """Get an accent by code or alias (case-insensitive).

    Args:
        name: Accent code (e.g., 'genam') or alias (e.g., 'en-us').

    Returns:
        The shared Accent instance.

    Raises:
        KeyError: If no accent is registered under ``name``.
    """
    key = name.lower().replace("_", "-")
    code = _ALIASES.get(key, key)
    if code not in _BUILDERS:
        raise KeyError(
            f"Unknown accent: {name!r}. "
            f"Available: {', '.join(available_accents())}"
        )
    if code not in _CACHE:
        logger.debug("Building accent table %r", code)
        _CACHE[code] = _BUILDERS[code]()
    return _CACHE[code]


__all__ = ["Accent", "DEFAULT_ACCENT", "available_accents", "get_accent"]
