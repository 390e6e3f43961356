"""Conventional replacements for mechanically built accidental spellings."""

from __future__ import annotations

from typing import Dict

# German spells the flat of "h" as "b", and drops the doubled vowel of
# "e" and "a" when "es" is appended.
SPELLING_EXCEPTIONS: Dict[str, str] = {
    "Hb": "B",
    "hb": "b",
    "Ees": "Es",
    "ees": "es",
    "Aes": "As",
    "aes": "as",
}


def canonicalize(name: str) -> str:
    """Return the conventional form of ``name`` (case-sensitive, whole-name match)."""

    return SPELLING_EXCEPTIONS.get(name, name)


__all__ = ["SPELLING_EXCEPTIONS", "canonicalize"]
