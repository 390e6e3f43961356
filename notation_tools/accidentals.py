"""Accidental spellings built on top of a letter table.

Every pitch class gets a *primary* spelling: the natural letter where one
exists, otherwise the letter of the neighbouring natural plus the default
accidental (``c#`` or ``db`` style).  On top of that, chains of up to three
stacked accidentals are generated in both directions so that spellings such
as ``b#``, ``fb``, ``c##`` or ``heses`` can be resolved by the parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .canonical import canonicalize
from .letters import BaseLetterTable
from .settings import AccidentalStyle, DefaultAccidental

CHAIN_LENGTH = 3


@dataclass(frozen=True)
class AlternateSpelling:
    """One accidental spelling produced by stacking suffixes onto a primary name.

    ``offset`` is the pitch relative to the C that starts the written
    letter's octave, so ``b#`` has offset 12 and ``cb`` has offset -1.
    ``strength`` is the position in the chain: 1 for a single stacked
    accidental, up to 3.
    """

    name: str
    pitch_class: int
    offset: int
    strength: int
    direction: DefaultAccidental


@dataclass(frozen=True)
class AccidentalTable:
    """Primary spellings per pitch class and every alternate chain entry."""

    primary: Tuple[str, ...]
    alternates: Tuple[AlternateSpelling, ...]
    style: AccidentalStyle
    default: DefaultAccidental


def _suffix_for(style: AccidentalStyle, direction: DefaultAccidental) -> str:
    if direction is DefaultAccidental.SHARP:
        return style.sharp_suffix
    return style.flat_suffix


def primary_spellings(
    letters: BaseLetterTable,
    style: AccidentalStyle,
    default: DefaultAccidental,
) -> Tuple[str, ...]:
    """Return the preferred spelling (without octave) for each pitch class."""

    suffix = _suffix_for(style, default)
    # A sharp is written on the letter below, a flat on the letter above.
    base_step = -default.direction
    spellings: List[str] = []
    for pc in range(12):
        letter = letters.letter(pc)
        if letter is not None:
            spellings.append(letter)
            continue
        base_letter = letters.letter((pc + base_step) % 12)
        if base_letter is None:  # pragma: no cover - neighbours of half tones are natural
            raise ValueError(f"Pitch class {pc} has no natural neighbour")
        spellings.append(canonicalize(base_letter + suffix))
    return tuple(spellings)


def alternate_spellings(
    letters: BaseLetterTable,
    primary: Tuple[str, ...],
    style: AccidentalStyle,
    default: DefaultAccidental,
) -> Tuple[AlternateSpelling, ...]:
    """Stack up to three accidentals onto every primary spelling.

    Half tones only grow in the default direction so that mixed spellings
    such as ``c#b`` are never produced.
    """

    entries: List[AlternateSpelling] = []
    for direction in (DefaultAccidental.SHARP, DefaultAccidental.FLAT):
        suffix = _suffix_for(style, direction)
        for pc in range(12):
            half_tone = letters.is_half_tone(pc)
            if half_tone and direction is not default:
                continue
            name = primary[pc]
            running = pc
            for strength in range(1, CHAIN_LENGTH + 1):
                name = canonicalize(name + suffix)
                running += direction.direction
                entries.append(
                    AlternateSpelling(
                        name=name,
                        pitch_class=running % 12,
                        offset=running,
                        strength=strength,
                        direction=direction,
                    )
                )
    return tuple(entries)


def build_accidental_table(
    letters: BaseLetterTable,
    style: AccidentalStyle,
    default: DefaultAccidental,
) -> AccidentalTable:
    primary = primary_spellings(letters, style, default)
    alternates = alternate_spellings(letters, primary, style, default)
    return AccidentalTable(primary=primary, alternates=alternates, style=style, default=default)


__all__ = [
    "AccidentalTable",
    "AlternateSpelling",
    "CHAIN_LENGTH",
    "alternate_spellings",
    "build_accidental_table",
    "primary_spellings",
]
