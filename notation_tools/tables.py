"""Build the complete note name tables for one notation configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .accidentals import AccidentalTable, AlternateSpelling, build_accidental_table
from .letters import BaseLetterTable, build_letter_table
from .octaves import MAX_OCTAVE, MIDDLE_C, MIN_OCTAVE, OctaveFormatter, octave_of
from .settings import NotationConfig

logger = logging.getLogger(__name__)

LOWEST_NOTE = 0
HIGHEST_NOTE = 127
NOTE_COUNT = HIGHEST_NOTE - LOWEST_NOTE + 1


@dataclass(frozen=True)
class NoteTableGeneration:
    """Immutable snapshot of every name table derived from one config."""

    config: NotationConfig
    letters: BaseLetterTable
    accidentals: AccidentalTable
    names: Tuple[str, ...]
    index: Mapping[str, int]
    alternates: Mapping[int, Tuple[str, ...]]
    pitch_class_alternates: Mapping[int, Tuple[AlternateSpelling, ...]]

    @property
    def canonical_count(self) -> int:
        return len(self.names)

    @property
    def alternate_count(self) -> int:
        return len(self.index) - len(self.names)


def build_note_tables(config: NotationConfig) -> NoteTableGeneration:
    """Return a fully built generation for ``config``.

    Canonical names are inserted first; an alternate spelling is only kept
    when its decorated name is not yet known.
    """

    letters = build_letter_table(config.letter_system)
    accidentals = build_accidental_table(
        letters, config.accidental_style, config.default_accidental
    )
    formatter = OctaveFormatter(config.octave_style)

    names = []
    index: Dict[str, int] = {}
    for number in range(LOWEST_NOTE, HIGHEST_NOTE + 1):
        name = formatter.decorate(accidentals.primary[number % 12], octave_of(number))
        names.append(name)
        index[name] = number

    per_note: Dict[int, set[str]] = {}
    per_pitch_class: Dict[int, Dict[str, AlternateSpelling]] = {pc: {} for pc in range(12)}
    # The highest octave is left out: none of its spellings reach a valid note.
    for octave in range(MIN_OCTAVE, MAX_OCTAVE):
        for entry in accidentals.alternates:
            number = octave * 12 + MIDDLE_C + entry.offset
            if number < LOWEST_NOTE or number > HIGHEST_NOTE:
                continue
            name = formatter.decorate(entry.name, octave)
            if name in index:
                continue
            index[name] = number
            per_note.setdefault(number, set()).add(name)
            per_pitch_class[entry.pitch_class].setdefault(entry.name, entry)

    generation = NoteTableGeneration(
        config=config,
        letters=letters,
        accidentals=accidentals,
        names=tuple(names),
        index=MappingProxyType(index),
        alternates=MappingProxyType(
            {number: tuple(sorted(found)) for number, found in sorted(per_note.items())}
        ),
        pitch_class_alternates=MappingProxyType(
            {pc: tuple(entries.values()) for pc, entries in per_pitch_class.items()}
        ),
    )
    logger.debug(
        "Built note tables for %s/%s/%s/%s: %d canonical names, %d alternates",
        config.letter_system.value,
        config.accidental_style.value,
        config.octave_style.value,
        config.default_accidental.value,
        generation.canonical_count,
        generation.alternate_count,
    )
    return generation


__all__ = [
    "HIGHEST_NOTE",
    "LOWEST_NOTE",
    "NOTE_COUNT",
    "NoteTableGeneration",
    "build_note_tables",
]
