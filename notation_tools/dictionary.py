"""Lookup facade over the currently active note name tables."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from .settings import DefaultAccidental, NotationConfig
from .tables import HIGHEST_NOTE, LOWEST_NOTE, NoteTableGeneration, build_note_tables

logger = logging.getLogger(__name__)

UNKNOWN_NOTE_NAME = "unknown"
NOTE_NOT_FOUND: Optional[int] = None


class NoteDictionary:
    """Translate between MIDI note numbers and configured note names.

    The instance holds exactly one table generation at a time.  Reconfiguring
    builds a complete new generation before it replaces the old one, so a
    lookup never observes a half-built table.
    """

    def __init__(
        self,
        config: NotationConfig | None = None,
        *,
        unknown_label: str = UNKNOWN_NOTE_NAME,
    ) -> None:
        self._unknown_label = unknown_label
        self._generation: NoteTableGeneration = build_note_tables(config or NotationConfig())
        self._listeners: List[Callable[[NoteTableGeneration], None]] = []

    @property
    def config(self) -> NotationConfig:
        return self._generation.config

    @property
    def generation(self) -> NoteTableGeneration:
        return self._generation

    def register(self, listener: Callable[[NoteTableGeneration], None]) -> Callable[[], None]:
        """Call ``listener`` with each new generation; returns an unsubscribe hook."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:  # pragma: no cover - already removed
                pass

        return _unsubscribe

    def reconfigure(self, config: NotationConfig) -> NoteTableGeneration:
        if config == self._generation.config:
            return self._generation
        generation = build_note_tables(config)
        self._generation = generation
        logger.info(
            "Note names reconfigured: letters=%s accidentals=%s octaves=%s default=%s",
            config.letter_system.value,
            config.accidental_style.value,
            config.octave_style.value,
            config.default_accidental.value,
        )
        for listener in list(self._listeners):
            listener(generation)
        return generation

    def name_of(self, number: int) -> str:
        """Return the canonical name of ``number`` or the unknown label."""

        if not LOWEST_NOTE <= number <= HIGHEST_NOTE:
            return self._unknown_label
        return self._generation.names[number]

    def number_of(self, name: str) -> Optional[int]:
        """Return the note number for a canonical or alternate name, ``None`` if unknown."""

        return self._generation.index.get(name, NOTE_NOT_FOUND)

    def exists(self, name: str) -> bool:
        return name in self._generation.index

    def alternate_names_of(self, number: int) -> Tuple[str, ...]:
        return self._generation.alternates.get(number, ())

    def base_name_of(self, number: int) -> str:
        """Return letter and primary accidental of ``number`` without an octave marker."""

        return self._generation.accidentals.primary[number % 12]

    def preferred_accidental_name_of(self, number: int, prefer_sharp: bool) -> str:
        """Spell the pitch class of ``number`` with a single sharp or flat if possible.

        Falls back to the primary spelling when no single accidental in the
        requested direction is known for the pitch class.
        """

        generation = self._generation
        pitch_class = number % 12
        direction = DefaultAccidental.SHARP if prefer_sharp else DefaultAccidental.FLAT
        candidates = sorted(
            entry.name
            for entry in generation.pitch_class_alternates.get(pitch_class, ())
            if entry.strength == 1 and entry.direction is direction
        )
        if candidates:
            return candidates[0]
        return generation.accidentals.primary[pitch_class]

    def count_notes(self) -> int:
        return self._generation.canonical_count

    def note_rows(self) -> List[Tuple[int, str]]:
        """Return ``(number, name)`` rows for a note table view."""

        return list(enumerate(self._generation.names))

    def alternate_rows(self) -> List[Tuple[int, str, Tuple[str, ...]]]:
        generation = self._generation
        return [
            (number, name, generation.alternates.get(number, ()))
            for number, name in enumerate(generation.names)
        ]


__all__ = ["NOTE_NOT_FOUND", "NoteDictionary", "UNKNOWN_NOTE_NAME"]
