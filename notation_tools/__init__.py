from .settings import (
    AccidentalStyle,
    DefaultAccidental,
    LetterSystem,
    NotationConfig,
    OctaveStyle,
)
from .errors import InvalidOctave, NotationConfigError, NotationError
from .canonical import canonicalize
from .letters import BaseLetterTable, build_letter_table
from .accidentals import AccidentalTable, AlternateSpelling, build_accidental_table
from .octaves import OctaveFormatter
from .tables import HIGHEST_NOTE, LOWEST_NOTE, NoteTableGeneration, build_note_tables
from .dictionary import NOTE_NOT_FOUND, UNKNOWN_NOTE_NAME, NoteDictionary

__all__ = [
    "AccidentalStyle",
    "DefaultAccidental",
    "LetterSystem",
    "NotationConfig",
    "OctaveStyle",
    "InvalidOctave",
    "NotationConfigError",
    "NotationError",
    "canonicalize",
    "BaseLetterTable",
    "build_letter_table",
    "AccidentalTable",
    "AlternateSpelling",
    "build_accidental_table",
    "OctaveFormatter",
    "HIGHEST_NOTE",
    "LOWEST_NOTE",
    "NoteTableGeneration",
    "build_note_tables",
    "NOTE_NOT_FOUND",
    "UNKNOWN_NOTE_NAME",
    "NoteDictionary",
]
