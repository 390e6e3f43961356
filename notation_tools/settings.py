"""Notation settings that select how note names are spelled."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from .errors import NotationConfigError


def _normalize_id(value: str, prefix: str) -> str:
    normalized = value.strip().lower()
    if normalized.startswith(prefix):
        normalized = normalized[len(prefix):]
    return normalized


class LetterSystem(str, Enum):
    """Letters used for the natural notes."""

    INTERNATIONAL_LOWER = "international_lc"
    INTERNATIONAL_UPPER = "international_uc"
    ITALIAN_LOWER = "italian_lc"
    ITALIAN_UPPER = "italian_uc"
    GERMAN_LOWER = "german_lc"
    GERMAN_UPPER = "german_uc"

    @property
    def label(self) -> str:
        return _LETTER_SYSTEM_LABELS[self]

    @property
    def is_german(self) -> bool:
        return self in (LetterSystem.GERMAN_LOWER, LetterSystem.GERMAN_UPPER)

    @property
    def is_upper(self) -> bool:
        return self in (
            LetterSystem.INTERNATIONAL_UPPER,
            LetterSystem.ITALIAN_UPPER,
            LetterSystem.GERMAN_UPPER,
        )

    @classmethod
    def from_id(cls, value: str) -> "LetterSystem":
        try:
            return cls(_normalize_id(value, "cbx_note_id_"))
        except ValueError as exc:
            raise NotationConfigError("letter_system", value) from exc

    @classmethod
    def choices(cls) -> List[Tuple[str, str]]:
        return [(member.value, member.label) for member in cls]


_LETTER_SYSTEM_LABELS = {
    LetterSystem.INTERNATIONAL_LOWER: "International: c, d, e, f, g, a, b",
    LetterSystem.INTERNATIONAL_UPPER: "International: C, D, E, F, G, A, B",
    LetterSystem.ITALIAN_LOWER: "Italian (lower): do, re, mi, fa...",
    LetterSystem.ITALIAN_UPPER: "Italian (upper): Do, Re, Mi, Fa...",
    LetterSystem.GERMAN_LOWER: "German (lower): c, d, e, f, g, a, h",
    LetterSystem.GERMAN_UPPER: "German (upper): C, D, E, F, G, A, H",
}


class AccidentalStyle(str, Enum):
    """Symbols appended to a letter to raise or lower it by a half tone."""

    SHARP_FLAT_ASCII = "sharp_flat"
    DIESIS_BEMOLLE = "diesis_bemolle"
    CIS_ES = "cis_es"

    @property
    def label(self) -> str:
        return _ACCIDENTAL_STYLE_LABELS[self]

    @property
    def sharp_suffix(self) -> str:
        return self.suffixes[0]

    @property
    def flat_suffix(self) -> str:
        return self.suffixes[1]

    @property
    def suffixes(self) -> Tuple[str, str]:
        """Return the ``(sharp, flat)`` suffix pair."""

        if self is AccidentalStyle.SHARP_FLAT_ASCII:
            return ("#", "b")
        if self is AccidentalStyle.DIESIS_BEMOLLE:
            return ("-diesis", "-bemolle")
        return ("is", "es")

    @classmethod
    def from_id(cls, value: str) -> "AccidentalStyle":
        normalized = _normalize_id(value, "cbx_halftone_id_")
        normalized = _ACCIDENTAL_STYLE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise NotationConfigError("accidental_style", value) from exc

    @classmethod
    def choices(cls) -> List[Tuple[str, str]]:
        return [(member.value, member.label) for member in cls]


_ACCIDENTAL_STYLE_LABELS = {
    AccidentalStyle.SHARP_FLAT_ASCII: "#/b: c#, db, f#, gb...",
    AccidentalStyle.DIESIS_BEMOLLE: "-diesis/-bemolle: do-diesis, re-bemolle...",
    AccidentalStyle.CIS_ES: "-is/-es: cis, des, fis, ges...",
}

# Ids of the older combined half tone setting map onto the symbol style only.
_ACCIDENTAL_STYLE_ALIASES = {
    "sharp": "sharp_flat",
    "flat": "sharp_flat",
    "ascii": "sharp_flat",
    "diesis": "diesis_bemolle",
    "bemolle": "diesis_bemolle",
    "cis": "cis_es",
    "des": "cis_es",
}


class OctaveStyle(str, Enum):
    """Convention used to mark the octave of a note."""

    PLUS_MINUS_N = "plus_minus_n"
    PLUS_MINUS = "plus_minus"
    INTERNATIONAL = "international"
    GERMAN = "german"

    @property
    def label(self) -> str:
        return _OCTAVE_STYLE_LABELS[self]

    @classmethod
    def from_id(cls, value: str) -> "OctaveStyle":
        normalized = _normalize_id(value, "cbx_octave_")
        normalized = _OCTAVE_STYLE_ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise NotationConfigError("octave_style", value) from exc

    @classmethod
    def choices(cls) -> List[Tuple[str, str]]:
        return [(member.value, member.label) for member in cls]


_OCTAVE_STYLE_LABELS = {
    OctaveStyle.PLUS_MINUS_N: "+n/-n: c-2, c-, c, c+, c+2, c+3...",
    OctaveStyle.PLUS_MINUS: "+/-: c--, c-, c, c+, c++...",
    OctaveStyle.INTERNATIONAL: "International: c0, c1, c2...",
    OctaveStyle.GERMAN: "German: C', C, c, c', c'', c'''...",
}

_OCTAVE_STYLE_ALIASES = {
    "+n/-n": "plus_minus_n",
    "+/-": "plus_minus",
}


class DefaultAccidental(str, Enum):
    """Accidental used for the canonical spelling of half tones."""

    SHARP = "sharp"
    FLAT = "flat"

    @property
    def label(self) -> str:
        if self is DefaultAccidental.SHARP:
            return "Sharp"
        return "Flat"

    @property
    def direction(self) -> int:
        """Half tone step that the accidental applies to its base letter."""

        if self is DefaultAccidental.SHARP:
            return 1
        return -1

    @classmethod
    def from_id(cls, value: str) -> "DefaultAccidental":
        normalized = _normalize_id(value, "cbx_sharpflat_")
        try:
            return cls(normalized)
        except ValueError as exc:
            raise NotationConfigError("default_accidental", value) from exc

    @classmethod
    def choices(cls) -> List[Tuple[str, str]]:
        return [(member.value, member.label) for member in cls]


# Ids of the older combined half tone setting also chose the default accidental.
_LEGACY_HALF_TONE_DIRECTIONS = {
    "sharp": DefaultAccidental.SHARP,
    "flat": DefaultAccidental.FLAT,
    "diesis": DefaultAccidental.SHARP,
    "bemolle": DefaultAccidental.FLAT,
    "cis": DefaultAccidental.SHARP,
    "des": DefaultAccidental.FLAT,
}


def implied_default_accidental(accidental_style_id: str) -> Optional[DefaultAccidental]:
    """Return the default accidental encoded in a legacy half tone id, if any."""

    return _LEGACY_HALF_TONE_DIRECTIONS.get(_normalize_id(accidental_style_id, "cbx_halftone_id_"))


def _implied_or(accidental_style: Any, fallback: DefaultAccidental) -> DefaultAccidental:
    if isinstance(accidental_style, str):
        return implied_default_accidental(accidental_style) or fallback
    return fallback


@dataclass(frozen=True)
class NotationConfig:
    """The four independent settings that drive note name generation."""

    letter_system: LetterSystem = LetterSystem.INTERNATIONAL_LOWER
    accidental_style: AccidentalStyle = AccidentalStyle.SHARP_FLAT_ASCII
    octave_style: OctaveStyle = OctaveStyle.PLUS_MINUS_N
    default_accidental: DefaultAccidental = DefaultAccidental.SHARP

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "NotationConfig":
        """Build a config from option ids, raising on unknown values.

        Missing keys keep their defaults, except that a legacy half tone id
        such as ``"flat"`` also selects the default accidental it implies.
        """

        defaults = cls()
        letter_system = data.get("letter_system")
        accidental_style = data.get("accidental_style")
        octave_style = data.get("octave_style")
        default_accidental = data.get("default_accidental")
        return cls(
            letter_system=(
                LetterSystem.from_id(letter_system)
                if isinstance(letter_system, str)
                else defaults.letter_system
            ),
            accidental_style=(
                AccidentalStyle.from_id(accidental_style)
                if isinstance(accidental_style, str)
                else defaults.accidental_style
            ),
            octave_style=(
                OctaveStyle.from_id(octave_style)
                if isinstance(octave_style, str)
                else defaults.octave_style
            ),
            default_accidental=(
                DefaultAccidental.from_id(default_accidental)
                if isinstance(default_accidental, str)
                else _implied_or(accidental_style, defaults.default_accidental)
            ),
        )

    def to_mapping(self) -> dict[str, str]:
        return {
            "letter_system": self.letter_system.value,
            "accidental_style": self.accidental_style.value,
            "octave_style": self.octave_style.value,
            "default_accidental": self.default_accidental.value,
        }


__all__ = [
    "AccidentalStyle",
    "DefaultAccidental",
    "LetterSystem",
    "NotationConfig",
    "OctaveStyle",
    "implied_default_accidental",
]
