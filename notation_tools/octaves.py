"""Octave markers appended to note names.

Octave indices are relative to middle C: octave 0 holds MIDI notes 60..71,
octave -5 starts at MIDI note 0.
"""

from __future__ import annotations

from typing import Dict, Mapping

from .errors import InvalidOctave
from .settings import OctaveStyle

MIN_OCTAVE = -6
MAX_OCTAVE = 6
MIDDLE_C = 60

_PLUS_MINUS_N: Dict[int, str] = {
    -6: "-6",
    -5: "-5",
    -4: "-4",
    -3: "-3",
    -2: "-2",
    -1: "-",
    0: "",
    1: "+",
    2: "+2",
    3: "+3",
    4: "+4",
    5: "+5",
    6: "+6",
}

_PLUS_MINUS: Dict[int, str] = {
    -6: "------",
    -5: "-----",
    -4: "----",
    -3: "---",
    -2: "--",
    -1: "-",
    0: "",
    1: "+",
    2: "++",
    3: "+++",
    4: "++++",
    5: "+++++",
    6: "++++++",
}

# MIDI note 0 is C-1 and middle C is C4.
_INTERNATIONAL: Dict[int, str] = {
    -6: "-2",
    -5: "-1",
    -4: "0",
    -3: "1",
    -2: "2",
    -1: "3",
    0: "4",
    1: "5",
    2: "6",
    3: "7",
    4: "8",
    5: "9",
    6: "10",
}

# Upper case letters below the small octave, lower case from there on.
_GERMAN: Dict[int, str] = {
    -6: "''''",
    -5: "'''",
    -4: "''",
    -3: "'",
    -2: "",
    -1: "",
    0: "'",
    1: "''",
    2: "'''",
    3: "''''",
    4: "'''''",
    5: "''''''",
    6: "'''''''",
}

_TABLES: Mapping[OctaveStyle, Mapping[int, str]] = {
    OctaveStyle.PLUS_MINUS_N: _PLUS_MINUS_N,
    OctaveStyle.PLUS_MINUS: _PLUS_MINUS,
    OctaveStyle.INTERNATIONAL: _INTERNATIONAL,
    OctaveStyle.GERMAN: _GERMAN,
}


class OctaveFormatter:
    """Look up octave postfixes for one octave style."""

    def __init__(self, style: OctaveStyle) -> None:
        self.style = style
        self._table = _TABLES[style]

    def postfix(self, octave: int) -> str:
        try:
            return self._table[octave]
        except KeyError:
            raise InvalidOctave(octave) from None

    def decorate(self, name: str, octave: int) -> str:
        """Return ``name`` with the octave marker (and German case rule) applied."""

        return self.apply_case(name, octave) + self.postfix(octave)

    def apply_case(self, name: str, octave: int) -> str:
        if self.style is not OctaveStyle.GERMAN or not name:
            return name
        if octave < -1:
            return name[0].upper() + name[1:]
        return name[0].lower() + name[1:]


def octave_of(note: int) -> int:
    """Return the octave index that contains MIDI ``note``."""

    return (note - MIDDLE_C) // 12


__all__ = [
    "MAX_OCTAVE",
    "MIDDLE_C",
    "MIN_OCTAVE",
    "OctaveFormatter",
    "octave_of",
]
