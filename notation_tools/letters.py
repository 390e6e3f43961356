"""Natural note letters for each supported letter system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .settings import LetterSystem

_INTERNATIONAL = {0: "C", 2: "D", 4: "E", 5: "F", 7: "G", 9: "A", 11: "B"}
_ITALIAN = {0: "Do", 2: "Re", 4: "Mi", 5: "Fa", 7: "Sol", 9: "La", 11: "Si"}
# Pitch class 10 already carries the natural letter "B" in German.
_GERMAN = {0: "C", 2: "D", 4: "E", 5: "F", 7: "G", 9: "A", 10: "B", 11: "H"}


@dataclass(frozen=True)
class BaseLetterTable:
    """Natural letters indexed by pitch class plus the pitch classes without one."""

    letters: Tuple[Optional[str], ...]
    half_tones: FrozenSet[int]

    def letter(self, pitch_class: int) -> Optional[str]:
        return self.letters[pitch_class % 12]

    def is_half_tone(self, pitch_class: int) -> bool:
        return pitch_class % 12 in self.half_tones


def build_letter_table(system: LetterSystem) -> BaseLetterTable:
    """Return the natural letters for ``system`` with its case applied."""

    if system.is_german:
        naturals = _GERMAN
    elif system in (LetterSystem.ITALIAN_LOWER, LetterSystem.ITALIAN_UPPER):
        naturals = _ITALIAN
    else:
        naturals = _INTERNATIONAL

    upper = system.is_upper
    letters = tuple(
        _apply_case(naturals[pc], upper) if pc in naturals else None for pc in range(12)
    )
    half_tones = frozenset(pc for pc in range(12) if pc not in naturals)
    return BaseLetterTable(letters=letters, half_tones=half_tones)


def _apply_case(letter: str, upper: bool) -> str:
    if upper:
        return letter[0].upper() + letter[1:]
    return letter.lower()


__all__ = ["BaseLetterTable", "build_letter_table"]
