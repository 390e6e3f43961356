"""Error types raised by the note naming tables."""

from __future__ import annotations


class NotationError(ValueError):
    """Base error for invalid notation settings or table queries."""


class InvalidOctave(NotationError):
    """Raised when an octave index falls outside the supported range."""

    def __init__(self, octave: int) -> None:
        super().__init__(f"Octave {octave} is outside the supported range -6..6")
        self.octave = octave


class NotationConfigError(NotationError):
    """Raised when a notation option id is not recognised."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Unsupported value {value!r} for notation option '{field}'")
        self.field = field
        self.value = value


__all__ = ["InvalidOctave", "NotationConfigError", "NotationError"]
