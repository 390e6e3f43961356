from __future__ import annotations

from itertools import product

from notation_tools import (
    AccidentalStyle,
    DefaultAccidental,
    LetterSystem,
    NotationConfig,
    OctaveStyle,
)

ALL_CONFIGS = [
    NotationConfig(
        letter_system=letters,
        accidental_style=accidentals,
        octave_style=octaves,
        default_accidental=default,
    )
    for letters, accidentals, octaves, default in product(
        LetterSystem, AccidentalStyle, OctaveStyle, DefaultAccidental
    )
]


def config_id(config: NotationConfig) -> str:
    return "-".join(config.to_mapping().values())


def make_config(
    letters: str = "international_lc",
    accidentals: str = "sharp_flat",
    octaves: str = "plus_minus_n",
    default: str = "sharp",
) -> NotationConfig:
    return NotationConfig.from_mapping(
        {
            "letter_system": letters,
            "accidental_style": accidentals,
            "octave_style": octaves,
            "default_accidental": default,
        }
    )
