from __future__ import annotations

import pytest

from notation_tools import InvalidOctave, OctaveFormatter, OctaveStyle
from notation_tools.octaves import MAX_OCTAVE, MIN_OCTAVE


@pytest.mark.parametrize(
    ("style", "octave", "expected"),
    [
        (OctaveStyle.PLUS_MINUS_N, -6, "-6"),
        (OctaveStyle.PLUS_MINUS_N, -2, "-2"),
        (OctaveStyle.PLUS_MINUS_N, -1, "-"),
        (OctaveStyle.PLUS_MINUS_N, 0, ""),
        (OctaveStyle.PLUS_MINUS_N, 1, "+"),
        (OctaveStyle.PLUS_MINUS_N, 2, "+2"),
        (OctaveStyle.PLUS_MINUS_N, 6, "+6"),
        (OctaveStyle.PLUS_MINUS, -3, "---"),
        (OctaveStyle.PLUS_MINUS, 0, ""),
        (OctaveStyle.PLUS_MINUS, 4, "++++"),
        (OctaveStyle.INTERNATIONAL, -6, "-2"),
        (OctaveStyle.INTERNATIONAL, -5, "-1"),
        (OctaveStyle.INTERNATIONAL, 0, "4"),
        (OctaveStyle.INTERNATIONAL, 6, "10"),
        (OctaveStyle.GERMAN, -6, "''''"),
        (OctaveStyle.GERMAN, -3, "'"),
        (OctaveStyle.GERMAN, -2, ""),
        (OctaveStyle.GERMAN, -1, ""),
        (OctaveStyle.GERMAN, 0, "'"),
        (OctaveStyle.GERMAN, 6, "'''''''"),
    ],
)
def test_postfix_tables(style: OctaveStyle, octave: int, expected: str) -> None:
    assert OctaveFormatter(style).postfix(octave) == expected


@pytest.mark.parametrize("style", list(OctaveStyle))
def test_every_supported_octave_has_a_postfix(style: OctaveStyle) -> None:
    formatter = OctaveFormatter(style)
    postfixes = [formatter.postfix(octave) for octave in range(MIN_OCTAVE, MAX_OCTAVE + 1)]
    assert len(postfixes) == 13


@pytest.mark.parametrize("octave", [MIN_OCTAVE - 1, MAX_OCTAVE + 1, 42])
def test_out_of_range_octave_raises(octave: int) -> None:
    with pytest.raises(InvalidOctave) as excinfo:
        OctaveFormatter(OctaveStyle.PLUS_MINUS_N).postfix(octave)
    assert excinfo.value.octave == octave


def test_invalid_octave_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        OctaveFormatter(OctaveStyle.GERMAN).decorate("c", 7)


@pytest.mark.parametrize(
    ("name", "octave", "expected"),
    [
        ("c", -5, "C'''"),
        ("c", -2, "C"),
        ("C", -1, "c"),
        ("C", 0, "c'"),
        ("Fa-diesis", 0, "fa-diesis'"),
        ("bb", -5, "Bb'''"),
    ],
)
def test_german_octaves_adjust_case(name: str, octave: int, expected: str) -> None:
    assert OctaveFormatter(OctaveStyle.GERMAN).decorate(name, octave) == expected


def test_other_styles_keep_case() -> None:
    formatter = OctaveFormatter(OctaveStyle.INTERNATIONAL)
    assert formatter.decorate("C#", -5) == "C#-1"
    assert formatter.decorate("c#", 2) == "c#6"

