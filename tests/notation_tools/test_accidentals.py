from __future__ import annotations

import pytest

from notation_tools import (
    AccidentalStyle,
    DefaultAccidental,
    LetterSystem,
    build_accidental_table,
    build_letter_table,
)


def _table(letters: LetterSystem, style: AccidentalStyle, default: DefaultAccidental):
    return build_accidental_table(build_letter_table(letters), style, default)


def test_primary_spellings_with_sharps() -> None:
    table = _table(LetterSystem.INTERNATIONAL_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    assert table.primary == ("c", "c#", "d", "d#", "e", "f", "f#", "g", "g#", "a", "a#", "b")


def test_primary_spellings_with_flats() -> None:
    table = _table(LetterSystem.INTERNATIONAL_UPPER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.FLAT)
    assert table.primary == ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")


def test_german_flat_primary_spellings_are_canonicalized() -> None:
    table = _table(LetterSystem.GERMAN_LOWER, AccidentalStyle.CIS_ES, DefaultAccidental.FLAT)
    assert table.primary == ("c", "des", "d", "es", "e", "f", "ges", "g", "as", "a", "b", "h")


def test_italian_suffixes() -> None:
    table = _table(LetterSystem.ITALIAN_LOWER, AccidentalStyle.DIESIS_BEMOLLE, DefaultAccidental.SHARP)
    assert table.primary[1] == "do-diesis"
    names = {entry.name for entry in table.alternates}
    assert "re-bemolle" in names
    assert "si-diesis" in names


@pytest.mark.parametrize(
    ("letters", "expected"),
    [
        (LetterSystem.INTERNATIONAL_LOWER, 12 * 3 + 7 * 3),
        (LetterSystem.GERMAN_LOWER, 12 * 3 + 8 * 3),
    ],
)
def test_half_tones_only_grow_in_default_direction(letters: LetterSystem, expected: int) -> None:
    table = _table(letters, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    assert len(table.alternates) == expected
    assert all("#b" not in entry.name for entry in table.alternates)


def test_all_three_strengths_are_kept() -> None:
    table = _table(LetterSystem.INTERNATIONAL_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    chain = [
        (entry.name, entry.pitch_class, entry.offset, entry.strength)
        for entry in table.alternates
        if entry.direction is DefaultAccidental.SHARP
        and entry.name.startswith("c")
        and entry.offset == entry.strength
    ]
    assert ("c#", 1, 1, 1) in chain
    assert ("c##", 2, 2, 2) in chain
    assert ("c###", 3, 3, 3) in chain


def test_chain_from_half_tone_starts_at_strength_one() -> None:
    table = _table(LetterSystem.INTERNATIONAL_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    from_c_sharp = [entry for entry in table.alternates if entry.name == "c####"]
    assert len(from_c_sharp) == 1
    entry = from_c_sharp[0]
    assert entry.strength == 3
    assert entry.pitch_class == 4
    single = {
        entry.name
        for entry in table.alternates
        if entry.strength == 1 and entry.direction is DefaultAccidental.SHARP
    }
    assert {"c##", "d##", "f##", "g##", "a##"} <= single


def test_offsets_cross_octave_boundaries() -> None:
    table = _table(LetterSystem.INTERNATIONAL_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    by_name = {entry.name: entry for entry in table.alternates}
    assert by_name["b#"].offset == 12
    assert by_name["b#"].pitch_class == 0
    assert by_name["cb"].offset == -1
    assert by_name["cb"].pitch_class == 11
    assert by_name["cbbb"].offset == -3


def test_german_flat_chain_builds_on_canonical_names() -> None:
    table = _table(LetterSystem.GERMAN_LOWER, AccidentalStyle.CIS_ES, DefaultAccidental.SHARP)
    names = [entry.name for entry in table.alternates if entry.direction is DefaultAccidental.FLAT]
    assert "as" in names
    assert "ases" in names
    assert "eses" in names
    assert "aes" not in names
    assert "ees" not in names


def test_german_ascii_flat_of_h_is_b() -> None:
    table = _table(LetterSystem.GERMAN_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    flats_of_h = [
        entry
        for entry in table.alternates
        if entry.direction is DefaultAccidental.FLAT and entry.strength == 1 and entry.pitch_class == 10
    ]
    assert {entry.name for entry in flats_of_h} == {"b"}


def test_alternates_reaching_one_pitch_class() -> None:
    table = _table(LetterSystem.INTERNATIONAL_LOWER, AccidentalStyle.SHARP_FLAT_ASCII, DefaultAccidental.SHARP)
    names = {entry.name for entry in table.alternates if entry.pitch_class == 1}
    assert {"db", "c#", "ebbb", "b##", "a####"} <= names
