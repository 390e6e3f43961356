"""Print the note name table for a notation configuration."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TextIO


def ensure_project_root_on_sys_path() -> Path:
    """Ensure the project root is importable when the script runs standalone."""

    project_root = Path(__file__).resolve().parent.parent
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)
    return project_root


ensure_project_root_on_sys_path()

from app.config import load_app_config
from notation_tools import (
    AccidentalStyle,
    DefaultAccidental,
    LetterSystem,
    NotationConfig,
    NoteDictionary,
    OctaveStyle,
)
from shared.logging_config import LogVerbosity, ensure_app_logging, set_file_log_verbosity

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON configuration file (defaults to the bundled app.json).",
    )
    parser.add_argument(
        "--letters",
        choices=[value for value, _label in LetterSystem.choices()],
        help="Override the note letter system.",
    )
    parser.add_argument(
        "--accidentals",
        choices=[value for value, _label in AccidentalStyle.choices()],
        help="Override the accidental symbol style.",
    )
    parser.add_argument(
        "--octaves",
        choices=[value for value, _label in OctaveStyle.choices()],
        help="Override the octave naming style.",
    )
    parser.add_argument(
        "--default-accidental",
        choices=[value for value, _label in DefaultAccidental.choices()],
        help="Override the accidental used for canonical half tone names.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the table as JSON instead of aligned text.",
    )
    parser.add_argument(
        "--log-verbosity",
        choices=[member.value for member in LogVerbosity],
        default=None,
        help="Write a log file with the given verbosity.",
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> tuple[NotationConfig, str]:
    """Merge command line overrides onto the loaded configuration."""

    app_config = load_app_config(args.config) if args.config else load_app_config()
    overrides = app_config.notation.to_mapping()
    if args.letters:
        overrides["letter_system"] = args.letters
    if args.accidentals:
        overrides["accidental_style"] = args.accidentals
    if args.octaves:
        overrides["octave_style"] = args.octaves
    if args.default_accidental:
        overrides["default_accidental"] = args.default_accidental
    return NotationConfig.from_mapping(overrides), app_config.unknown_note_label


def render_table(dictionary: NoteDictionary, as_json: bool, stream: TextIO) -> None:
    rows = dictionary.alternate_rows()
    if as_json:
        payload = {
            "config": dictionary.config.to_mapping(),
            "notes": [
                {"number": number, "name": name, "alternates": list(alternates)}
                for number, name, alternates in rows
            ],
        }
        stream.write(json.dumps(payload, indent=2, ensure_ascii=False) + "\n")
        return

    width = max(len(name) for _number, name, _alternates in rows)
    for number, name, alternates in rows:
        line = f"{number:>3}  {name:<{width}}"
        if alternates:
            line += "  " + ", ".join(alternates)
        stream.write(line.rstrip() + "\n")


def main(argv: list[str] | None = None, stream: TextIO | None = None) -> int:
    args = parse_args(argv)
    if args.log_verbosity:
        ensure_app_logging()
        set_file_log_verbosity(args.log_verbosity)

    config, unknown_label = resolve_config(args)
    logger.debug("Dumping note table for %s", config.to_mapping())

    dictionary = NoteDictionary(config, unknown_label=unknown_label)
    render_table(dictionary, args.json, stream or sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
