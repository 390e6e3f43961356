"""Application-wide configuration loaded from JSON resources."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Mapping, TypeVar

from notation_tools.errors import NotationConfigError
from notation_tools.settings import (
    AccidentalStyle,
    DefaultAccidental,
    LetterSystem,
    NotationConfig,
    OctaveStyle,
    implied_default_accidental,
)

logger = logging.getLogger(__name__)

_CONFIG_RESOURCE = "app.json"
_CONFIG_PATH_ENV = "NOTATION_CONFIG_PATH"
_DEFAULT_UNKNOWN_NOTE_LABEL = "unknown"
_APP_CONFIG_CACHE: AppConfig | None = None

_OptionT = TypeVar("_OptionT")


@dataclass(frozen=True)
class AppConfig:
    """Structured configuration values for the note dictionary."""

    notation: NotationConfig
    unknown_note_label: str


def get_app_config() -> AppConfig:
    """Return the cached application configuration."""

    global _APP_CONFIG_CACHE
    if _APP_CONFIG_CACHE is None:
        _APP_CONFIG_CACHE = load_app_config()
    return _APP_CONFIG_CACHE


def reset_app_config_cache() -> None:
    """Reset the cached configuration for subsequent reloads."""

    global _APP_CONFIG_CACHE
    _APP_CONFIG_CACHE = None


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration from ``path``, ``NOTATION_CONFIG_PATH`` or the bundled resource."""

    data = _read_config_data(path)
    notation_section = data.get("notation") if isinstance(data, Mapping) else None
    notation = _parse_notation_section(notation_section)
    label = data.get("unknown_note_label") if isinstance(data, Mapping) else None
    if not isinstance(label, str) or not label.strip():
        label = _DEFAULT_UNKNOWN_NOTE_LABEL
    return AppConfig(notation=notation, unknown_note_label=label.strip())


def get_notation_config() -> NotationConfig:
    """Convenience accessor for the configured notation settings."""

    return get_app_config().notation


def _read_config_data(path: str | Path | None) -> Mapping[str, Any]:
    if path is not None:
        return _load_json_from_path(Path(path).expanduser())
    override = os.environ.get(_CONFIG_PATH_ENV)
    if override:
        return _load_json_from_path(Path(override).expanduser())
    return _load_default_config_data()


def _load_json_from_path(path: Path) -> Mapping[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError:
        logger.warning("Unable to read configuration file %s; using defaults", path)
        return {}
    return _parse_json(raw)


def _load_default_config_data() -> Mapping[str, Any]:
    try:
        resource = resources.files(__package__).joinpath(_CONFIG_RESOURCE)
        raw = resource.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return {}
    return _parse_json(raw)


def _parse_json(raw: str) -> Mapping[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Configuration is not valid JSON; using defaults")
        return {}
    if isinstance(parsed, Mapping):
        return parsed
    return {}


def _parse_notation_section(section: Mapping[str, Any] | None) -> NotationConfig:
    defaults = NotationConfig()
    if not isinstance(section, Mapping):
        return defaults
    return NotationConfig(
        letter_system=_coerce_option(
            section, "letter_system", LetterSystem.from_id, defaults.letter_system
        ),
        accidental_style=_coerce_option(
            section, "accidental_style", AccidentalStyle.from_id, defaults.accidental_style
        ),
        octave_style=_coerce_option(
            section, "octave_style", OctaveStyle.from_id, defaults.octave_style
        ),
        default_accidental=_coerce_option(
            section,
            "default_accidental",
            DefaultAccidental.from_id,
            _legacy_default_accidental(section, defaults.default_accidental),
        ),
    )


def _legacy_default_accidental(
    section: Mapping[str, Any], default: DefaultAccidental
) -> DefaultAccidental:
    style_id = section.get("accidental_style")
    if section.get("default_accidental") is not None or not isinstance(style_id, str):
        return default
    implied = implied_default_accidental(style_id)
    if implied is None:
        return default
    logger.info("Legacy accidental id %r implies the %s default accidental", style_id, implied.value)
    return implied


def _coerce_option(
    section: Mapping[str, Any],
    key: str,
    parse: Callable[[str], _OptionT],
    default: _OptionT,
) -> _OptionT:
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        logger.warning("Ignoring non-string value %r for %s", value, key)
        return default
    try:
        return parse(value)
    except NotationConfigError as exc:
        logger.warning("%s; falling back to %s", exc, getattr(default, "value", default))
        return default


__all__ = [
    "AppConfig",
    "get_app_config",
    "get_notation_config",
    "load_app_config",
    "reset_app_config_cache",
]
