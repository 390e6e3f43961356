"""File logging for the note dictionary.

Table builds and reconfigurations log through the standard ``logging``
module.  :func:`ensure_app_logging` attaches one tagged file handler to the
root logger; calling it again reuses that handler.

``NOTATION_LOG_FILE`` names the log file directly.  Otherwise
``NOTATION_LOG_DIR`` (or ``~/.notation_dictionary/logs``) holds
``notation.log``.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from pathlib import Path

_LOG_FILE_ENV = "NOTATION_LOG_FILE"
_LOG_DIR_ENV = "NOTATION_LOG_DIR"
_DEFAULT_LOGNAME = "notation.log"
_HANDLER_TAG = "_notation_logging_handler"
_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class LogVerbosity(str, Enum):
    """Verbosity levels supported by the log file."""

    DISABLED = "disabled"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"

    @property
    def level(self) -> int:
        return _VERBOSITY_LEVELS[self]


_VERBOSITY_LEVELS: dict[LogVerbosity, int] = {
    LogVerbosity.DISABLED: logging.CRITICAL + 1,
    LogVerbosity.ERROR: logging.ERROR,
    LogVerbosity.WARNING: logging.WARNING,
    LogVerbosity.INFO: logging.INFO,
    LogVerbosity.VERBOSE: logging.DEBUG,
}

_DEFAULT_VERBOSITY = LogVerbosity.INFO
_verbosity = _DEFAULT_VERBOSITY
_file_handler: logging.FileHandler | None = None


def ensure_app_logging() -> Path:
    """Install the file handler on first use and return the log file path."""

    global _file_handler

    if _file_handler is not None:
        return Path(_file_handler.baseFilename)

    log_path = _resolve_log_path()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    _file_handler = _build_file_handler(log_path)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.addHandler(_file_handler)

    logger.info("Writing notation logs to %s (verbosity=%s)", log_path, _verbosity.value)
    return log_path


def set_file_log_verbosity(verbosity: LogVerbosity | str) -> None:
    """Change the minimum severity written to the log file."""

    global _verbosity

    if not isinstance(verbosity, LogVerbosity):
        try:
            verbosity = LogVerbosity(verbosity.lower())
        except ValueError as exc:
            raise ValueError(f"Unsupported log verbosity: {verbosity}") from exc

    ensure_app_logging()
    _verbosity = verbosity
    if _file_handler is not None:
        _file_handler.setLevel(verbosity.level)
    logger.info("File log verbosity set to %s", verbosity.value)


def get_file_log_verbosity() -> LogVerbosity:
    return _verbosity


def _build_file_handler(log_path: Path) -> logging.FileHandler:
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setLevel(_verbosity.level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    return handler


def _resolve_log_path() -> Path:
    env_file = os.environ.get(_LOG_FILE_ENV)
    if env_file:
        return Path(env_file).expanduser()

    env_dir = os.environ.get(_LOG_DIR_ENV)
    log_dir = Path(env_dir).expanduser() if env_dir else Path.home() / ".notation_dictionary" / "logs"
    return log_dir / _DEFAULT_LOGNAME


def _reset_for_tests() -> None:
    """Detach and close the handler installed by :func:`ensure_app_logging`."""

    global _file_handler, _verbosity

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)
            handler.close()

    _file_handler = None
    _verbosity = _DEFAULT_VERBOSITY


__all__ = [
    "LogVerbosity",
    "ensure_app_logging",
    "get_file_log_verbosity",
    "set_file_log_verbosity",
]
