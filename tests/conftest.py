from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    """Guarantee the repository root is discoverable for absolute imports."""

    root = Path(__file__).resolve().parent.parent
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    tests_dir = root / "tests"
    tests_str = str(tests_dir)
    if tests_str not in sys.path:
        sys.path.insert(1, tests_str)


_ensure_project_root_on_path()

from app.config import reset_app_config_cache


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory):
    """Keep tests away from user configuration and log files."""

    log_dir = tmp_path_factory.mktemp("logs")
    monkeypatch.setenv("NOTATION_LOG_DIR", str(log_dir))
    monkeypatch.delenv("NOTATION_LOG_FILE", raising=False)
    monkeypatch.delenv("NOTATION_CONFIG_PATH", raising=False)
    reset_app_config_cache()

    yield

    reset_app_config_cache()
