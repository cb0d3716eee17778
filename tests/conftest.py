from __future__ import annotations

import sys
from pathlib import Path

import pytest

_GIT_ENV = ("FWVERSION_GIT_BIN", "FWVERSION_GIT_TIMEOUT_SEC", "FWVERSION_GIT_ABBREV")


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture
def clean_git_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """No FWVERSION_* variables and a CWD without a `.env` file.

    Variables are set before deletion so monkeypatch also removes anything a
    test loads from `.env` during teardown.
    """
    for name in _GIT_ENV:
        monkeypatch.setenv(name, "unset")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path
