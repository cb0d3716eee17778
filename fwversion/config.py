from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from fwversion.codec import COMMIT_SIZE

# git refuses to abbreviate below this.
MIN_ABBREV = 4


def load_env() -> None:
    # Search from CWD so a build script run from the project tree picks up its `.env`.
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


@dataclass(frozen=True)
class GitSettings:
    git_bin: str = "git"
    timeout_sec: float = 10.0
    abbrev: int = 8


def _env_number(name: str, default: str) -> float:
    raw = (os.getenv(name) or default).strip()
    try:
        return float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e


def load_settings() -> GitSettings:
    load_env()
    timeout_sec = _env_number("FWVERSION_GIT_TIMEOUT_SEC", "10")
    if timeout_sec <= 0:
        raise ValueError("FWVERSION_GIT_TIMEOUT_SEC must be positive")
    abbrev = int(_env_number("FWVERSION_GIT_ABBREV", "8"))
    return GitSettings(
        git_bin=(os.getenv("FWVERSION_GIT_BIN") or "git").strip(),
        timeout_sec=timeout_sec,
        abbrev=min(max(abbrev, MIN_ABBREV), COMMIT_SIZE),
    )
