from __future__ import annotations

import re
import subprocess
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from fwversion.compare import Ordering, compare
from fwversion.config import GitSettings, load_settings
from fwversion.errors import GitError
from fwversion.parser import parse
from fwversion.version import SemanticVersion, commit_problem

logger = structlog.get_logger(__name__)

# `<tag>-<distance>-g<hash>` as printed by `git describe --tags --long`.
_DESCRIBE_SUFFIX = re.compile(r"-(?P<distance>0|[1-9][0-9]{0,9})-g(?P<commit>[0-9a-f]{4,40})$")


class GitDescribe(BaseModel):
    """A version read from `git describe`.

    Ordered by the tag's precedence, then by the number of commits past the
    tag, so two builds after the same tag still sort oldest first. The
    commit hash is carried but never compared.
    """

    model_config = ConfigDict(frozen=True)

    version: SemanticVersion
    distance: int = Field(default=0, ge=0)
    commit: str = ""

    @field_validator("commit")
    @classmethod
    def _valid_commit(cls, v: str) -> str:
        problem = commit_problem(v)
        if problem is not None:
            raise ValueError(f"commit: {problem}")
        return v

    @property
    def stamped(self) -> SemanticVersion:
        """The tag's version carrying the described commit, ready to encode."""
        if not self.commit:
            return self.version
        return self.version.with_commit(self.commit)

    def __hash__(self) -> int:
        return hash((self.version, self.distance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitDescribe):
            return NotImplemented
        return compare_described(self, other) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, GitDescribe):
            return NotImplemented
        return compare_described(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, GitDescribe):
            return NotImplemented
        return compare_described(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, GitDescribe):
            return NotImplemented
        return compare_described(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, GitDescribe):
            return NotImplemented
        return compare_described(self, other) is not Ordering.LESS


def compare_described(a: GitDescribe, b: GitDescribe) -> Ordering:
    result = compare(a.version, b.version)
    if result is not Ordering.EQUAL:
        return result
    if a.distance < b.distance:
        return Ordering.LESS
    if a.distance > b.distance:
        return Ordering.GREATER
    return Ordering.EQUAL


def parse_git_describe(text: str) -> GitDescribe:
    raw = str(text).rstrip()
    if raw.startswith("v"):
        raw = raw[1:]

    m = _DESCRIBE_SUFFIX.search(raw)
    if m is None:
        return GitDescribe(version=parse(raw))
    return GitDescribe(
        version=parse(raw[: m.start()]),
        distance=int(m.group("distance")),
        commit=m.group("commit"),
    )


def version_from_git(
    *, cwd: Path | str | None = None, settings: GitSettings | None = None
) -> GitDescribe:
    settings = settings or load_settings()
    cmd = [settings.git_bin, "describe", "--tags", "--long", f"--abbrev={settings.abbrev}"]
    logger.debug("git_describe_started", cmd=cmd, cwd=str(cwd) if cwd is not None else None)
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            text=True,
            capture_output=True,
            timeout=settings.timeout_sec,
            check=False,
        )
    except FileNotFoundError as e:
        logger.warning("git_describe_failed", reason="not_found", git_bin=settings.git_bin)
        raise GitError(f"git executable not found: {settings.git_bin}") from e
    except subprocess.TimeoutExpired as e:
        logger.warning("git_describe_failed", reason="timeout", timeout_sec=settings.timeout_sec)
        raise GitError(f"git describe timed out after {settings.timeout_sec}s") from e

    if proc.returncode != 0:
        stderr = (proc.stderr or "").strip()
        logger.warning(
            "git_describe_failed", reason="exit_status", returncode=proc.returncode, stderr=stderr
        )
        raise GitError(f"git describe exited with {proc.returncode}: {stderr}")

    described = parse_git_describe(proc.stdout)
    logger.debug(
        "git_describe_parsed",
        version=str(described.stamped),
        distance=described.distance,
    )
    return described
