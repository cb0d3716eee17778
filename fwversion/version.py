from __future__ import annotations

import string

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fwversion.compare import Ordering, compare, is_numeric_identifier

IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "-")


def identifier_problem(ident: str) -> str | None:
    if not ident:
        return "empty identifier"
    if any(ch not in IDENT_CHARS for ch in ident):
        return f"invalid character in identifier {ident!r}"
    if is_numeric_identifier(ident) and len(ident) > 1 and ident.startswith("0"):
        return f"numeric identifier {ident!r} has a leading zero"
    return None


def commit_problem(commit: str) -> str | None:
    if any(ch not in IDENT_CHARS for ch in commit):
        return f"invalid character in identifier {commit!r}"
    return None


class SemanticVersion(BaseModel):
    """MAJOR.MINOR.PATCH[-EXTRA][+COMMIT].

    Equality, ordering and hashing follow precedence, so `commit` is ignored
    by all three. Compare `model_dump()` output for field-for-field identity.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    extra: str = ""
    commit: str = ""

    @field_validator("extra")
    @classmethod
    def _valid_extra(cls, v: str) -> str:
        if not v:
            return v
        for ident in v.split("."):
            problem = identifier_problem(ident)
            if problem is not None:
                raise ValueError(f"extra: {problem}")
        return v

    @field_validator("commit")
    @classmethod
    def _valid_commit(cls, v: str) -> str:
        if not v:
            return v
        problem = commit_problem(v)
        if problem is not None:
            raise ValueError(f"commit: {problem}")
        return v

    @classmethod
    def parse(cls, raw: str) -> "SemanticVersion":
        from fwversion.parser import parse

        return parse(raw)

    @classmethod
    def from_bytes(cls, data: bytes) -> "SemanticVersion":
        from fwversion.codec import decode

        return decode(data)

    def to_bytes(self) -> bytes:
        from fwversion.codec import encode

        return encode(self)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.extra)

    def with_commit(self, commit: str) -> "SemanticVersion":
        return SemanticVersion(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            extra=self.extra,
            commit=commit,
        )

    def __str__(self) -> str:
        core = f"{self.major}.{self.minor}.{self.patch}"
        pre = "" if not self.extra else "-" + self.extra
        build = "" if not self.commit else "+" + self.commit
        return core + pre + build

    def _precedence_key(self) -> tuple[int, int, int, str]:
        return (self.major, self.minor, self.patch, self.extra)

    def __hash__(self) -> int:
        return hash(self._precedence_key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is not Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS
