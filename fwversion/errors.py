from __future__ import annotations

from enum import Enum


class VersionError(ValueError):
    pass


class ParseErrorKind(str, Enum):
    EMPTY = "empty"
    MISSING_COMPONENT = "missing_component"
    INVALID_CHARACTER = "invalid_character"
    LEADING_ZERO = "leading_zero"
    OUT_OF_RANGE = "out_of_range"
    EMPTY_IDENTIFIER = "empty_identifier"
    TOO_LONG = "too_long"
    TRAILING_INPUT = "trailing_input"


class ParseError(VersionError):
    def __init__(self, kind: ParseErrorKind, message: str, *, text: str, position: int) -> None:
        self.kind = kind
        self.text = text
        self.position = position
        super().__init__(f"col {position + 1}: {message}")


class EncodeError(VersionError):
    def __init__(self, message: str, *, field: str, value: object = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}: {message}")


class DecodeError(VersionError):
    def __init__(self, message: str, *, field: str, offset: int | None = None) -> None:
        self.field = field
        self.offset = offset
        prefix = f"{field}"
        if offset is not None:
            prefix += f" @{offset}"
        super().__init__(f"{prefix}: {message}")


class GitError(VersionError):
    pass
