from __future__ import annotations

import string

from fwversion.codec import COMMIT_SIZE, EXTRA_SIZE, MAX_NUMBER
from fwversion.compare import is_numeric_identifier
from fwversion.errors import ParseError, ParseErrorKind
from fwversion.version import IDENT_CHARS, SemanticVersion

_DIGITS = frozenset(string.digits)


def _fail(kind: ParseErrorKind, message: str, text: str, position: int) -> ParseError:
    return ParseError(kind, message, text=text, position=position)


def _number(text: str, pos: int, name: str) -> tuple[int, int]:
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    if pos == start:
        if start >= len(text):
            raise _fail(ParseErrorKind.MISSING_COMPONENT, f"missing {name} version", text, start)
        raise _fail(
            ParseErrorKind.INVALID_CHARACTER,
            f"expected digit in {name} version, found {text[start]!r}",
            text,
            start,
        )
    digits = text[start:pos]
    if len(digits) > 1 and digits.startswith("0"):
        raise _fail(
            ParseErrorKind.LEADING_ZERO, f"{name} version {digits!r} has a leading zero", text, start
        )
    # Bounded by length first so huge inputs never reach int().
    if len(digits) > len(str(MAX_NUMBER)) or int(digits) > MAX_NUMBER:
        raise _fail(
            ParseErrorKind.OUT_OF_RANGE,
            f"{name} version exceeds {MAX_NUMBER}",
            text,
            start,
        )
    return int(digits), pos


def _separator(text: str, pos: int, name: str) -> int:
    if pos >= len(text):
        raise _fail(ParseErrorKind.MISSING_COMPONENT, f"missing {name} version", text, pos)
    if text[pos] != ".":
        raise _fail(
            ParseErrorKind.INVALID_CHARACTER,
            f"expected '.' before {name} version, found {text[pos]!r}",
            text,
            pos,
        )
    return pos + 1


def _extra(text: str, pos: int) -> tuple[str, int]:
    start = pos
    while True:
        ident_start = pos
        while pos < len(text) and text[pos] in IDENT_CHARS:
            pos += 1
        ident = text[ident_start:pos]
        if not ident:
            raise _fail(
                ParseErrorKind.EMPTY_IDENTIFIER, "empty identifier in extra", text, ident_start
            )
        if is_numeric_identifier(ident) and len(ident) > 1 and ident.startswith("0"):
            raise _fail(
                ParseErrorKind.LEADING_ZERO,
                f"numeric identifier {ident!r} has a leading zero",
                text,
                ident_start,
            )
        if pos < len(text) and text[pos] == ".":
            pos += 1
            continue
        break

    if pos < len(text) and text[pos] != "+":
        raise _fail(
            ParseErrorKind.INVALID_CHARACTER, f"invalid character {text[pos]!r} in extra", text, pos
        )
    extra = text[start:pos]
    if len(extra) > EXTRA_SIZE:
        raise _fail(
            ParseErrorKind.TOO_LONG,
            f"extra is {len(extra)} characters, at most {EXTRA_SIZE} allowed",
            text,
            start,
        )
    return extra, pos


def _commit(text: str, pos: int) -> tuple[str, int]:
    start = pos
    while pos < len(text) and text[pos] in IDENT_CHARS:
        pos += 1
    if pos == start:
        raise _fail(ParseErrorKind.EMPTY_IDENTIFIER, "empty commit identifier", text, start)
    if pos < len(text):
        raise _fail(
            ParseErrorKind.INVALID_CHARACTER, f"invalid character {text[pos]!r} in commit", text, pos
        )
    commit = text[start:pos]
    if len(commit) > COMMIT_SIZE:
        raise _fail(
            ParseErrorKind.TOO_LONG,
            f"commit is {len(commit)} characters, at most {COMMIT_SIZE} allowed",
            text,
            start,
        )
    return commit, pos


def parse(text: str) -> SemanticVersion:
    """Parse ``MAJOR.MINOR.PATCH[-EXTRA][+COMMIT]``.

    Every value accepted here also fits the binary record, so parsing and
    then encoding never fails.
    """
    text = str(text)
    if not text:
        raise _fail(ParseErrorKind.EMPTY, "empty version", text, 0)

    major, pos = _number(text, 0, "major")
    pos = _separator(text, pos, "minor")
    minor, pos = _number(text, pos, "minor")
    pos = _separator(text, pos, "patch")
    patch, pos = _number(text, pos, "patch")

    if pos < len(text) and text[pos] not in "-+":
        if text[pos] in IDENT_CHARS:
            raise _fail(
                ParseErrorKind.INVALID_CHARACTER,
                f"expected digit in patch version, found {text[pos]!r}",
                text,
                pos,
            )
        raise _fail(
            ParseErrorKind.TRAILING_INPUT, f"unexpected {text[pos:]!r} after version", text, pos
        )

    extra = ""
    if pos < len(text) and text[pos] == "-":
        extra, pos = _extra(text, pos + 1)
    commit = ""
    if pos < len(text) and text[pos] == "+":
        commit, pos = _commit(text, pos + 1)

    return SemanticVersion(major=major, minor=minor, patch=patch, extra=extra, commit=commit)
