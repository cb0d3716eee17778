from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fwversion.version import SemanticVersion


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _cmp(a: int | str, b: int | str) -> Ordering:
    if a < b:  # type: ignore[operator]
        return Ordering.LESS
    if a > b:  # type: ignore[operator]
        return Ordering.GREATER
    return Ordering.EQUAL


def is_numeric_identifier(ident: str) -> bool:
    return ident.isascii() and ident.isdigit()


def _compare_identifier(a: str, b: str) -> Ordering:
    a_num = is_numeric_identifier(a)
    b_num = is_numeric_identifier(b)
    if a_num and b_num:
        # No leading zeros, so a longer numeral is always the larger one.
        return _cmp(len(a), len(b)) or _cmp(a, b)
    # Numeric identifiers always have lower precedence than alphanumeric ones.
    if a_num:
        return Ordering.LESS
    if b_num:
        return Ordering.GREATER
    return _cmp(a, b)


def compare_extra(a: str, b: str) -> Ordering:
    """Order two pre-release qualifiers.

    An empty qualifier is a release and sorts after every pre-release.
    Otherwise identifiers are compared pairwise; when one side runs out
    first, the shorter qualifier sorts first.
    """
    if a == b:
        return Ordering.EQUAL
    if not a:
        return Ordering.GREATER
    if not b:
        return Ordering.LESS

    left = a.split(".")
    right = b.split(".")
    for x, y in zip(left, right):
        result = _compare_identifier(x, y)
        if result is not Ordering.EQUAL:
            return result
    return _cmp(len(left), len(right))


def compare(a: SemanticVersion, b: SemanticVersion) -> Ordering:
    """Precedence of `a` relative to `b`. `commit` never takes part."""
    for x, y in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        result = _cmp(x, y)
        if result is not Ordering.EQUAL:
            return result
    return compare_extra(a.extra, b.extra)
