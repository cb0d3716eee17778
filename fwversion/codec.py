"""Fixed-width binary record for embedding a version in firmware images.

Layout version 1, all integers little-endian::

    offset  size  field
    0       2     layout version (u16, always 1)
    2       2     major (u16)
    4       2     minor (u16)
    6       2     patch (u16)
    8       32    extra  (ASCII, left-justified, NUL padded)
    40      40    commit (ASCII, left-justified, NUL padded)
                  -> 80 bytes total

Strings longer than their field are rejected, never truncated. A string
that fills its field exactly carries no terminating NUL. Any byte after the
first NUL of a string field must also be NUL.

Changing any of these constants is a wire-format break and must come with
a new LAYOUT_VERSION.
"""

from __future__ import annotations

import struct
from typing import Any

from pydantic import ValidationError

from fwversion.errors import DecodeError, EncodeError
from fwversion.version import SemanticVersion

LAYOUT_VERSION = 1
BYTE_ORDER = "little"
HEADER_FORMAT = "<4H"
header_struct = struct.Struct(HEADER_FORMAT)
HEADER_SIZE = header_struct.size
MAX_NUMBER = 0xFFFF

EXTRA_OFFSET = HEADER_SIZE
EXTRA_SIZE = 32
COMMIT_OFFSET = EXTRA_OFFSET + EXTRA_SIZE
COMMIT_SIZE = 40
RECORD_SIZE = COMMIT_OFFSET + COMMIT_SIZE

_FIELD_OFFSETS = {
    "layout_version": 0,
    "major": 2,
    "minor": 4,
    "patch": 6,
    "extra": EXTRA_OFFSET,
    "commit": COMMIT_OFFSET,
}


def describe_layout() -> dict[str, Any]:
    """JSON-ready description of the record for tooling in other languages."""
    return {
        "layout_version": LAYOUT_VERSION,
        "byte_order": BYTE_ORDER,
        "record_size": RECORD_SIZE,
        "padding": "nul",
        "fields": [
            {"name": "layout_version", "offset": 0, "size": 2, "type": "u16"},
            {"name": "major", "offset": 2, "size": 2, "type": "u16"},
            {"name": "minor", "offset": 4, "size": 2, "type": "u16"},
            {"name": "patch", "offset": 6, "size": 2, "type": "u16"},
            {"name": "extra", "offset": EXTRA_OFFSET, "size": EXTRA_SIZE, "type": "ascii"},
            {"name": "commit", "offset": COMMIT_OFFSET, "size": COMMIT_SIZE, "type": "ascii"},
        ],
    }


def _encode_number(value: int, *, field: str) -> int:
    if value < 0 or value > MAX_NUMBER:
        raise EncodeError(f"{value} does not fit in u16 (0..{MAX_NUMBER})", field=field, value=value)
    return value


def _encode_text(value: str, *, field: str, size: int) -> bytes:
    try:
        raw = value.encode("ascii")
    except UnicodeEncodeError as e:
        raise EncodeError("must be ASCII", field=field, value=value) from e
    if len(raw) > size:
        raise EncodeError(
            f"{len(raw)} bytes exceeds the {size}-byte field", field=field, value=value
        )
    return raw.ljust(size, b"\x00")


def encode(v: SemanticVersion) -> bytes:
    header = header_struct.pack(
        LAYOUT_VERSION,
        _encode_number(v.major, field="major"),
        _encode_number(v.minor, field="minor"),
        _encode_number(v.patch, field="patch"),
    )
    return (
        header
        + _encode_text(v.extra, field="extra", size=EXTRA_SIZE)
        + _encode_text(v.commit, field="commit", size=COMMIT_SIZE)
    )


def _decode_text(data: bytes, *, field: str, offset: int, size: int) -> str:
    raw = data[offset : offset + size]
    end = raw.find(b"\x00")
    if end != -1:
        for i in range(end, size):
            if raw[i] != 0:
                raise DecodeError(
                    "non-zero byte after string terminator", field=field, offset=offset + i
                )
        raw = raw[:end]
    try:
        return raw.decode("ascii")
    except UnicodeDecodeError as e:
        raise DecodeError("string is not ASCII", field=field, offset=offset + e.start) from e


def decode(data: bytes | bytearray | memoryview) -> SemanticVersion:
    data = bytes(data)
    if len(data) != RECORD_SIZE:
        raise DecodeError(f"expected {RECORD_SIZE} bytes, got {len(data)}", field="record")

    layout, major, minor, patch = header_struct.unpack_from(data, 0)
    if layout != LAYOUT_VERSION:
        raise DecodeError(
            f"unsupported layout version {layout} (expected {LAYOUT_VERSION})",
            field="layout_version",
            offset=0,
        )

    extra = _decode_text(data, field="extra", offset=EXTRA_OFFSET, size=EXTRA_SIZE)
    commit = _decode_text(data, field="commit", offset=COMMIT_OFFSET, size=COMMIT_SIZE)
    try:
        return SemanticVersion(major=major, minor=minor, patch=patch, extra=extra, commit=commit)
    except ValidationError as e:
        err = e.errors()[0]
        field = str(err["loc"][0]) if err.get("loc") else "record"
        raise DecodeError(err["msg"], field=field, offset=_FIELD_OFFSETS.get(field)) from e
