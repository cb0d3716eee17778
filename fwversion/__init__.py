from __future__ import annotations

from fwversion.codec import (
    LAYOUT_VERSION,
    MAX_NUMBER,
    RECORD_SIZE,
    decode,
    describe_layout,
    encode,
)
from fwversion.compare import Ordering, compare
from fwversion.errors import (
    DecodeError,
    EncodeError,
    GitError,
    ParseError,
    ParseErrorKind,
    VersionError,
)
from fwversion.git import GitDescribe, compare_described, parse_git_describe, version_from_git
from fwversion.parser import parse
from fwversion.version import SemanticVersion

__all__ = [
    "__version__",
    # Value type
    "SemanticVersion",
    # Operations
    "parse",
    "compare",
    "Ordering",
    "encode",
    "decode",
    # Record layout
    "LAYOUT_VERSION",
    "MAX_NUMBER",
    "RECORD_SIZE",
    "describe_layout",
    # Errors
    "VersionError",
    "ParseError",
    "ParseErrorKind",
    "EncodeError",
    "DecodeError",
    "GitError",
    # git describe
    "GitDescribe",
    "compare_described",
    "parse_git_describe",
    "version_from_git",
]

__version__ = "0.1.0"
