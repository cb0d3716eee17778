from __future__ import annotations

import pytest

from fwversion import ParseError, ParseErrorKind, SemanticVersion, parse


def test_parse_core() -> None:
    v = parse("1.2.3")
    assert (v.major, v.minor, v.patch, v.extra, v.commit) == (1, 2, 3, "", "")


def test_parse_extra_and_commit() -> None:
    v = parse("0.9.8-alpha.1+gabcd1234")
    assert v.model_dump() == {
        "major": 0,
        "minor": 9,
        "patch": 8,
        "extra": "alpha.1",
        "commit": "gabcd1234",
    }


def test_parse_commit_without_extra() -> None:
    v = parse("1.0.0+exp-sha-5114f85")
    assert v.extra == ""
    assert v.commit == "exp-sha-5114f85"


def test_hyphens_inside_extra() -> None:
    v = parse("1.0.0-x-y-z.--")
    assert v.extra == "x-y-z.--"


def test_zero_components_and_upper_bound() -> None:
    assert parse("0.0.0").model_dump()["major"] == 0
    v = parse("65535.65535.65535")
    assert (v.major, v.minor, v.patch) == (65535, 65535, 65535)


def test_longest_accepted_fields() -> None:
    v = parse("1.0.0-" + "a" * 32 + "+" + "f" * 40)
    assert len(v.extra) == 32
    assert len(v.commit) == 40


@pytest.mark.parametrize(
    "text",
    [
        "0.0.0",
        "1.2.3",
        "10.20.30",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-0.3.7",
        "1.0.0-x.7.z.92",
        "1.0.0+20130313144700",
        "1.0.0-beta+exp-sha-5114f85",
        "65535.0.1-rc.11+deadbeef",
    ],
)
def test_format_is_stable(text: str) -> None:
    v = parse(text)
    assert str(v) == text
    assert parse(str(v)).model_dump() == v.model_dump()


@pytest.mark.parametrize(
    ("text", "kind", "position"),
    [
        ("", ParseErrorKind.EMPTY, 0),
        ("1", ParseErrorKind.MISSING_COMPONENT, 1),
        ("1.2", ParseErrorKind.MISSING_COMPONENT, 3),
        ("1.2.", ParseErrorKind.MISSING_COMPONENT, 4),
        ("a.2.3", ParseErrorKind.INVALID_CHARACTER, 0),
        ("1.x.3", ParseErrorKind.INVALID_CHARACTER, 2),
        ("1.2.3a", ParseErrorKind.INVALID_CHARACTER, 5),
        ("1,2,3", ParseErrorKind.INVALID_CHARACTER, 1),
        ("v1.2.3", ParseErrorKind.INVALID_CHARACTER, 0),
        ("١.2.3", ParseErrorKind.INVALID_CHARACTER, 0),
        ("01.2.3", ParseErrorKind.LEADING_ZERO, 0),
        ("1.02.3", ParseErrorKind.LEADING_ZERO, 2),
        ("1.65536.0", ParseErrorKind.OUT_OF_RANGE, 2),
        ("99999999999999999999.0.0", ParseErrorKind.OUT_OF_RANGE, 0),
        ("9" * 5000 + ".0.0", ParseErrorKind.OUT_OF_RANGE, 0),
        ("1.0." + "1" * 5000, ParseErrorKind.OUT_OF_RANGE, 4),
        ("1.123456.0", ParseErrorKind.OUT_OF_RANGE, 2),
        ("1.2.3.4", ParseErrorKind.TRAILING_INPUT, 5),
        ("1.2.3 ", ParseErrorKind.TRAILING_INPUT, 5),
        ("1.0.0-", ParseErrorKind.EMPTY_IDENTIFIER, 6),
        ("1.0.0-alpha..1", ParseErrorKind.EMPTY_IDENTIFIER, 12),
        ("1.0.0-alpha.", ParseErrorKind.EMPTY_IDENTIFIER, 12),
        ("1.0.0-01", ParseErrorKind.LEADING_ZERO, 6),
        ("1.0.0-al_pha", ParseErrorKind.INVALID_CHARACTER, 8),
        ("1.0.0+", ParseErrorKind.EMPTY_IDENTIFIER, 6),
        ("1.0.0-rc.1+", ParseErrorKind.EMPTY_IDENTIFIER, 11),
        ("1.0.0+abc.def", ParseErrorKind.INVALID_CHARACTER, 9),
        ("1.0.0+abc+def", ParseErrorKind.INVALID_CHARACTER, 9),
        ("1.0.0-" + "a" * 33, ParseErrorKind.TOO_LONG, 6),
        ("1.0.0+" + "a" * 41, ParseErrorKind.TOO_LONG, 6),
    ],
)
def test_parse_errors(text: str, kind: ParseErrorKind, position: int) -> None:
    with pytest.raises(ParseError) as exc:
        parse(text)
    assert exc.value.kind == kind
    assert exc.value.position == position
    assert exc.value.text == text


def test_parse_error_message_has_column() -> None:
    with pytest.raises(ParseError, match=r"^col 3: expected digit in minor version"):
        parse("1.x.3")


def test_parse_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        SemanticVersion.parse("not a version")


def test_out_of_range_message_stays_short() -> None:
    with pytest.raises(ParseError) as exc:
        parse("9" * 5000 + ".0.0")
    assert str(exc.value) == "col 1: major version exceeds 65535"
