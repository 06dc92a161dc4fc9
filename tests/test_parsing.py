"""Tests for canonical decimal parsing."""

import logging

import pytest

from unixtime import (
    INT32,
    UINT32,
    UINT64,
    FormatError,
    Signed32,
    Signed64,
    Unsigned32,
    Unsigned64,
)
from unixtime.parsing import matches, parse_seconds, try_parse_seconds


@pytest.mark.parametrize(
    "text",
    ["0", "1", "10", "1704067200", "4294967295"],
)
def test_matches_canonical_uint32(text):
    assert matches(text, UINT32)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "007",
        "00",
        "+1",
        "-1",
        " 1",
        "1 ",
        "12\n",
        "1_000",
        "1,000",
        "1e3",
        "1.0",
        "0x10",
        "１２",  # fullwidth digits
        "4294967296",
        "99999999999",
    ],
)
def test_rejects_non_canonical_uint32(text):
    assert not matches(text, UINT32)


def test_matches_uses_the_width_max():
    assert matches("2147483647", INT32)
    assert not matches("2147483648", INT32)
    assert matches("18446744073709551615", UINT64)
    assert not matches("18446744073709551616", UINT64)
    assert not matches("20000000000000000000", UINT64)


def test_matches_rejects_non_strings():
    assert not matches(None, UINT32)
    assert not matches(12, UINT32)
    assert not matches(b"12", UINT32)


def test_parse_seconds():
    assert parse_seconds("0", UINT32) == 0
    assert parse_seconds("4294967295", UINT32) == 4294967295


def test_parse_seconds_raises_format_error():
    with pytest.raises(FormatError, match="Invalid timestamp string"):
        parse_seconds("007", UINT32)
    with pytest.raises(FormatError):
        parse_seconds(None, UINT32)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        Signed32.parse("abc")


def test_try_parse_seconds_never_raises():
    assert try_parse_seconds(None, UINT32) is None
    assert try_parse_seconds("", UINT32) is None
    assert try_parse_seconds("   ", UINT32) is None
    assert try_parse_seconds("abc", UINT32) is None
    assert try_parse_seconds(42, UINT32) is None
    assert try_parse_seconds("42", UINT32) == 42


def test_try_parse_logs_rejections(caplog):
    with caplog.at_level(logging.DEBUG, logger="unixtime.parsing"):
        assert Unsigned32.try_parse("007") is None
    assert "Rejected '007'" in caplog.text


def test_variant_parse_leading_zero_fails():
    with pytest.raises(FormatError):
        Signed32.parse("007")
    with pytest.raises(FormatError):
        Unsigned64.from_string("007")


def test_variant_parse_one_past_max_fails():
    with pytest.raises(FormatError):
        Unsigned32.parse("4294967296")
    assert Unsigned32.try_parse("4294967296") is None
    assert Signed32.try_parse("2147483648") is None
    assert Signed64.try_parse("9223372036854775808") is None


def test_variant_parse_max():
    assert Unsigned32.parse("4294967295") == Unsigned32.MAX_VALUE
    assert Signed64.parse("9223372036854775807") == Signed64.MAX_VALUE
    assert Unsigned64.parse("18446744073709551615") == Unsigned64.MAX_VALUE


def test_try_parse_blank_is_failure_not_error():
    for variant in (Signed32, Unsigned32, Signed64, Unsigned64):
        assert variant.try_parse("") is None
        assert variant.try_parse(" \t") is None
        assert variant.try_parse(None) is None


def test_try_parse_returns_instance():
    parsed = Signed64.try_parse("1704067200")
    assert isinstance(parsed, Signed64)
    assert parsed.seconds == 1704067200


@pytest.mark.parametrize("variant", [Signed32, Unsigned32, Signed64, Unsigned64])
def test_string_round_trip_at_the_boundaries(variant):
    for seconds in (0, 1, variant.WIDTH.max - 1, variant.WIDTH.max):
        ts = variant(seconds)
        assert variant.parse(str(ts)) == ts
