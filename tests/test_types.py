import datetime

import pytest

from tikwire.types import Bytes, Duration, Identity


@pytest.mark.parametrize(
    "text, expected",
    [
        ("*12345678", 0x12345678),
        ("*11223344", 0x11223344),
        ("*DEADBEEF", 0xDEADBEEF),
        ("*ABCDEF01", 0xABCDEF01),
    ],
)
def test_identity_from_string(text, expected):
    assert Identity.from_string(text) == expected
    assert int(Identity.from_string(text)) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0x12345678, "*12345678"),
        (0x11223344, "*11223344"),
        (0xDEADBEEF, "*DEADBEEF"),
        (0xABCDEF01, "*ABCDEF01"),
    ],
)
def test_identity_to_string(value, expected):
    assert str(Identity(value)) == expected


@pytest.mark.parametrize("value", [0x12345678, 0x11223344, 0xDEADBEEF, 0xABCDEF01])
def test_identity_string_matches_integer(value):
    assert Identity.from_string(str(Identity(value))) == Identity(value)


@pytest.mark.parametrize("text", ["", "12345678", "#1", "*"])
def test_identity_without_star_is_zero(text):
    assert Identity.from_string(text) == 0


def test_identity_default_is_star_zero():
    assert str(Identity()) == "*0"


def test_identity_rejects_out_of_range():
    with pytest.raises(ValueError):
        Identity(-1)
    with pytest.raises(ValueError):
        Identity(0x100000000)


def test_identity_ordering_and_hash():
    assert Identity(1) < Identity(2)
    assert {Identity(5), Identity(5)} == {Identity(5)}


def test_bytes_units():
    b = Bytes(1024 * 1024)
    assert b.kb() == 1024.0
    assert b.mb() == 1.0
    assert b.gb() == 1.0 / 1024.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0 B"),
        (500, "500 B"),
        (1023, "1023 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (1024**2, "1.00 MB"),
        (1024**3, "1.00 GB"),
        (1024**4, "1.00 TB"),
        (1024**5, "1.00 PB"),
        (1024**6, f"{1024**6} B"),
    ],
)
def test_bytes_human_readable(value, expected):
    assert Bytes(value).human_readable() == expected


def test_bytes_string_round_trip():
    b = Bytes(123456789)
    assert str(b) == "123456789"
    assert Bytes.from_string(str(b)) == b


def test_bytes_from_invalid_string_is_zero():
    assert Bytes.from_string("") == 0
    assert Bytes.from_string("abc") == 0


def test_bytes_rejects_negative():
    with pytest.raises(ValueError):
        Bytes(-1)


def test_duration_units_agree():
    assert Duration.from_string("2h") == Duration.from_string("120m")
    assert Duration.from_string("1w") == Duration.from_string("7d")
    assert Duration.from_string("1h2m3s") == Duration.from_string("01:02:03")


def test_duration_combined_with_slash():
    assert Duration.from_string("30m/1d") == Duration(30 * 60 + 24 * 60 * 60)


def test_duration_string_round_trip():
    d = Duration(90061)
    assert str(d) == "90061s"
    assert Duration.from_string(str(d)) == d


def test_duration_without_units_is_zero():
    assert Duration.from_string("") == Duration(0)
    assert Duration.from_string("300") == Duration(0)


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 Seconds"),
        (-5, "0 Seconds"),
        (1, "1 Second"),
        (2, "2 Seconds"),
        (3 * 24 * 60 * 60, "3 Days"),
        (90061, "1 Day, 1 Hour, 1 Minute, 1 Second"),
    ],
)
def test_duration_human_readable(seconds, expected):
    assert Duration(seconds).human_readable() == expected


def test_duration_from_timedelta():
    assert Duration(datetime.timedelta(minutes=5)) == Duration.from_string("5m")
    assert Duration(300).to_timedelta() == datetime.timedelta(seconds=300)