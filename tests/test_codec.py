import base64

import pytest

from findmyflags.codec import decode, encode


@pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"abcd", b"hello world", bytes(range(256))])
def test_encode_matches_standard(data):
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_encode_known_value():
    assert encode(b"CSU-SLEN-3483") == "Q1NVLVNMRU4tMzQ4Mw=="


def test_encode_empty_raises():
    with pytest.raises(ValueError):
        encode(b"")


@pytest.mark.parametrize("data", [b"x", b"xy", b"xyz", b"\x00\xff\x10", bytes(range(200))])
def test_round_trip(data):
    assert decode(encode(data)) == data


def test_decode_known_value():
    assert decode("Q1NVLVNMRU4tMzQ4Mw==") == b"CSU-SLEN-3483"


def test_decode_accepts_bytes():
    assert decode(b"Q1NVLVNMRU4tMzQ4Mw==") == decode("Q1NVLVNMRU4tMzQ4Mw==")


def test_decode_urlsafe_symbols():
    assert decode("-_-_") == base64.urlsafe_b64decode("-_-_")


def test_decode_alternate_symbols():
    assert decode(",.,.") == decode("/+/+")


def test_decode_unknown_symbols_are_zero():
    assert decode("!!!!") == decode("AAAA")


@pytest.mark.parametrize("bad", ["", "abc", "abcde"])
def test_decode_bad_length_raises(bad):
    with pytest.raises(ValueError):
        decode(bad)


def test_decode_padding_lengths():
    assert len(decode(encode(b"a"))) == 1
    assert len(decode(encode(b"ab"))) == 2