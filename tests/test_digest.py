import hashlib
import io

import pytest

from findmyflags.digest import MD5, md5_file, md5_string, rotate_left


def test_empty_vector():
    assert MD5().hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc_vector():
    assert MD5(b"abc").hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_hashlib(length):
    data = bytes((i * 7) % 256 for i in range(length))
    assert MD5(data).digest() == hashlib.md5(data).digest()


def test_incremental_updates_equal_single():
    data = b"The quick brown fox jumps over the lazy dog" * 5
    hasher = MD5()
    for start in range(0, len(data), 13):
        hasher.update(data[start:start + 13])
    assert hasher.digest() == MD5(data).digest()


def test_digest_does_not_finalize():
    hasher = MD5(b"abc")
    first = hasher.digest()
    hasher.update(b"def")
    assert first == hashlib.md5(b"abc").digest()
    assert hasher.digest() == hashlib.md5(b"abcdef").digest()


def test_hexdigest_is_hex_of_digest():
    hasher = MD5(b"payload")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.digest()) == 16


def test_rotate_left_wraps_high_bit():
    assert rotate_left(0x80000000, 1) == 1


@pytest.mark.parametrize("x", [0, 1, 0x12345678, 0xFFFFFFFF, 0xDEADBEEF])
@pytest.mark.parametrize("n", [1, 7, 16, 31])
def test_rotate_left_inverse(x, n):
    assert rotate_left(rotate_left(x, n), 32 - n) == x


def test_md5_string_matches_hashlib():
    assert md5_string("CSU-SLEN-2401") == hashlib.md5(b"CSU-SLEN-2401").digest()


def test_md5_string_stops_at_nul():
    assert md5_string("abc\x00def") == md5_string("abc")


def test_md5_file_matches_hashlib():
    data = bytes(range(256)) * 10
    assert md5_file(io.BytesIO(data)) == hashlib.md5(data).digest()


def test_md5_file_empty():
    assert md5_file(io.BytesIO(b"")) == MD5().digest()