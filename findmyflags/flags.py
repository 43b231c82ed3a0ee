"""Flag checks and the interactive flag-hunting prompt."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from findmyflags.codec import decode
from findmyflags.digest import md5_string

_MAX_LINE = 99
_FLAG_LENGTH = 13

_FLAG_1 = b"CSU-SLEN-2401"
_FLAG_2 = decode("Q1NVLVNMRU4tMzQ4Mw==")
_FLAG_3 = b"CSU-SLEN-6588"
_FLAG_4 = b"CSU-SLEN-8111"
_FLAG_5 = bytes(b ^ 0x1A for b in b"YIO7IV_T7#,--")
_FLAG_6 = bytes(b ^ 0x43 for b in (0, 16, 22, 110, 16, 15, 6, 13, 110, 119, 118, 117, 112))
_FLAG_7 = bytes(((b ^ 0x1A) + 1) & 0xFF for b in b"XHN6HQ^W6)),.")
_SECRET_HASH = bytes(
    (0x48, 0xEC, 0x3A, 0x12, 0xF8, 0x1E, 0xB5, 0x84,
     0x4B, 0x53, 0x6B, 0xD2, 0xE9, 0xB8, 0x7A, 0x21)
)


class IncorrectFlag(Exception):
    """Raised when an entered flag is wrong."""


def _raw(value: str) -> bytes:
    return value.encode("utf-8").split(b"\x00", 1)[0]


def _require(condition: bool) -> None:
    if not condition:
        raise IncorrectFlag("Incorrect flag :(")


def check_flag_1(value: str) -> None:
    """The first flag is compared as plain text."""
    _require(_raw(value) == _FLAG_1)


def check_flag_2(value: str) -> None:
    """The second flag is stored base64-encoded."""
    _require(_raw(value) == _FLAG_2)


def check_flag_3(value: str) -> None:
    """The third flag is checked piecewise on its first 13 characters."""
    raw = _raw(value)
    _require(len(raw) >= _FLAG_LENGTH)
    _require(raw[:4] == _FLAG_3[:4] and raw[4:9] == _FLAG_3[4:9] and raw[9:13] == _FLAG_3[9:13])


def check_flag_4(value: str) -> None:
    """The fourth flag must match exactly, character by character."""
    _require(_raw(value) == _FLAG_4)


def _check_prefix(value: str, expected: bytes) -> None:
    _require(_raw(value)[:_FLAG_LENGTH] == expected)


def check_flag_5(value: str) -> None:
    """The fifth flag is stored XOR-obfuscated."""
    _check_prefix(value, _FLAG_5)


def check_flag_6(value: str) -> None:
    """The sixth flag is stored as XOR-obfuscated bytes."""
    _check_prefix(value, _FLAG_6)


def check_flag_7(value: str) -> None:
    """The seventh flag is stored XOR-obfuscated and shifted by one."""
    _check_prefix(value, _FLAG_7)


def check_secret_flag(value: str) -> None:
    """The secret flag is known only by its MD5 digest."""
    _require(md5_string(value) == _SECRET_HASH)


def read_input(stream: TextIO) -> str:
    """Read one line of at most 99 characters, cut at the first newline or CR."""
    line = stream.readline(_MAX_LINE)
    line = line.split("\n", 1)[0]
    return line.split("\r", 1)[0]


def _ask(prompt: str) -> str:
    sys.stdout.write(prompt)
    sys.stdout.flush()
    return read_input(sys.stdin)


def main(argv: list[str] | None = None) -> int:
    """Ask for each flag in turn; return 0 when all are right, 1 otherwise."""
    argparse.ArgumentParser(
        prog="findmyflags", description="Find and enter the hidden flags."
    ).parse_args(argv)

    checks = (check_flag_1, check_flag_2, check_flag_3, check_flag_4,
              check_flag_5, check_flag_6, check_flag_7)
    try:
        third = ""
        for number, check in enumerate(checks, start=1):
            answer = _ask(f"Input Flag {number}: ")
            if number == 3:
                third = answer
            check(answer)

        if len(third) == 14 and third[13] == "F":
            answer = _ask("\nYou've unlocked a secret :)\nInput Flag 8: ")
            check_secret_flag(answer)
    except IncorrectFlag:
        print("\nIncorrect flag :(")
        return 1

    print("\nCongrats! You made it to the end!")
    return 0