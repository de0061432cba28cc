"""Helpers for parsing order-entry commands and prompting a console user."""

from __future__ import annotations

import re
import sys

WHITESPACE = " \t\n\v\f\r"
DEFAULT_DELIMITERS = " \t\v\n\r"

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

UINT32_MAX = 2**32 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def split(text: str, delimiters: str = DEFAULT_DELIMITERS) -> list[str]:
    """Split on any delimiter character; adjacent delimiters yield empty tokens.

    A single trailing delimiter does not produce a final empty token.
    """
    if not text:
        return []
    if not delimiters:
        return [text]
    parts = re.split(f"[{re.escape(delimiters)}]", text)
    if text[-1] in delimiters:
        parts.pop()
    return parts


def _parse_integer(text: str) -> int:
    if text == "":
        return 0
    match = _INTEGER.fullmatch(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def to_uint32(text: str) -> int:
    """Convert decimal text to an unsigned 32-bit value; raise ValueError if ill-formed."""
    value = _parse_integer(text)
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"out of range for uint32: {text!r}")
    return value


def to_int32(text: str) -> int:
    """Convert decimal text to a signed 32-bit value; raise ValueError if ill-formed."""
    value = _parse_integer(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"out of range for int32: {text!r}")
    return value


def string_to_price(text: str) -> int:
    """Convert a price; ``MARKET`` or ``MKT`` means a market price of 0."""
    if text in ("MARKET", "MKT"):
        return 0
    return to_uint32(text)


def _read_line(prompt: str) -> str | None:
    sys.stdout.write(f"\n{prompt}: ")
    sys.stdout.flush()
    line = sys.stdin.readline()
    if not line:
        return None
    return line.rstrip("\r\n")


def prompt_for_string(prompt: str, uppercase: bool = True) -> str:
    """Ask the console user for a line of text, upper-cased by default."""
    line = _read_line(prompt) or ""
    return line.upper() if uppercase else line


def prompt_for_price(prompt: str) -> int:
    """Ask the console user for a price."""
    return string_to_price(prompt_for_string(prompt))


def prompt_for_uint32(prompt: str) -> int:
    """Ask the console user for an unsigned 32-bit number."""
    return to_uint32(prompt_for_string(prompt, uppercase=False))


def prompt_for_int32(prompt: str) -> int:
    """Ask the console user for a signed 32-bit number."""
    return to_int32(prompt_for_string(prompt, uppercase=False))


def prompt_for_yes_no(prompt: str) -> bool:
    """Ask until the user answers yes or no; raise EOFError if input ends first."""
    while True:
        line = _read_line(prompt)
        if line is None:
            raise EOFError("no answer before end of input")
        answer = line.upper()
        if answer in ("Y", "YES", "T", "TRUE"):
            return True
        if answer in ("N", "NO", "F", "FALSE"):
            return False


def ltrimmed(text: str) -> str:
    """Return ``text`` without leading whitespace."""
    return text.lstrip(WHITESPACE)


def rtrimmed(text: str) -> str:
    """Return ``text`` without trailing whitespace."""
    return text.rstrip(WHITESPACE)


def trimmed(text: str) -> str:
    """Return ``text`` without whitespace at either end."""
    return text.strip(WHITESPACE)