"""Conversion of stored strings to and from numbers and booleans."""

from __future__ import annotations

import re

# Values are converted through a fixed-size buffer; longer text is rejected.
_MAX_NUMERIC_TEXT = 63

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1
_ULONG_MASK = 2**64 - 1

_C_SPACE = " \t\n\v\f\r"

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_DOUBLE_RE = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<sign>[+-]?)
    (?:
        (?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)
      | (?P<inf>inf(?:inity)?)
      | (?P<nan>nan(?:\([0-9A-Za-z_]*\))?)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _fits_buffer(text: str) -> bool:
    return len(text.encode("utf-8", "surrogatepass")) <= _MAX_NUMERIC_TEXT


def _strtol(text: str, base: int) -> tuple[int, str]:
    """Parse a leading integer like C ``strtol``; return value and the rest."""
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    valid = _DIGITS[:base]
    if (
        base == 16
        and text[pos:pos + 2].lower() == "0x"
        and text[pos + 2:pos + 3].lower() in valid
        and text[pos + 2:pos + 3] != ""
    ):
        pos += 2
    start = pos
    while pos < len(text) and text[pos].lower() in valid:
        pos += 1
    if pos == start:
        return 0, text
    value = int(text[start:pos], base)
    if negative:
        value = -value
    value = max(_LONG_MIN, min(_LONG_MAX, value))
    return value, text[pos:]


def parse_long(text: str) -> int | None:
    """Parse a decimal or ``0x``-prefixed hexadecimal integer.

    Returns None when the text is empty or is not wholly a number, so that
    the caller may fall back to a default. Out-of-range values saturate.
    """
    if not text or not _fits_buffer(text):
        return None
    if text[0] == "0" and text[1:2] in ("x", "X"):
        if len(text) == 2:
            return None
        value, rest = _strtol(text[2:], 16)
    else:
        value, rest = _strtol(text, 10)
    if rest:
        return None
    return value


def parse_double(text: str) -> float | None:
    """Parse a floating point number; None if the text is not wholly one."""
    if not text or not _fits_buffer(text):
        return None
    match = _DOUBLE_RE.fullmatch(text)
    if match is None:
        return None
    negative = match.group("sign") == "-"
    if match.group("hex") is not None:
        value = float.fromhex(match.group("hex"))
    elif match.group("dec") is not None:
        value = float(match.group("dec"))
    elif match.group("inf") is not None:
        value = float("inf")
    else:
        value = float("nan")
    return -value if negative else value


def parse_bool(text: str) -> bool | None:
    """Interpret text as a boolean by its leading characters.

    ``t``, ``y``, ``1`` and ``on`` are true; ``f``, ``n``, ``0`` and ``of``
    are false (case-insensitive). Anything else gives None.
    """
    if not text:
        return None
    first = text[0]
    if first in "tTyY1":
        return True
    if first in "fFnN0":
        return False
    if first in "oO":
        second = text[1:2]
        if second in ("n", "N"):
            return True
        if second in ("f", "F"):
            return False
    return None


def format_long(value: int, use_hex: bool = False) -> str:
    """Format a signed 64-bit integer in decimal, or as ``0x`` hexadecimal.

    Negative numbers in hexadecimal are written in two's complement form.
    """
    value = int(value)
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise OverflowError(f"{value} does not fit in a signed 64-bit integer")
    if use_hex:
        return f"0x{value & _ULONG_MASK:x}"
    return str(value)


def format_double(value: float) -> str:
    """Format a number with six digits after the decimal point."""
    return f"{float(value):f}"


def format_bool(value: bool) -> str:
    """Format a boolean as ``true`` or ``false``."""
    return "true" if value else "false"