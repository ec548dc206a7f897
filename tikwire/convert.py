"""Conversions between API word values and Python values."""

from __future__ import annotations

import re
from typing import Any

_LEADING_DIGITS = re.compile(r"[0-9]*")
_TRAILING_NUMBER = re.compile(r"(-?)([0-9]*)$")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_uint(text: str, pos: int = 0) -> int:
    """Read the run of decimal digits starting at ``pos``; 0 if there is none."""
    digits = _LEADING_DIGITS.match(text, pos).group()
    return int(digits) if digits else 0


def rparse_uint(text: str, pos: int) -> int:
    """Read the run of decimal digits ending just before ``pos``.

    A minus sign directly in front of the digits makes the result negative.
    """
    match = _TRAILING_NUMBER.search(text[:pos])
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign else value


def convert(text: str, kind: type = str) -> Any:
    """Turn a word value into an instance of ``kind``."""
    if kind is str:
        return text
    if kind is bool:
        return text in ("true", "yes")
    if kind is int:
        if _INTEGER.fullmatch(text):
            return int(text)
        return parse_uint(text)
    if kind is float:
        try:
            return float(text)
        except ValueError:
            return 0.0
    from_string = getattr(kind, "from_string", None)
    if from_string is not None:
        return from_string(text)
    return kind(text)


def convert_back(value: Any) -> str:
    """Render a Python value the way the API expects it in a word."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)