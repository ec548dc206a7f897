"""Value types used by router items: identities, byte counts and durations."""

from __future__ import annotations

import datetime
import functools
import re
from typing import Any

from tikwire.convert import parse_uint, rparse_uint

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9A-Fa-f]+)")

_SECONDS_PER_MINUTE = 60
_SECONDS_PER_HOUR = 60 * 60
_SECONDS_PER_DAY = 60 * 60 * 24
_SECONDS_PER_WEEK = 60 * 60 * 24 * 7

_BYTE_UNITS = {1: "KB", 2: "MB", 3: "GB", 4: "TB", 5: "PB"}


def _check_range(value: int, limit: int, what: str) -> int:
    if not 0 <= value <= limit:
        raise ValueError(f"{what} {value} is out of range")
    return value


@functools.total_ordering
class Identity:
    """The ``*HEX`` identifier the router gives every item."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = _check_range(int(value), _U32_MAX, "identity")

    @classmethod
    def from_string(cls, text: str) -> Identity:
        """Parse ``*HEX``; anything not starting with ``*`` gives identity 0."""
        if not text or text[0] != "*":
            return cls(0)
        match = _HEX_NUMBER.match(text, 1)
        if match is None:
            return cls(0)
        sign, digits = match.groups()
        value = min(int(digits, 16), _U64_MAX)
        if sign == "-":
            value = -value % (_U64_MAX + 1)
        return cls(value & _U32_MAX)

    @property
    def value(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"*{self._value:X}"

    def __repr__(self) -> str:
        return f"Identity({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Identity):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, (Identity, int)):
            return self._value < int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


@functools.total_ordering
class Bytes:
    """An unsigned 64-bit count of bytes."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        self._value = _check_range(int(value), _U64_MAX, "byte count")

    @classmethod
    def from_string(cls, text: str) -> Bytes:
        """Parse a plain decimal byte count; anything else gives 0."""
        return cls(min(parse_uint(text.lstrip()), _U64_MAX))

    @property
    def value(self) -> int:
        return self._value

    def kb(self) -> float:
        return self._value / 1024.0

    def mb(self) -> float:
        return self.kb() / 1024.0

    def gb(self) -> float:
        return self.mb() / 1024.0

    def tb(self) -> float:
        return self.gb() / 1024.0

    def pb(self) -> float:
        return self.tb() / 1024.0

    def human_readable(self) -> str:
        """Format with the largest binary unit up to PB, two decimals."""
        scale = (self._value.bit_length() - 1) // 10 if self._value else 0
        unit = _BYTE_UNITS.get(scale)
        if unit is None:
            return f"{self._value} B"
        amount = {
            "KB": self.kb,
            "MB": self.mb,
            "GB": self.gb,
            "TB": self.tb,
            "PB": self.pb,
        }[unit]()
        return f"{amount:.2f} {unit}"

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Bytes({self._value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bytes):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, (Bytes, int)):
            return self._value < int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)


def _unit_seconds(text: str, marker: str, multiplier: int) -> int:
    pos = text.find(marker)
    if pos == -1:
        return 0
    return rparse_uint(text, pos) * multiplier


def _hhmmss_seconds(text: str) -> int:
    first = text.find(":")
    if first == -1:
        return 0
    second = text.find(":", first + 1)
    if second == -1:
        return 0
    return (
        rparse_uint(text, first) * _SECONDS_PER_HOUR
        + parse_uint(text, first + 1) * _SECONDS_PER_MINUTE
        + parse_uint(text, second + 1)
    )


@functools.total_ordering
class Duration:
    """A span of whole seconds, as the router reports times."""

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int | datetime.timedelta = 0) -> None:
        if isinstance(seconds, datetime.timedelta):
            seconds = int(seconds.total_seconds())
        self._seconds = int(seconds)

    @classmethod
    def from_string(cls, text: str) -> Duration:
        """Parse forms such as ``1w2d3h4m5s``, ``30m/1d`` or ``hh:mm:ss``."""
        total = (
            _unit_seconds(text, "w", _SECONDS_PER_WEEK)
            + _unit_seconds(text, "d", _SECONDS_PER_DAY)
            + _unit_seconds(text, "h", _SECONDS_PER_HOUR)
            + _unit_seconds(text, "m", _SECONDS_PER_MINUTE)
            + _unit_seconds(text, "s", 1)
            + _hhmmss_seconds(text)
        )
        return cls(total)

    @property
    def seconds(self) -> int:
        return self._seconds

    def to_timedelta(self) -> datetime.timedelta:
        return datetime.timedelta(seconds=self._seconds)

    def human_readable(self) -> str:
        """Spell the span out, e.g. ``1 Day, 2 Hours``."""
        remaining = self._seconds
        if remaining <= 0:
            return "0 Seconds"
        parts: list[str] = []
        for label, multiplier in (
            ("Week", _SECONDS_PER_WEEK),
            ("Day", _SECONDS_PER_DAY),
            ("Hour", _SECONDS_PER_HOUR),
            ("Minute", _SECONDS_PER_MINUTE),
            ("Second", 1),
        ):
            amount, remaining = divmod(remaining, multiplier)
            if amount > 0:
                parts.append(f"{amount} {label}s" if amount > 1 else f"{amount} {label}")
        return ", ".join(parts)

    def __int__(self) -> int:
        return self._seconds

    def __str__(self) -> str:
        return f"{self._seconds}s"

    def __repr__(self) -> str:
        return f"Duration({self._seconds})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Duration):
            return self._seconds == other._seconds
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Duration):
            return self._seconds < other._seconds
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._seconds)