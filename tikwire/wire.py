"""Reading sentences from, and connecting to, an API stream."""

from __future__ import annotations

import asyncio
import ipaddress

from tikwire.errors import ApiError, ErrorCode
from tikwire.response import Response, ResponseType, is_valid_response


def _prefix(first: int) -> tuple[int, int]:
    """Split a first length byte into its value bits and the count of bytes to follow."""
    if first & 0x80 == 0x00:
        return first, 0
    if first & 0xC0 == 0x80:
        return first & 0x3F, 1
    if first & 0xE0 == 0xC0:
        return first & 0x1F, 2
    if first & 0xF0 == 0xE0:
        return first & 0x0F, 3
    if first == 0xF0:
        return 0, 4
    raise ValueError(f"invalid word length prefix 0x{first:02X}")


def _combine(high: int, tail: bytes) -> int:
    return (high << (8 * len(tail))) | int.from_bytes(tail, "big")


def decode_length(data: bytes) -> tuple[int, int]:
    """Decode a length prefix; return the length and the bytes it took."""
    if not data:
        raise ValueError("empty length prefix")
    high, extra = _prefix(data[0])
    if len(data) < 1 + extra:
        raise ValueError("truncated length prefix")
    return _combine(high, bytes(data[1:1 + extra])), 1 + extra


async def read_word_length(reader: asyncio.StreamReader) -> int:
    """Read one length prefix from ``reader``."""
    first = (await reader.readexactly(1))[0]
    high, extra = _prefix(first)
    tail = await reader.readexactly(extra) if extra else b""
    return _combine(high, tail)


async def read_word(reader: asyncio.StreamReader) -> str:
    """Read one word; the empty string marks the end of a sentence."""
    length = await read_word_length(reader)
    if length == 0:
        return ""
    data = await reader.readexactly(length)
    return data.decode("utf-8", "surrogateescape")


async def read_response(reader: asyncio.StreamReader) -> Response:
    """Read one complete tagged reply.

    Raises :class:`ApiError` for a malformed, fatal or untagged reply.
    """
    words: list[str] = []
    while word := await read_word(reader):
        words.append(word)

    if not is_valid_response(words):
        raise ApiError(ErrorCode.INVALID_RESPONSE)

    resp = Response(words)
    if resp.type is ResponseType.FATAL:
        raise ApiError(ErrorCode.FATAL_RESPONSE, resp.words.get("message"))
    if resp.tag is None:
        raise ApiError(ErrorCode.UNTAGGED_RESPONSE)
    return resp


async def open_connection(
    host: str, port: int
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Connect to ``host`` (a literal IP address) on ``port``."""
    address = ipaddress.ip_address(host)
    return await asyncio.open_connection(str(address), port)