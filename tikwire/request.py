"""Requests sent to the router and the word encoding they use."""

from __future__ import annotations

from typing import Any

from tikwire.convert import convert, convert_back

_MAX_TAG = 0xFFFFFFFF


def encode_length(length: int) -> bytes:
    """Encode a word length with the variable-size API prefix."""
    if length < 0:
        raise ValueError(f"negative word length {length}")
    if length < 0x80:
        return length.to_bytes(1, "big")
    if length < 0x4000:
        return (length | 0x8000).to_bytes(2, "big")
    if length < 0x200000:
        return (length | 0xC00000).to_bytes(3, "big")
    if length < 0x10000000:
        return (length | 0xE0000000).to_bytes(4, "big")
    if length > 0xFFFFFFFF:
        raise ValueError(f"word length {length} does not fit in 32 bits")
    return b"\xf0" + length.to_bytes(4, "big")


def encode_word(word: str | bytes) -> bytes:
    """Encode one word: its length prefix followed by its bytes."""
    data = word.encode("utf-8", "surrogateescape") if isinstance(word, str) else bytes(word)
    return encode_length(len(data)) + data


class Request:
    """A tagged command sentence with its words and optional query."""

    def __init__(self, command: str, tag: int) -> None:
        if not 0 <= tag <= _MAX_TAG:
            raise ValueError(f"tag {tag} is out of the 32-bit range")
        self.command = command
        self.tag = tag
        self.words: dict[str, str] = {}
        self.query: list[str] = []

    def add_word(self, key: str, value: Any, *args: Any) -> None:
        """Add a raw word; extra arguments are formatted into ``value``.

        A key that is already present keeps its first value.
        """
        text = value.format(*args) if args else convert_back(value)
        self.words.setdefault(key, text)

    def add_param(self, key: str, value: Any) -> None:
        """Add a ``=key=value`` parameter word."""
        self.words.setdefault(f"={key}", convert_back(value))

    def add_attribute(self, key: str, value: Any) -> None:
        """Add a ``.key=value`` attribute word."""
        self.words.setdefault(f".{key}", convert_back(value))

    def get(self, key: str, kind: type = str) -> Any:
        """Return the value stored under ``key`` converted to ``kind``."""
        return convert(self[key], kind)

    def __getitem__(self, key: str) -> str:
        return self.words[key]

    def __contains__(self, key: object) -> bool:
        return key in self.words

    def __len__(self) -> int:
        return len(self.words)

    def encode(self) -> bytes:
        """Encode the whole sentence, terminated by an empty word."""
        parts = [encode_word(self.command), encode_word(f".tag={self.tag}")]
        parts.extend(encode_word(f"{key}={value}") for key, value in sorted(self.words.items()))
        parts.extend(encode_word(word) for word in self.query)
        parts.append(b"\x00")
        return b"".join(parts)