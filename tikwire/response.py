"""Sentences received from the router."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Sequence
from typing import Any

from tikwire.convert import convert, parse_uint
from tikwire.errors import ApiError, ErrorCode


class ResponseType(enum.Enum):
    """Kind of reply, given by the first word of the sentence."""

    NORMAL = "!done"
    DATA = "!re"
    TRAP = "!trap"
    FATAL = "!fatal"
    UNKNOWN = ""


_TYPE_WORDS = {t.value: t for t in ResponseType if t is not ResponseType.UNKNOWN}

_CATEGORY_ERRORS = (
    ErrorCode.NO_SUCH_ITEM,
    ErrorCode.INVALID_ARGUMENT,
    ErrorCode.INTERRUPTED,
    ErrorCode.SCRIPT_FAILURE,
    ErrorCode.GENERAL_FAILURE,
    ErrorCode.API_FAILURE,
    ErrorCode.TTY_FAILURE,
    ErrorCode.RETURN_VALUE,
)
_KNOWN_CATEGORY_LIMIT = 7

_MESSAGE_ERRORS = (
    ("cannot log in", ErrorCode.LOGIN_FAILURE),
    ("already have", ErrorCode.ITEM_ALREADY_EXISTS),
    ("unknown parameter", ErrorCode.UNKNOWN_PARAMETER),
)


def is_valid_response(words: Sequence[str]) -> bool:
    """Tell whether ``words`` start with a reply type word."""
    return bool(words) and words[0].startswith("!")


def _split_word(word: str) -> tuple[str, str] | None:
    if not word or word[0] not in "=.":
        return None
    pos = word.find("=", 1)
    if pos == -1:
        return None
    key = word[1:pos] if word[0] == "=" else word[:pos]
    return key, word[pos + 1:]


def _trap_error(words: dict[str, str]) -> ErrorCode:
    if "category" in words:
        category = parse_uint(words["category"])
        if category < _KNOWN_CATEGORY_LIMIT:
            return _CATEGORY_ERRORS[category]
        return ErrorCode.UNKNOWN_ERROR_CATEGORY
    message = words.get("message")
    if message is not None:
        for needle, code in _MESSAGE_ERRORS:
            if needle in message:
                return code
    return ErrorCode.UNKNOWN_ERROR


class Response:
    """A parsed reply: its type, tag, error and ``key -> value`` words.

    Parameters (``=key=value``) are stored under ``key``; attributes
    (``.key=value``) keep their leading dot. The ``.tag`` attribute is
    moved to :attr:`tag`.
    """

    def __init__(self, words: Sequence[str]) -> None:
        if not is_valid_response(words):
            raise ApiError(ErrorCode.INVALID_RESPONSE)

        self.words: dict[str, str] = {}
        for word in words:
            pair = _split_word(word)
            if pair is not None:
                self.words.setdefault(*pair)

        tag = self.words.pop(".tag", None)
        self.tag: int | None = parse_uint(tag) & 0xFFFFFFFF if tag is not None else None

        self.type = _TYPE_WORDS.get(words[0], ResponseType.UNKNOWN)
        if self.type is ResponseType.TRAP:
            self.error = _trap_error(self.words)
        elif self.type is ResponseType.FATAL:
            self.error = ErrorCode.FATAL_RESPONSE
        elif self.type is ResponseType.UNKNOWN:
            self.error = ErrorCode.UNKNOWN_RESPONSE_TYPE
        else:
            self.error = ErrorCode.SUCCESS

    def get(self, key: str, kind: type = str) -> Any:
        """Return the value stored under ``key`` converted to ``kind``."""
        return convert(self[key], kind)

    def __getitem__(self, key: str) -> str:
        return self.words[key]

    def __contains__(self, key: object) -> bool:
        return key in self.words

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` pairs in arrival order."""
        return iter(self.words.items())

    def __repr__(self) -> str:
        return f"Response(type={self.type.name}, tag={self.tag}, words={self.words!r})"