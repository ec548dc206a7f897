"""Error codes reported by the API client and the exception that carries them."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Reasons an API exchange can fail; ``SUCCESS`` is the only false member."""

    SUCCESS = 0
    INVALID_RESPONSE = 1
    UNTAGGED_RESPONSE = 2
    UNKNOWN_RESPONSE_TYPE = 3
    FATAL_RESPONSE = 4
    NO_SUCH_ITEM = 5
    INVALID_ARGUMENT = 6
    INTERRUPTED = 7
    SCRIPT_FAILURE = 8
    GENERAL_FAILURE = 9
    API_FAILURE = 10
    TTY_FAILURE = 11
    RETURN_VALUE = 12
    ITEM_ALREADY_EXISTS = 13
    UNKNOWN_PARAMETER = 14
    LOGIN_FAILURE = 15
    LIST_END = 16
    UNKNOWN_ERROR_CATEGORY = 17
    UNKNOWN_ERROR = 18


def _describe(code: ErrorCode) -> str:
    return code.name.lower().replace("_", " ")


class ApiError(Exception):
    """Raised when the router or the wire protocol reports a failure."""

    def __init__(self, code: ErrorCode | int, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else _describe(self.code)
        super().__init__(self.message)