"""Building query words for ``getall`` and ``listen`` commands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from tikwire.convert import convert_back

_NOT = "?#!"
_AND = "?#&"
_OR = "?#|"


class Query:
    """A sequence of query words in the router's stack notation."""

    def __init__(self, words: str | Iterable[str]) -> None:
        self.words: list[str] = [words] if isinstance(words, str) else list(words)

    def extend(self, other: Query) -> None:
        """Append the words of ``other`` to this query."""
        self.words.extend(_as_query(other).words)

    def __invert__(self) -> Query:
        result = Query(self.words)
        if result.words and result.words[-1] == _NOT:
            result.words.pop()
        else:
            result.words.append(_NOT)
        return result

    def _combine(self, other: Any, operator: str) -> Query:
        other = _as_query(other)
        if self == other:
            return Query(self.words)
        result = Query(self.words)
        result.extend(other)
        result.words.append(operator)
        return result

    def __and__(self, other: Any) -> Query:
        return self._combine(other, _AND)

    def __or__(self, other: Any) -> Query:
        return self._combine(other, _OR)

    def __xor__(self, other: Any) -> Query:
        other = _as_query(other)
        return (self & ~other) | (~self & other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Query):
            return self.words == other.words
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __repr__(self) -> str:
        return f"Query({self.words!r})"


class QueryToken:
    """A property name whose comparisons produce :class:`Query` objects."""

    def __init__(self, name: str) -> None:
        self.name = name

    def to_query(self) -> Query:
        """Query for items that have the property."""
        return Query(f"?{self.name}")

    def __invert__(self) -> Query:
        return Query(f"?-{self.name}")

    def __eq__(self, value: Any) -> Query:  # type: ignore[override]
        return Query(f"?={self.name}={convert_back(value)}")

    def __ne__(self, value: Any) -> Query:  # type: ignore[override]
        return ~(self == value)

    def __lt__(self, value: Any) -> Query:
        return Query(f"?<{self.name}={convert_back(value)}")

    def __gt__(self, value: Any) -> Query:
        return Query(f"?>{self.name}={convert_back(value)}")

    def __le__(self, value: Any) -> Query:
        return (self < value) | (self == value)

    def __ge__(self, value: Any) -> Query:
        return (self > value) | (self == value)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"QueryToken({self.name!r})"


def _as_query(value: Any) -> Query:
    if isinstance(value, Query):
        return value
    if isinstance(value, QueryToken):
        return value.to_query()
    raise TypeError(f"cannot use {type(value).__name__} as a query")


def make_tokens(*args: str) -> tuple[QueryToken, ...]:
    """Create one :class:`QueryToken` per property name."""
    return tuple(QueryToken(name) for name in args)