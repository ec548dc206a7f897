"""Building blocks for clients of the RouterOS API wire protocol."""

__version__ = "0.1.0"

__all__ = [
    "convert",
    "errors",
    "query",
    "request",
    "response",
    "types",
    "wire",
]