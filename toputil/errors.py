"""Error types raised or returned by toputil helpers."""

from __future__ import annotations


class ToputilError(Exception):
    """Base class for all toputil errors."""


class UnsupportedTypeError(ToputilError, TypeError):
    """Raised when a value cannot be normalized into bytes for hashing."""

    def __init__(self, value_type: type, detail: str | None = None) -> None:
        self.value_type = value_type
        message = f"Unsupported type: {value_type.__name__}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class UnsupportedHashMethodError(ToputilError, ValueError):
    """Raised for hash method identifiers other than MD5 and SHA-1."""


class UnsupportedHashFormatError(ToputilError, ValueError):
    """Raised for output formats other than hex and base64."""


class ParameterMissingError(ToputilError, KeyError):
    """A required parameter is absent.

    Returned (not raised) by ``check_required``.
    """

    name = "ParameterMissingError"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"`{key}` required")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])
