"""Hashing datatypes and enums."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence, Union

from .errors import UnsupportedHashFormatError, UnsupportedHashMethodError


class HashMethod(str, Enum):
    """Supported digest algorithms."""

    MD5 = "MD5"
    SHA1 = "SHA-1"

    @property
    def hashlib_name(self) -> str:
        return "md5" if self is HashMethod.MD5 else "sha1"

    @classmethod
    def parse(cls, value: "HashMethod | str") -> "HashMethod":
        """Resolve ``MD5``/``SHA-1`` identifiers, ignoring case and the dash."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "")
            for member in cls:
                if member.value.replace("-", "") == key:
                    return member
        expected = ", ".join(member.value for member in cls)
        raise UnsupportedHashMethodError(f"Unknown hash method {value!r}. Expected one of: {expected}.")


class HashFormat(str, Enum):
    """Textual encodings for digest output."""

    HEX = "hex"
    BASE64 = "base64"

    @classmethod
    def parse(cls, value: "HashFormat | str") -> "HashFormat":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        expected = ", ".join(member.value for member in cls)
        raise UnsupportedHashFormatError(f"Unknown hash format {value!r}. Expected one of: {expected}.")


@dataclass(frozen=True)
class Text:
    """Text input, hashed as its UTF-8 encoding."""

    value: str


@dataclass(frozen=True)
class Bytes:
    """Raw byte input, hashed as-is."""

    value: bytes


@dataclass(frozen=True)
class Structured:
    """Structured input, hashed as canonical JSON."""

    value: Union[Mapping[str, Any], Sequence[Any]]


HashInput = Union[Text, Bytes, Structured]
