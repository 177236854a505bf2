"""MD5/SHA-1 hashing over text, bytes and JSON-serializable values."""

from __future__ import annotations

import base64
import hashlib
import json
import logging
from collections.abc import Mapping
from typing import Any

from .config import HashingConfig
from .errors import UnsupportedTypeError
from .types import Bytes, HashFormat, HashInput, HashMethod, Structured, Text

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def canonical_json(value: Any) -> str:
    """Return stable compact JSON with sorted keys for hashing."""
    try:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise UnsupportedTypeError(type(value), f"not JSON serializable: {exc}") from exc


def _is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def normalize(value: Any) -> bytes:
    """Turn text, a byte buffer or a structured value into the bytes to hash.

    Tagged ``Text``/``Bytes``/``Structured`` inputs are hashed as their tag
    says, provided the wrapped value is of that kind. Anything else (numbers,
    booleans, ``None``, sets, arbitrary objects) raises
    ``UnsupportedTypeError``.
    """
    if isinstance(value, Text):
        if not isinstance(value.value, str):
            raise UnsupportedTypeError(type(value.value), "Text wraps a non-str value")
        return value.value.encode("utf-8")
    if isinstance(value, Bytes):
        if not isinstance(value.value, _BYTES_TYPES):
            raise UnsupportedTypeError(type(value.value), "Bytes wraps a non-bytes value")
        return bytes(value.value)
    if isinstance(value, Structured):
        if not _is_structured(value.value):
            raise UnsupportedTypeError(type(value.value), "Structured wraps a non-mapping, non-sequence value")
        return canonical_json(value.value).encode("utf-8")

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, _BYTES_TYPES):
        return bytes(value)
    if _is_structured(value):
        return canonical_json(value).encode("utf-8")
    raise UnsupportedTypeError(type(value))


def digest_bytes(method: HashMethod | str, value: Any | HashInput) -> bytes:
    """Return the raw digest of ``value`` using ``method``."""
    method = HashMethod.parse(method)
    data = normalize(value)
    logger.debug("Hashing %d bytes with %s", len(data), method.value)
    return hashlib.new(method.hashlib_name, data, usedforsecurity=False).digest()


def encode_digest(digest: bytes, format: HashFormat | str = HashFormat.HEX) -> str:
    """Render digest bytes as lowercase hex or padded standard base64."""
    if HashFormat.parse(format) is HashFormat.BASE64:
        return base64.b64encode(digest).decode("ascii")
    return digest.hex()


class Hasher:
    """Hash dispatcher bound to a ``HashingConfig``."""

    def __init__(self, config: HashingConfig | None = None) -> None:
        self.config = config or HashingConfig()

    def hash(self, method: HashMethod | str, value: Any | HashInput, format: HashFormat | str | None = None) -> str:
        fmt = HashFormat.parse(format) if format is not None else self.config.default_format
        return encode_digest(digest_bytes(method, value), fmt)

    def md5(self, value: Any | HashInput, format: HashFormat | str | None = None) -> str:
        return self.hash(HashMethod.MD5, value, format)

    def sha1(self, value: Any | HashInput, format: HashFormat | str | None = None) -> str:
        return self.hash(HashMethod.SHA1, value, format)


_DEFAULT_HASHER = Hasher()


def hash_value(method: HashMethod | str, value: Any | HashInput, format: HashFormat | str = HashFormat.HEX) -> str:
    """Hash ``value`` with ``method`` ("MD5" or "SHA-1") and encode as ``format``.

    Strings are UTF-8 encoded, byte buffers are used as-is and mappings,
    lists and tuples are hashed as canonical JSON. Same inputs always give
    the same output.
    """
    return _DEFAULT_HASHER.hash(method, value, format)


hash = hash_value


def md5(value: Any | HashInput, format: HashFormat | str = HashFormat.HEX) -> str:
    return _DEFAULT_HASHER.md5(value, format)


def sha1(value: Any | HashInput, format: HashFormat | str = HashFormat.HEX) -> str:
    return _DEFAULT_HASHER.sha1(value, format)
