"""toputil package.

Small helpers for hashing, date-time formatting and parameter mappings.
"""

import logging

from .config import DateTimeFormatOptions, HashingConfig
from .errors import (
    ParameterMissingError,
    ToputilError,
    UnsupportedHashFormatError,
    UnsupportedHashMethodError,
    UnsupportedTypeError,
)
from .hashing import Hasher, canonical_json, digest_bytes, hash, hash_value, md5, normalize, sha1
from .params import check_required, collect_missing, pick_keys
from .result import Err, Ok, require, try_hash
from .time import format_datetime
from .types import Bytes, HashFormat, HashMethod, Structured, Text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "hash",
    "hash_value",
    "md5",
    "sha1",
    "digest_bytes",
    "normalize",
    "canonical_json",
    "Hasher",
    "HashMethod",
    "HashFormat",
    "Text",
    "Bytes",
    "Structured",
    "format_datetime",
    "check_required",
    "collect_missing",
    "pick_keys",
    "Ok",
    "Err",
    "try_hash",
    "require",
    "HashingConfig",
    "DateTimeFormatOptions",
    "ToputilError",
    "UnsupportedTypeError",
    "UnsupportedHashMethodError",
    "UnsupportedHashFormatError",
    "ParameterMissingError",
]
