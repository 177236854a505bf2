"""Configuration models for hashing and date-time formatting."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .types import HashFormat

ENV_HASH_FORMAT = "TOPUTIL_HASH_FORMAT"


@dataclass(frozen=True)
class HashingConfig:
    """Defaults applied by a ``Hasher`` when a call omits them."""

    default_format: HashFormat = HashFormat.HEX

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_format", HashFormat.parse(self.default_format))

    @classmethod
    def from_env(cls) -> "HashingConfig":
        """Build config from ``TOPUTIL_HASH_FORMAT`` (defaults to hex)."""
        return cls(default_format=os.getenv(ENV_HASH_FORMAT, HashFormat.HEX.value))


@dataclass(frozen=True)
class DateTimeFormatOptions:
    """Separators used by ``format_datetime``."""

    date_sep: str = "-"
    time_sep: str = ":"

    def __post_init__(self) -> None:
        if not isinstance(self.date_sep, str) or not isinstance(self.time_sep, str):
            raise TypeError("date_sep and time_sep must be strings")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "DateTimeFormatOptions":
        """Accept ``date_sep``/``time_sep`` or the camelCase ``dateSep``/``timeSep``.

        Missing or ``None`` separators fall back to the defaults.
        """
        return cls(
            date_sep=_first_set(options, "date_sep", "dateSep", default="-"),
            time_sep=_first_set(options, "time_sep", "timeSep", default=":"),
        )


def _first_set(options: Mapping[str, Any], *names: str, default: str) -> Any:
    for name in names:
        value = options.get(name)
        if value is not None:
            return value
    return default
