"""Helpers for validating and filtering parameter mappings."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Mapping, Sequence, Union

from .errors import ParameterMissingError

logger = logging.getLogger(__name__)

Keys = Union[str, Sequence[str]]


def _as_key_list(keys: Keys) -> list[str]:
    if isinstance(keys, str):
        return [keys]
    return list(keys)


def check_required(params: Mapping[str, Any], keys: Keys) -> ParameterMissingError | None:
    """Return a ``ParameterMissingError`` for the first key absent from ``params``.

    Presence is checked with ``in``, so keys mapped to falsy values such as
    ``None`` or ``0`` count as present. Returns ``None`` when every key is
    present. The error is returned, not raised.
    """
    for key in _as_key_list(keys):
        if key not in params:
            logger.debug("Required parameter %r missing", key)
            return ParameterMissingError(key)
    return None


def collect_missing(params: Mapping[str, Any], keys: Keys) -> list[str]:
    """Return every key absent from ``params``, in the order given."""
    return [key for key in _as_key_list(keys) if key not in params]


def pick_keys(obj: Mapping[Hashable, Any], keys: Iterable[Hashable]) -> dict[Hashable, Any]:
    """Return a new dict holding only the entries of ``obj`` named in ``keys``."""
    picked: dict[Hashable, Any] = {}
    for key in keys:
        if key in obj and key not in picked:
            picked[key] = obj[key]
    return picked
