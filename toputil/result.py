"""Result values for callers that prefer not to handle raised errors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .errors import ParameterMissingError, ToputilError
from .hashing import hash_value
from .params import Keys, check_required
from .types import HashFormat, HashMethod

T = TypeVar("T")
E = TypeVar("E", bound=ToputilError)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Ok[T], Err[E]]


def try_hash(
    method: HashMethod | str, value: Any, format: HashFormat | str = HashFormat.HEX
) -> "Result[str, ToputilError]":
    """Like ``hash_value`` but returns ``Err`` instead of raising."""
    try:
        return Ok(hash_value(method, value, format))
    except ToputilError as exc:
        return Err(exc)


def require(params: Any, keys: Keys) -> "Result[None, ParameterMissingError]":
    """Wrap ``check_required`` in a result value."""
    error = check_required(params, keys)
    if error is not None:
        return Err(error)
    return Ok(None)
