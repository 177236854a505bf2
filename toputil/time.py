"""Date-time formatting helpers."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Union

from .config import DateTimeFormatOptions

FormatOptions = Union[DateTimeFormatOptions, Mapping[str, Any]]


def _resolve_options(
    options: FormatOptions | None,
    date_sep: str | None,
    time_sep: str | None,
) -> DateTimeFormatOptions:
    if options is None:
        resolved = DateTimeFormatOptions()
    elif isinstance(options, DateTimeFormatOptions):
        resolved = options
    else:
        resolved = DateTimeFormatOptions.from_mapping(options)
    if date_sep is None and time_sep is None:
        return resolved
    return DateTimeFormatOptions(
        date_sep=resolved.date_sep if date_sep is None else date_sep,
        time_sep=resolved.time_sep if time_sep is None else time_sep,
    )


def format_datetime(
    value: date,
    options: FormatOptions | None = None,
    *,
    date_sep: str | None = None,
    time_sep: str | None = None,
) -> str:
    """Render ``YYYY-MM-DD HH:mm:ss`` with configurable separators.

    Fields are taken from ``value`` as-is; aware datetimes are not converted.
    A plain ``date`` renders as midnight. Keyword separators override
    ``options``.
    """
    if isinstance(value, datetime):
        hour, minute, second = value.hour, value.minute, value.second
    elif isinstance(value, date):
        hour = minute = second = 0
    else:
        raise TypeError(f"Expected date or datetime, got {type(value).__name__}")

    opts = _resolve_options(options, date_sep, time_sep)
    ds, ts = opts.date_sep, opts.time_sep
    return (
        f"{value.year:04d}{ds}{value.month:02d}{ds}{value.day:02d} "
        f"{hour:02d}{ts}{minute:02d}{ts}{second:02d}"
    )
