from datetime import date, datetime, timedelta, timezone

import pytest

from toputil import DateTimeFormatOptions, format_datetime


def test_default_separators() -> None:
    assert format_datetime(datetime(2023, 10, 5, 8, 3, 2)) == "2023-10-05 08:03:02"


def test_custom_separators() -> None:
    value = datetime(2023, 10, 5, 8, 3, 2)
    assert format_datetime(value, date_sep="/", time_sep=".") == "2023/10/05 08.03.02"
    assert format_datetime(value, DateTimeFormatOptions(date_sep="/", time_sep=".")) == "2023/10/05 08.03.02"
    assert format_datetime(value, {"dateSep": "/", "timeSep": "."}) == "2023/10/05 08.03.02"


def test_separators_are_independent() -> None:
    value = datetime(2023, 10, 5, 8, 3, 2)
    assert format_datetime(value, {"date_sep": ""}) == "20231005 08:03:02"
    assert format_datetime(value, time_sep="") == "2023-10-05 080302"


def test_keyword_overrides_options() -> None:
    value = datetime(2023, 10, 5, 8, 3, 2)
    opts = DateTimeFormatOptions(date_sep="/", time_sep=".")
    assert format_datetime(value, opts, time_sep="-") == "2023/10/05 08-03-02"


def test_year_is_zero_padded() -> None:
    assert format_datetime(datetime(987, 1, 2, 3, 4, 5)) == "0987-01-02 03:04:05"


def test_aware_datetime_not_converted() -> None:
    value = datetime(2023, 10, 5, 23, 59, 59, tzinfo=timezone(timedelta(hours=9)))
    assert format_datetime(value) == "2023-10-05 23:59:59"


def test_plain_date_renders_midnight() -> None:
    assert format_datetime(date(2024, 2, 29)) == "2024-02-29 00:00:00"


def test_rejects_non_dates() -> None:
    with pytest.raises(TypeError):
        format_datetime("2023-10-05")


def test_options_reject_non_string_separators() -> None:
    with pytest.raises(TypeError):
        DateTimeFormatOptions(date_sep=None)


def test_none_separators_in_mapping_fall_back_to_defaults() -> None:
    value = datetime(2023, 10, 5, 8, 3, 2)
    assert format_datetime(value, {"dateSep": None}) == "2023-10-05 08:03:02"
    assert format_datetime(value, {"date_sep": None, "timeSep": "."}) == "2023-10-05 08.03.02"
    assert format_datetime(value, {"date_sep": None, "dateSep": "/"}) == "2023/10/05 08:03:02"
