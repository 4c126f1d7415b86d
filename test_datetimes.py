from datetime import datetime

import pytest

from flight_analyzer.analysis.datetimes import (
    DATETIME_LAYOUTS,
    DateTimeParseError,
    parse_local_datetime,
    to_epoch_millis,
)


@pytest.mark.parametrize(
    ("date_part", "time_part", "expected"),
    [
        ("12.05.18", "9:40", datetime(2018, 5, 12, 9, 40)),
        ("12.05.18", "09:40", datetime(2018, 5, 12, 9, 40)),
        ("12.05.18", "22:10", datetime(2018, 5, 12, 22, 10)),
        ("31.12.99", "0:05", datetime(2099, 12, 31, 0, 5)),
    ],
)
def test_accepted_layouts(date_part, time_part, expected):
    assert parse_local_datetime(date_part, time_part) == expected


@pytest.mark.parametrize(
    ("date_part", "time_part"),
    [
        ("31-12-2023", "10:00"),
        ("1.05.18", "10:00"),
        ("12.5.18", "10:00"),
        ("12.05.2018", "10:00"),
        ("12.05.18", "10:0"),
        ("12.05.18", "25:00"),
        ("00.05.18", "10:00"),
        ("32.05.18", "10:00"),
        ("12.00.18", "10:00"),
        ("12.13.18", "10:00"),
        ("12.05.18", " 10:00"),
        ("12.05.18", "10:60"),
        ("12.05.18", "24:01"),
        ("١٢.٠٥.١٨", "10:00"),
        ("12.05.18", "１０:00"),
    ],
)
def test_rejected_layouts(date_part, time_part):
    with pytest.raises(DateTimeParseError) as excinfo:
        parse_local_datetime(date_part, time_part)

    assert excinfo.value.text == f"{date_part} {time_part}"
    assert excinfo.value.patterns == tuple(layout.name for layout in DATETIME_LAYOUTS)
    assert str(excinfo.value) == f"Unable to parse date and time: {date_part} {time_part}"


def test_first_matching_layout_wins():
    calls = []

    def never(text):
        calls.append("never")
        return None

    def first(text):
        calls.append("first")
        return datetime(2020, 1, 1)

    def second(text):
        calls.append("second")
        return datetime(2021, 1, 1)

    assert parse_local_datetime("a", "b", layouts=(never, first, second)) == datetime(2020, 1, 1)
    assert calls == ["never", "first"]


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_local_datetime("bad", "input")


def test_epoch_millis_difference_is_whole_minutes():
    start = to_epoch_millis(datetime(2018, 5, 12, 9, 40))
    end = to_epoch_millis(datetime(2018, 5, 12, 19, 25))

    assert end - start == 585 * 60_000


@pytest.mark.parametrize(
    ("date_part", "time_part", "expected"),
    [
        ("30.02.18", "10:00", datetime(2018, 2, 28, 10, 0)),
        ("31.02.20", "10:00", datetime(2020, 2, 29, 10, 0)),
        ("31.04.18", "7:15", datetime(2018, 4, 30, 7, 15)),
    ],
)
def test_day_past_month_end_is_clamped(date_part, time_part, expected):
    assert parse_local_datetime(date_part, time_part) == expected


@pytest.mark.parametrize(
    ("date_part", "expected"),
    [
        ("12.05.18", datetime(2018, 5, 13, 0, 0)),
        ("31.12.18", datetime(2019, 1, 1, 0, 0)),
        ("30.02.18", datetime(2018, 3, 1, 0, 0)),
    ],
)
def test_hour_24_is_midnight_of_next_day(date_part, expected):
    assert parse_local_datetime(date_part, "24:00") == expected
