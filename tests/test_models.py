from datetime import date, timedelta

import pytest

from taskboard.models import (
    ALARM_REMINDER,
    HEADERS,
    MAX_PRIORITY,
    MIN_PRIORITY,
    Task,
    format_date,
    parse_date,
)


def test_format_date_has_no_leading_zeros():
    assert format_date(date(2024, 3, 5)) == "3/5/24"


def test_format_date_two_digit_year_is_zero_padded():
    assert format_date(date(2007, 12, 31)).endswith("/07")


@pytest.mark.parametrize(
    "value", [date(2024, 1, 1), date(2025, 12, 31), date(2030, 7, 9)]
)
def test_parse_date_round_trip(value):
    assert parse_date(format_date(value)) == value


def test_parse_date_rejects_garbage():
    with pytest.raises(ValueError):
        parse_date("2024-03-05")


def test_end_defaults_to_a_week_after_start():
    start = date(2024, 6, 1)
    task = Task("read", start=start)
    assert task.end == start + timedelta(days=7)


def test_explicit_end_is_kept():
    task = Task("read", start=date(2024, 6, 1), end=date(2024, 6, 3))
    assert task.end == date(2024, 6, 3)


@pytest.mark.parametrize("priority", [MIN_PRIORITY - 1, MAX_PRIORITY + 1])
def test_priority_out_of_range(priority):
    with pytest.raises(ValueError):
        Task("read", priority=priority)


def test_priority_must_be_integer():
    with pytest.raises(TypeError):
        Task("read", priority="3")


def test_unknown_reminder_rejected():
    with pytest.raises(ValueError):
        Task("read", reminder="email")


def test_default_reminder_is_alarm():
    assert Task("read").reminder == ALARM_REMINDER


def test_time_range_joins_formatted_dates():
    start, end = date(2024, 6, 1), date(2024, 6, 8)
    task = Task("read", start=start, end=end)
    assert task.time_range() == f"{format_date(start)} - {format_date(end)}"


def test_as_row_matches_headers():
    task = Task(
        "read",
        priority=4,
        description="chapter two",
        start=date(2024, 6, 1),
        review="long",
    )
    row = task.as_row()
    assert len(row) == len(HEADERS)
    assert row == ("4", "read", "chapter two", task.time_range(), ALARM_REMINDER, "long")