"""Unit tests for price coercion, label parsing and date window helpers."""

import math
from datetime import date, datetime

import pytest

from forecast24 import utils, exceptions


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0.5, 0.5),
        (2, 2.0),
        ("1.25", 1.25),
        (" 0.3 ", 0.3),
        (-0.05, -0.05),
        (None, None),
        ("", None),
        ("abc", None),
        (True, None),
        (float("nan"), None),
        (float("-inf"), None),
        ("inf", None),
        ([1.0], None),
    ],
)
def test_coerce_price(raw, expected):
    assert utils.coerce_price(raw) == expected


def test_hourly_label_reads_wall_clock():
    """Without tz, the label is the HH:MM written in the string."""
    assert utils.hourly_label("2024-01-01T03:00:00Z") == "03:00"
    assert utils.hourly_label("2024-06-01T23:30:00+02:00") == "23:30"


@pytest.mark.parametrize("raw", [None, "", "2024-01-01", "garbage-timestamp", 123])
def test_hourly_label_underivable(raw):
    assert utils.hourly_label(raw) is None


def test_hourly_label_with_tz():
    # Summer time: UTC+2 in Oslo
    assert utils.hourly_label("2024-07-01T10:00:00Z", tz="Europe/Oslo") == "12:00"
    assert utils.hourly_label("2024-07-01T12:00:00+02:00", tz="Europe/Oslo") == "12:00"
    assert utils.hourly_label("not a time", tz="Europe/Oslo") is None


def test_daily_label():
    assert utils.daily_label(" 2024-01-01 ") == "2024-01-01"
    assert utils.daily_label("") is None
    assert utils.daily_label(None) is None


def test_history_window_covers_30_days_including_today():
    start, end = utils.history_window(date(2024, 3, 10), days=30)
    assert (start, end) == ("2024-02-10", "2024-03-10")


def test_history_window_single_day():
    assert utils.history_window(date(2024, 1, 1), days=1) == ("2024-01-01", "2024-01-01")


def test_history_window_rejects_zero_days():
    with pytest.raises(exceptions.Forecast24Error):
        utils.history_window(date(2024, 1, 1), days=0)


def test_format_date_accepts_datetime():
    assert utils.format_date(datetime(2024, 5, 17, 13, 45)) == "2024-05-17"


def test_round_price():
    assert utils.round_price(0.30000000000000004) == 0.3
    assert utils.round_price(1.23456) == 1.235


def test_coerce_price_huge_integer_is_dropped():
    """JSON integers beyond float range cannot be priced."""
    assert utils.coerce_price(10**400) is None
    assert utils.coerce_price(-(10**400)) is None
    assert utils.coerce_price("1e400") is None


@pytest.mark.parametrize(
    "raw", ["now", "today", "tomorrow", "2024-01-01", "03:00", "Jan 1 2024 03:00"]
)
def test_hourly_label_with_tz_requires_iso_timestamp(raw):
    assert utils.hourly_label(raw, tz="Europe/Oslo") is None


def test_hourly_label_with_tz_accepts_space_separator():
    assert utils.hourly_label("2024-01-01 03:00:00", tz="Europe/Oslo") == "04:00"


def test_mean_price():
    assert utils.mean_price([0.5, 0.3]) == pytest.approx(0.4)
    assert math.isnan(utils.mean_price([]))


def test_mean_price_does_not_overflow():
    assert utils.mean_price([1e308, 1e308]) == 1e308
    assert utils.mean_price([1.7e308, 1.7e308, 1.7e308]) == pytest.approx(1.7e308)
