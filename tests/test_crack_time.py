import time
from decimal import Decimal

import pytest

from pwstrength.analyzer import analyze
from pwstrength.crack_time import (
    brute_force_estimate,
    estimate_crack_time,
    format_duration,
    format_number,
    total_combinations,
)
from pwstrength.report import build_report

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
YEAR = 365 * DAY


def test_crack_time_for_lowercase_password():
    seconds = estimate_crack_time(26, 8, 1e10)
    assert seconds == Decimal(26 ** 8) / Decimal(10 ** 10)
    assert format_duration(seconds) == "20.9 seconds"


@pytest.mark.parametrize("set_size,length", [(0, 8), (26, 0), (0, 0)])
def test_no_estimate_without_combinations(set_size, length):
    assert estimate_crack_time(set_size, length, 1e10) is None


@pytest.mark.parametrize("rate", [0, -1, float("nan"), float("inf"), float("-inf")])
def test_guess_rate_must_be_positive_and_finite(rate):
    with pytest.raises(ValueError):
        estimate_crack_time(26, 8, rate)
    with pytest.raises(ValueError):
        brute_force_estimate(analyze("password"), rate)


def test_huge_magnitudes_do_not_overflow():
    seconds = estimate_crack_time(94, 1000, 1e10)
    assert seconds > Decimal("1e900")
    assert format_duration(seconds).endswith(" millennia")


def test_guess_rate_scales_estimate():
    slow = estimate_crack_time(62, 10, 1e6)
    fast = estimate_crack_time(62, 10, 1e12)
    assert slow == fast * 1000000


@pytest.mark.parametrize("seconds,expected", [
    (0, "less than 1 second"),
    (0.5, "less than 1 second"),
    (1, "1 second"),
    (1.04, "1 second"),
    (2, "2 seconds"),
    (45.26, "45.3 seconds"),
    (59.94, "59.9 seconds"),
    (59.99, "1 minute"),
    (HOUR - 1, "1 hour"),
    (90, "1.5 minutes"),
    (MINUTE, "1 minute"),
    (HOUR, "1 hour"),
    (3 * HOUR, "3 hours"),
    (DAY, "1 day"),
    (100 * DAY, "100 days"),
    (YEAR, "1 year"),
    (250 * YEAR, "250 years"),
    (1000 * YEAR, "1 millennium"),
    (2000 * YEAR, "2 millennia"),
    (5_000_000 * YEAR, "5,000 millennia"),
])
def test_format_duration_bands(seconds, expected):
    assert format_duration(seconds) == expected


def test_format_duration_accepts_decimal():
    assert format_duration(Decimal("7200")) == "2 hours"


@pytest.mark.parametrize("value,expected", [
    (0, "0"),
    (1.5, "1.5"),
    (999, "999"),
    (999.94, "999.9"),
    (999.96, "1,000"),
    (1000, "1,000"),
    (123456.7, "123,457"),
    (1_234_567, "1,234,567"),
    (999_999_999_999_999, "999,999,999,999,999"),
    (10 ** 15, "1.00e+15"),
    (26 ** 20, "1.99e+28"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_number_beyond_float_range():
    assert format_number(95 ** 200).endswith("e+395")


def test_brute_force_estimate_for_result():
    estimate = brute_force_estimate(analyze("password"), 1e10)
    assert estimate.total_combinations == 26 ** 8
    assert estimate.total_combinations_display == "208,827,064,576"
    assert estimate.time_display == "20.9 seconds"
    data = estimate.to_dict()
    assert data["totalCombinations"] == 26 ** 8
    assert data["guessRate"] == 1e10


def test_brute_force_estimate_for_empty_password():
    assert brute_force_estimate(analyze(""), 1e10) is None


def test_brute_force_estimate_long_password():
    estimate = brute_force_estimate(analyze("Correct-Horse-Battery-Staple9!"), 1e10)
    assert estimate.total_combinations_display.endswith("e+59")
    assert estimate.time_display.endswith("millennia")


def test_total_combinations():
    assert total_combinations(26, 8) == 26 ** 8
    assert total_combinations(0, 8) == 0
    assert total_combinations(26, 0) == 0
    assert f"{total_combinations(94, 1000):.2e}" == f"{Decimal(94 ** 1000):.2e}"


def test_very_long_password_report_is_fast():
    start = time.perf_counter()
    report = build_report("aB3!" * 75000)
    assert time.perf_counter() - start < 2
    assert report["bruteForce"]["timeDisplay"].endswith(" millennia")
    assert "e+" in report["bruteForce"]["totalCombinationsDisplay"]
    assert len(report["bruteForce"]["totalCombinations"]) < 20
