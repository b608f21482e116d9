# Path: image_metrics/tests/test_tolerance.py
"""
Unit tests for tolerance windows.

Tests:
- Truncating division toward zero
- Inclusive bounds and off-by-one rejection
- Negative expected values
"""

import pytest

from image_metrics.engine.tolerance import ToleranceWindow, is_within_range, truncating_div


@pytest.mark.parametrize('numerator, denominator, expected', [
    (1000, 100, 10),
    (999, 100, 9),
    (-999, 100, -9),
    (-1000, 100, -10),
    (0, 100, 0),
    (7, -2, -3),
])
def test_truncating_div_rounds_toward_zero(numerator, denominator, expected):
    assert truncating_div(numerator, denominator) == expected


def test_window_for_expected_100_tolerance_10():
    window = ToleranceWindow.for_expectation(100, 10)

    assert (window.lower_bound, window.upper_bound) == (90, 110)
    assert window.contains(90)
    assert window.contains(110)
    assert not window.contains(89)
    assert not window.contains(111)


def test_zero_tolerance_accepts_only_expected():
    window = ToleranceWindow.for_expectation(12056, 0)

    assert window.low == window.high == 12056
    assert window.contains(12056)
    assert not window.contains(12055)
    assert not window.contains(12057)


def test_offset_is_truncated():
    # 1234 * 3 / 100 = 37.02
    window = ToleranceWindow.for_expectation(1234, 3)

    assert window.offset == 37
    assert window.contains(1197)
    assert not window.contains(1196)
    assert window.contains(1271)
    assert not window.contains(1272)


def test_negative_expected_keeps_raw_bounds_and_normalizes():
    window = ToleranceWindow.for_expectation(-50, 20)

    # Raw formula puts the larger number in lower_bound
    assert window.offset == -10
    assert window.lower_bound == -40
    assert window.upper_bound == -60
    assert (window.low, window.high) == (-60, -40)
    assert window.contains(-45)
    assert window.contains(-60)
    assert window.contains(-40)
    assert not window.contains(-61)
    assert not window.contains(-39)


def test_negative_offset_truncates_toward_zero():
    # -55 * 10 / 100 = -5.5 -> -5, flooring would give -6
    window = ToleranceWindow.for_expectation(-55, 10)

    assert window.offset == -5
    assert (window.low, window.high) == (-60, -50)


def test_is_within_range():
    assert is_within_range(100, 105, 5)
    assert not is_within_range(100, 106, 5)


def test_str_shows_expected_and_tolerance():
    assert str(ToleranceWindow.for_expectation(100, 10)) == '[100 +- 10%]'
