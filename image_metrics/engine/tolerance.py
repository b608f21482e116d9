# Path: image_metrics/engine/tolerance.py
"""
Percentage Tolerance Window for Build Metrics

For expected value E and tolerance T (percent):

    offset      = E * T / 100   (integer division truncating toward zero)
    lower_bound = E - offset
    upper_bound = E + offset

Truncation toward zero matters for negative products: E=-50, T=20
gives offset -10, so lower_bound=-40 and upper_bound=-60. The raw
bounds are kept as computed; containment uses the normalized
[min, max] window, making -45 acceptable in that example.
"""

from dataclasses import dataclass

from ..constants import PERCENT
from ..core.logger import get_process_logger

logger = get_process_logger('tolerance')


def truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


@dataclass(frozen=True)
class ToleranceWindow:
    """
    Allowed range around an expected metric value.

    Attributes:
        expected: Expected value
        tolerance: Tolerance in percent
        offset: Truncated E * T / 100
        lower_bound: expected - offset, as computed
        upper_bound: expected + offset, as computed
    """
    expected: int
    tolerance: int
    offset: int
    lower_bound: int
    upper_bound: int

    @classmethod
    def for_expectation(cls, expected: int, tolerance: int) -> 'ToleranceWindow':
        offset = truncating_div(expected * tolerance, PERCENT)
        return cls(
            expected=expected,
            tolerance=tolerance,
            offset=offset,
            lower_bound=expected - offset,
            upper_bound=expected + offset,
        )

    @property
    def low(self) -> int:
        return min(self.lower_bound, self.upper_bound)

    @property
    def high(self) -> int:
        return max(self.lower_bound, self.upper_bound)

    def contains(self, actual: int) -> bool:
        """Inclusive on both ends."""
        return self.low <= actual <= self.high

    def __str__(self) -> str:
        return f"[{self.expected} +- {self.tolerance}%]"


def is_within_range(expected: int, actual: int, tolerance: int) -> bool:
    """Check actual against the tolerance window of expected."""
    window = ToleranceWindow.for_expectation(expected, tolerance)
    within = window.contains(actual)
    logger.debug(
        f"{actual} in [{window.low}, {window.high}] (E={expected}, T={tolerance}%): {within}"
    )
    return within


__all__ = ['ToleranceWindow', 'is_within_range', 'truncating_div']
