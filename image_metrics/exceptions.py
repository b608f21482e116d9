# Path: image_metrics/exceptions.py
"""
Image Metrics Exceptions

Failures raised while verifying native-image build metrics.

Assertion family (reported by test runners as test failures):
- BuildOutputNotFoundError: build directory or report could not be identified
- ExpectationsLoadError: properties resource missing or unreadable
- ExpectationConfigError: malformed expectations (missing tolerance, bad value)
- MetricOutOfRangeError: reported metric outside its tolerance window

Load family (unrecoverable errors aborting the check):
- BuildOutputLoadError: report missing, unreadable or not valid JSON
- MetricPathError: a dotted metric key does not resolve in the report
"""

from typing import Optional


class ImageMetricsAssertionError(AssertionError):
    """Base class for verification failures reported as test failures."""


class BuildOutputNotFoundError(ImageMetricsAssertionError):
    """Zero or several candidates matched while locating the build output."""

    def __init__(self, level: str, location, candidates: Optional[list] = None):
        self.level = level
        self.location = location
        self.candidates = list(candidates or [])

        if self.candidates:
            found = ', '.join(str(c) for c in self.candidates)
            detail = f"{len(self.candidates)} candidates in {location}: {found}"
        else:
            detail = f"no candidates in {location}"

        super().__init__(f"Could not identify the {level} ({detail})")


class ExpectationsLoadError(ImageMetricsAssertionError):
    """The expectations resource could not be found or read."""

    def __init__(self, resource_name: str, reason: str = ''):
        self.resource_name = resource_name
        message = f"Could not load properties from {resource_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ExpectationConfigError(ImageMetricsAssertionError):
    """Expectations are malformed. Indicates a broken test setup."""


class MissingToleranceError(ExpectationConfigError):
    """An expectation key has no matching tolerance key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"tolerance not defined for {key}")


class InvalidExpectationError(ExpectationConfigError):
    """An expectation or tolerance value is not an integer."""

    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(f"Value of {key} is not an integer: {value!r}")


class MetricOutOfRangeError(ImageMetricsAssertionError):
    """A reported metric lies outside its tolerance window."""

    def __init__(self, result):
        self.result = result
        super().__init__(result.message)


class BuildOutputLoadError(RuntimeError):
    """The build output report could not be loaded."""


class MetricPathError(BuildOutputLoadError):
    """A dotted metric key does not resolve to an integer in the report."""

    def __init__(self, key: str, segment: str, reason: str):
        self.key = key
        self.segment = segment
        self.reason = reason
        super().__init__(f"Cannot resolve '{key}' at segment '{segment}': {reason}")


__all__ = [
    'ImageMetricsAssertionError',
    'BuildOutputNotFoundError',
    'ExpectationsLoadError',
    'ExpectationConfigError',
    'MissingToleranceError',
    'InvalidExpectationError',
    'MetricOutOfRangeError',
    'BuildOutputLoadError',
    'MetricPathError',
]
