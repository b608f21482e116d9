# Path: image_metrics/loaders/expectations.py
"""
Expectation Loader for Image Metrics Module

Turns a properties resource into MetricExpectation entries.

Every key not ending in '.tolerance' is an expectation; its sibling
'<key>.tolerance' holds the allowed deviation in percent:

    analysis_results.types.reachable=7051
    analysis_results.types.reachable.tolerance=3

A key without its tolerance sibling means the test setup is broken
and fails with MissingToleranceError.
"""

import re
from dataclasses import dataclass
from typing import Optional

from ..constants import TOLERANCE_SUFFIX, PROPERTIES_ENCODING
from ..core.logger import get_input_logger
from ..exceptions import (
    ExpectationsLoadError,
    InvalidExpectationError,
    MissingToleranceError,
)
from .properties_reader import parse_properties
from .resources import ResourceProvider

logger = get_input_logger('expectations')

_INTEGER = re.compile(r'[+-]?[0-9]+')


@dataclass(frozen=True)
class MetricExpectation:
    """
    Expected value of one build metric.

    Attributes:
        key: Dotted path into the build output report
        expected: Expected integer value
        tolerance: Allowed deviation in percent of expected
    """
    key: str
    expected: int
    tolerance: int


def _parse_int(key: str, value: str) -> int:
    text = value.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidExpectationError(key, value)
    return int(text)


def load_properties(resource_name: str, provider: ResourceProvider) -> dict[str, str]:
    """
    Fetch and parse a properties resource.

    Raises:
        ExpectationsLoadError: If the resource is missing, unreadable or malformed
    """
    try:
        data = provider.open_resource(resource_name)
    except OSError as e:
        raise ExpectationsLoadError(resource_name, str(e)) from e

    if data is None:
        raise ExpectationsLoadError(resource_name, 'resource not found')

    try:
        return parse_properties(data.decode(PROPERTIES_ENCODING))
    except ValueError as e:
        raise ExpectationsLoadError(resource_name, str(e)) from e


def build_expectations(properties: dict[str, str]) -> list[MetricExpectation]:
    """
    Pair each expectation key with its tolerance.

    Args:
        properties: Flat key -> value mapping in file order

    Returns:
        Expectations in file order

    Raises:
        MissingToleranceError: If a key has no '<key>.tolerance' sibling
        InvalidExpectationError: If a value is not an integer
    """
    expectations = []
    for key, value in properties.items():
        if key.endswith(TOLERANCE_SUFFIX):
            continue

        tolerance = properties.get(key + TOLERANCE_SUFFIX)
        if tolerance is None:
            raise MissingToleranceError(key)

        expectations.append(MetricExpectation(
            key=key,
            expected=_parse_int(key, value),
            tolerance=_parse_int(key + TOLERANCE_SUFFIX, tolerance),
        ))

    return expectations


def load_expectations(
    resource_name: str,
    provider: ResourceProvider
) -> list[MetricExpectation]:
    """Load and validate expectations from a named resource."""
    expectations = build_expectations(load_properties(resource_name, provider))
    logger.info(f"Loaded {len(expectations)} metric expectations from {resource_name}")
    return expectations


__all__ = [
    'MetricExpectation',
    'load_properties',
    'build_expectations',
    'load_expectations',
]
