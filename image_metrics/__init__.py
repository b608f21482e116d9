# Path: image_metrics/__init__.py
"""
Image Metrics Module

Regression check for native-image build composition. Asserts that
the counts reported in the build statistics JSON (classes, methods,
reachable objects, image size, ...) stay within a percentage of
expected values kept in a properties resource.

Architecture (IPO):
- INPUT: loaders/ - Build output discovery, report and properties reading
- PROCESS: engine/ - Tolerance windows, verification
- OUTPUT: assertion failures and check results

Usage:
    from image_metrics import BuildOutput

    def test_image_metrics():
        BuildOutput().verify_image_metrics()
"""

__version__ = '0.1.0'

from .engine.verifier import BuildOutput, MetricCheckResult, verify_image_metrics
from .engine.tolerance import ToleranceWindow
from .loaders.expectations import MetricExpectation
from .exceptions import (
    ImageMetricsAssertionError,
    BuildOutputNotFoundError,
    BuildOutputLoadError,
    ExpectationsLoadError,
    ExpectationConfigError,
    MissingToleranceError,
    InvalidExpectationError,
    MetricOutOfRangeError,
    MetricPathError,
)

__all__ = [
    '__version__',
    'BuildOutput',
    'MetricCheckResult',
    'verify_image_metrics',
    'ToleranceWindow',
    'MetricExpectation',
    'ImageMetricsAssertionError',
    'BuildOutputNotFoundError',
    'BuildOutputLoadError',
    'ExpectationsLoadError',
    'ExpectationConfigError',
    'MissingToleranceError',
    'InvalidExpectationError',
    'MetricOutOfRangeError',
    'MetricPathError',
]
