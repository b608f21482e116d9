# Path: image_metrics/engine/__init__.py
"""
Image Metrics Engine (PROCESS layer)

Tolerance windows and the build output verifier.
"""

from .tolerance import ToleranceWindow, is_within_range
from .verifier import BuildOutput, MetricCheckResult, check_metric, verify_image_metrics

__all__ = [
    'ToleranceWindow',
    'is_within_range',
    'BuildOutput',
    'MetricCheckResult',
    'check_metric',
    'verify_image_metrics',
]
