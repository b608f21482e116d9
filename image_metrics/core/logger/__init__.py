# Path: image_metrics/core/logger/__init__.py
"""
Image Metrics Logger Package

IPO-aware logging for the image metrics module.
"""

from .ipo_logging import (
    setup_ipo_logging,
    teardown_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'teardown_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
