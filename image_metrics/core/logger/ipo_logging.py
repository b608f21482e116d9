# Path: image_metrics/core/logger/ipo_logging.py
"""
IPO-Aware Logging for Image Metrics Module

Input-Process-Output separated logging for build metric verification.

This module sets up logging with separate files for:
- INPUT layer (build output locator, report and properties readers)
- PROCESS layer (tolerance windows, verifier)
- OUTPUT layer (check results)
- Full activity (everything combined)

Handlers are attached to the layer loggers rather than the root logger
so a host test runner keeps its own root handlers.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from ...constants import LOG_LAYERS, LOG_LAYER_INPUT, LOG_LAYER_PROCESS, LOG_LAYER_OUTPUT


FULL_ACTIVITY_LOG = 'full_activity.log'

LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'

# Marker attribute identifying handlers installed by setup_ipo_logging
_HANDLER_MARKER = '_image_metrics_ipo'


def _make_handler(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)
    return handler


def _remove_ipo_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()


def setup_ipo_logging(
    log_dir: Optional[Path] = None,
    log_level: str = 'INFO',
    console_output: bool = False
) -> None:
    """
    Set up IPO-aware logging for image metric verification.

    Creates in log_dir:
    - input_activity.log (INPUT layer)
    - process_activity.log (PROCESS layer)
    - output_activity.log (OUTPUT layer)
    - full_activity.log (all layers combined)

    Calling it again replaces the handlers from the previous call.

    Args:
        log_dir: Directory for log files, or None for console only
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: Whether to also output to console

    Example:
        setup_ipo_logging(
            log_dir=Path('target/image-metrics-logs'),
            log_level='DEBUG',
        )
    """
    level = getattr(logging, log_level.upper())
    formatter = logging.Formatter(LOG_FORMAT)

    full_handler = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        full_handler = _make_handler(
            logging.FileHandler(log_dir / FULL_ACTIVITY_LOG), formatter
        )

    console_handler = None
    if console_output:
        console_handler = _make_handler(logging.StreamHandler(sys.stdout), formatter)
        console_handler.setLevel(level)

    for layer in LOG_LAYERS:
        layer_logger = logging.getLogger(layer)
        _remove_ipo_handlers(layer_logger)
        layer_logger.setLevel(level)

        if log_dir is not None:
            layer_logger.addHandler(_make_handler(
                logging.FileHandler(log_dir / f'{layer}_activity.log'), formatter
            ))
            layer_logger.addHandler(full_handler)

        if console_handler is not None:
            layer_logger.addHandler(console_handler)


def teardown_ipo_logging() -> None:
    """Remove handlers installed by setup_ipo_logging and reset layer levels."""
    for layer in LOG_LAYERS:
        layer_logger = logging.getLogger(layer)
        _remove_ipo_handlers(layer_logger)
        layer_logger.setLevel(logging.NOTSET)


def get_input_logger(name: str) -> logging.Logger:
    """
    Get logger for INPUT layer.

    Example:
        logger = get_input_logger('build_output_locator')
        logger.info("Locating build output")
    """
    return logging.getLogger(f'{LOG_LAYER_INPUT}.{name}')


def get_process_logger(name: str) -> logging.Logger:
    """Get logger for PROCESS layer (tolerance checks, verifier)."""
    return logging.getLogger(f'{LOG_LAYER_PROCESS}.{name}')


def get_output_logger(name: str) -> logging.Logger:
    """Get logger for OUTPUT layer (check results)."""
    return logging.getLogger(f'{LOG_LAYER_OUTPUT}.{name}')


__all__ = [
    'setup_ipo_logging',
    'teardown_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
