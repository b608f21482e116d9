# Path: image_metrics/pytest_plugin.py
"""
pytest Plugin for Image Metrics

Enable in a conftest.py:

    pytest_plugins = ['image_metrics.pytest_plugin']

Provides:
- build_output fixture: a BuildOutput rooted at the invocation directory
- IPO log files when IMAGE_METRICS_LOG_DIR is set
"""

from pathlib import Path

import pytest

from .core.config_loader import ConfigLoader
from .core.logger import setup_ipo_logging, teardown_ipo_logging
from .engine.verifier import BuildOutput


def pytest_configure(config):
    settings = ConfigLoader()
    log_dir = settings.get('log_dir')
    if log_dir is None:
        return

    log_dir = Path(log_dir)
    if not log_dir.is_absolute():
        log_dir = Path(config.invocation_params.dir) / log_dir

    log_level = 'DEBUG' if settings.get('debug') else settings.get('log_level')
    setup_ipo_logging(log_dir, log_level)


def pytest_unconfigure(config):
    teardown_ipo_logging()


@pytest.fixture
def build_output(request) -> BuildOutput:
    """BuildOutput for the directory pytest was invoked from."""
    return BuildOutput(working_dir=Path(request.config.invocation_params.dir))
