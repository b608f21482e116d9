# Path: image_metrics/tests/conftest.py
"""
Shared fixtures for image metrics tests.

Builds throw-away project trees shaped like a native-image build:

    <tmp>/target/app-1.0-native-image-source-jar/app-1.0-runner-build-output-stats.json
    <tmp>/src/test/resources/image-metrics-test.properties
"""

import json
import os
from pathlib import Path

import pytest

from image_metrics.core.config_loader import ConfigLoader

IMAGE_DIR_NAME = 'app-1.0-native-image-source-jar'
REPORT_NAME = 'app-1.0-runner-build-output-stats.json'
RESOURCES_DIR = Path('src/test/resources')


SAMPLE_BUILD_OUTPUT = {
    'general_info': {
        'name': 'app-1.0-runner',
        'graalvm_version': 'GraalVM CE 21.0.2+13.1',
        'java_version': '21.0.2+13',
        'garbage_collector': 'Serial GC',
    },
    'analysis_results': {
        'types': {'total': 13855, 'reachable': 12056, 'reflection': 4044, 'jni': 62},
        'fields': {'total': 24811, 'reachable': 16320, 'reflection': 150, 'jni': 67},
        'methods': {'total': 105312, 'reachable': 62017, 'reflection': 3520, 'jni': 55},
    },
    'image_details': {
        'total_bytes': 57342976,
        'code_area': {'bytes': 26654720, 'compilation_units': 54891},
        'image_heap': {
            'bytes': 30146560,
            'objects': {'count': 334815},
            'resources': {'count': 116, 'bytes': 283648},
        },
    },
}


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Fresh ConfigLoader with no IMAGE_METRICS_* overrides for each test."""
    for key in list(os.environ):
        if key.startswith('IMAGE_METRICS_'):
            monkeypatch.delenv(key)
    ConfigLoader.reset()
    yield
    ConfigLoader.reset()


class NativeImageProject:
    """Helper writing build output and expectation files under a root."""

    def __init__(self, root: Path):
        self.root = root

    @property
    def image_dir(self) -> Path:
        return self.root / 'target' / IMAGE_DIR_NAME

    def write_report(self, data=None, name: str = REPORT_NAME, image_dir: Path = None) -> Path:
        directory = image_dir or self.image_dir
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(json.dumps(SAMPLE_BUILD_OUTPUT if data is None else data), encoding='utf-8')
        return path

    def write_properties(self, text: str, name: str = 'image-metrics-test.properties') -> Path:
        directory = self.root / RESOURCES_DIR
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(text, encoding='latin-1')
        return path


@pytest.fixture
def project(tmp_path, monkeypatch) -> NativeImageProject:
    """Project tree in tmp_path, which is also the working directory."""
    monkeypatch.chdir(tmp_path)
    return NativeImageProject(tmp_path)


@pytest.fixture
def sample_build_output() -> dict:
    return json.loads(json.dumps(SAMPLE_BUILD_OUTPUT))
