# Path: image_metrics/loaders/__init__.py
"""
Image Metrics Loaders (INPUT layer)

- build_output_locator: finds the build statistics report
- build_output_reader: parses the report, resolves dotted keys
- properties_reader / expectations: expected values and tolerances
- resources: pluggable lookup of the expectations resource
"""

from .build_output_locator import BuildOutputLocator, locate_build_output
from .build_output_reader import BuildOutputReport, read_build_output
from .expectations import MetricExpectation, load_expectations, build_expectations
from .properties_reader import parse_properties
from .resources import (
    ResourceProvider,
    DirectoryResourceProvider,
    PackageResourceProvider,
    ChainResourceProvider,
)

__all__ = [
    'BuildOutputLocator',
    'locate_build_output',
    'BuildOutputReport',
    'read_build_output',
    'MetricExpectation',
    'load_expectations',
    'build_expectations',
    'parse_properties',
    'ResourceProvider',
    'DirectoryResourceProvider',
    'PackageResourceProvider',
    'ChainResourceProvider',
]
