# Path: image_metrics/loaders/build_output_reader.py
"""
Build Output Reader for Image Metrics Module

Reads the native-image build statistics JSON into a read-only
report and resolves dotted metric keys against it.

Example report fragment:
    {
      "analysis_results": {
        "classes": {"total": 9863, "reachable": 7051, "reflection": 523},
        "methods": {"total": 78634, "reachable": 35926}
      },
      "image_details": {"total_bytes": 43581520}
    }

Key 'analysis_results.classes.reachable' resolves to 7051.
"""

import json
import math
from pathlib import Path
from typing import Any, Mapping

from ..constants import PATH_SEPARATOR, REPORT_ENCODING
from ..core.logger import get_input_logger
from ..exceptions import BuildOutputLoadError, MetricPathError

logger = get_input_logger('build_output_reader')


class BuildOutputReport:
    """
    Parsed build statistics report.

    Wraps the top-level JSON object. Metric lookups descend through
    nested objects and never fall back to a default.
    """

    def __init__(self, data: Mapping[str, Any], source: Path = None):
        if not isinstance(data, Mapping):
            raise BuildOutputLoadError(
                f"Build output must be a JSON object, got {type(data).__name__}"
            )
        self._data = data
        self.source = source

    @property
    def data(self) -> Mapping[str, Any]:
        return self._data

    def get_int(self, key: str) -> int:
        """
        Resolve a dotted key to an integer leaf.

        Args:
            key: Dotted path, e.g. 'analysis_results.methods.reachable'

        Returns:
            The integer value at the path

        Raises:
            MetricPathError: If a segment is missing, an intermediate node is
                not an object, or the leaf is not a number
        """
        segments = key.split(PATH_SEPARATOR)
        node = self._data

        for segment in segments[:-1]:
            node = self._child(node, key, segment)
            if not isinstance(node, Mapping):
                raise MetricPathError(key, segment, f"expected an object, found {_json_type(node)}")

        last = segments[-1]
        return _as_int(self._child(node, key, last), key, last)

    @staticmethod
    def _child(node: Mapping[str, Any], key: str, segment: str) -> Any:
        if segment not in node:
            raise MetricPathError(key, segment, "no such entry")
        return node[segment]

    def __contains__(self, key: str) -> bool:
        try:
            self.get_int(key)
        except MetricPathError:
            return False
        return True


def _json_type(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    return 'object'


def _as_int(value: Any, key: str, segment: str) -> int:
    """Integer value of a JSON number leaf; fractions truncate toward zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetricPathError(key, segment, f"expected a number, found {_json_type(value)}")
    if isinstance(value, float) and not math.isfinite(value):
        raise MetricPathError(key, segment, f"expected a finite number, found {value}")
    return int(value)


def read_build_output(path: Path) -> BuildOutputReport:
    """
    Read and parse a build statistics report.

    Args:
        path: Path to the *-build-output-stats.json file

    Returns:
        BuildOutputReport

    Raises:
        BuildOutputLoadError: If the file is missing, unreadable or not a JSON object
    """
    path = Path(path)
    logger.debug(f"Reading build output: {path}")

    try:
        with open(path, 'r', encoding=REPORT_ENCODING) as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BuildOutputLoadError(f"Could not load build output from {path}: {e}") from e

    report = BuildOutputReport(data, source=path)
    logger.info(f"Loaded build output with {len(report.data)} top-level sections")
    return report


__all__ = ['BuildOutputReport', 'read_build_output']
