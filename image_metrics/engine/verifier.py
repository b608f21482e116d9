# Path: image_metrics/engine/verifier.py
"""
Build Output Verifier

Asserts that a native-image build's reported statistics (classes,
methods, reachable objects, image size, ...) stay within a percentage
tolerance of expected values.

Each verification call:
1. Loads expectations from the properties resource
2. Locates and reads the *-build-output-stats.json report
3. Checks every expectation, in file order

Nothing is cached between calls: a rebuilt image is picked up by the
next call on the same BuildOutput.

Usage:
    from image_metrics import BuildOutput

    def test_image_metrics():
        BuildOutput().verify_image_metrics()
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_process_logger, get_output_logger
from ..exceptions import MetricOutOfRangeError
from ..loaders.build_output_locator import BuildOutputLocator
from ..loaders.build_output_reader import BuildOutputReport, read_build_output
from ..loaders.expectations import MetricExpectation, load_expectations
from ..loaders.resources import ResourceProvider, DirectoryResourceProvider
from .tolerance import ToleranceWindow


@dataclass
class MetricCheckResult:
    """
    Result of checking one metric.

    Attributes:
        key: Dotted metric key
        expected: Expected value
        tolerance: Tolerance in percent
        actual: Value found in the report
        window: Tolerance window used
        passed: Whether actual lies within the window
    """
    key: str
    expected: int
    tolerance: int
    actual: int
    window: ToleranceWindow
    passed: bool

    @property
    def message(self) -> str:
        return (
            f"Expected {self.key} to be within range "
            f"[{self.expected} +- {self.tolerance}%] but was {self.actual}"
        )


def check_metric(report: BuildOutputReport, expectation: MetricExpectation) -> MetricCheckResult:
    """
    Check one expectation against the report.

    Raises:
        MetricPathError: If the key does not resolve to a number
    """
    actual = report.get_int(expectation.key)
    window = ToleranceWindow.for_expectation(expectation.expected, expectation.tolerance)
    return MetricCheckResult(
        key=expectation.key,
        expected=expectation.expected,
        tolerance=expectation.tolerance,
        actual=actual,
        window=window,
        passed=window.contains(actual),
    )


class BuildOutput:
    """
    Verifies native-image build metrics against expected values.

    Example:
        build_output = BuildOutput()
        build_output.verify_image_metrics()
        build_output.verify_image_metrics('image-metrics-jdk21.properties')
    """

    def __init__(
        self,
        working_dir: Optional[Path] = None,
        resource_provider: Optional[ResourceProvider] = None,
        config: Optional[ConfigLoader] = None
    ):
        """
        Initialize verifier.

        Args:
            working_dir: Directory containing the build directory (default: cwd)
            resource_provider: Where expectation resources come from
                (default: configured resource directories under working_dir)
            config: Optional ConfigLoader instance
        """
        self.logger = get_process_logger('verifier')
        self.output_logger = get_output_logger('verifier')
        self.config = config if config else ConfigLoader()
        self.working_dir = Path(working_dir) if working_dir else None
        self.resource_provider = resource_provider or DirectoryResourceProvider(
            self.config.get('resource_dirs'), base_dir=self.working_dir
        )

    def load_report(self) -> BuildOutputReport:
        """Locate and read the build output report."""
        locator = BuildOutputLocator(self.working_dir, self.config)
        return read_build_output(locator.locate())

    def check_image_metrics(self, resource_name: Optional[str] = None) -> list[MetricCheckResult]:
        """
        Check all expectations without failing on out-of-range values.

        Configuration, discovery and report errors still raise.

        Args:
            resource_name: Properties resource (default: configured properties_file)

        Returns:
            One MetricCheckResult per expectation, in file order
        """
        resource_name = resource_name or self.config.get('properties_file')
        expectations = load_expectations(resource_name, self.resource_provider)
        report = self.load_report()

        self.logger.info(f"Checking {len(expectations)} metrics from {resource_name}")
        return [check_metric(report, expectation) for expectation in expectations]

    def verify_image_metrics(self, resource_name: Optional[str] = None) -> list[MetricCheckResult]:
        """
        Assert that every metric lies within its tolerance window.

        Args:
            resource_name: Properties resource (default: configured properties_file)

        Returns:
            The (all passing) check results

        Raises:
            MetricOutOfRangeError: On the first metric outside its window
        """
        results = self.check_image_metrics(resource_name)

        for result in results:
            if not result.passed:
                self.output_logger.error(result.message)
                raise MetricOutOfRangeError(result)
            self.output_logger.debug(
                f"{result.key}={result.actual} within [{result.window.low}, {result.window.high}]"
            )

        self.output_logger.info(f"All {len(results)} image metrics within tolerance")
        return results


def verify_image_metrics(
    resource_name: Optional[str] = None,
    working_dir: Optional[Path] = None
) -> list[MetricCheckResult]:
    """Convenience wrapper around BuildOutput().verify_image_metrics()."""
    return BuildOutput(working_dir).verify_image_metrics(resource_name)


__all__ = [
    'BuildOutput',
    'MetricCheckResult',
    'check_metric',
    'verify_image_metrics',
]
