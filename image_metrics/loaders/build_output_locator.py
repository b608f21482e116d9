# Path: image_metrics/loaders/build_output_locator.py
"""
Build Output Locator - Finds the Native-Image Statistics Report

Doorkeeper for the build statistics report. Returns a path only,
does NOT read content (that is build_output_reader.py's job).

Discovery is two-level:
1. <working_dir>/<build_dir>/*<build_dir_suffix>  (exactly one directory)
2. <that directory>/*<report_suffix>              (exactly one file)

Suffixes are matched case-insensitively. Ambiguity is never resolved:
zero or several matches at either level fail the check.
"""

from pathlib import Path
from typing import Callable, Optional

from ..core.config_loader import ConfigLoader
from ..core.logger import get_input_logger
from ..exceptions import BuildOutputNotFoundError

LEVEL_BUILD_DIRECTORY = 'native image build directory'
LEVEL_BUILD_OUTPUT = 'native image build output'


class BuildOutputLocator:
    """
    Locates the single build-output statistics file of a native-image build.

    Example:
        locator = BuildOutputLocator()
        report_path = locator.locate()
    """

    def __init__(self, working_dir: Optional[Path] = None, config: Optional[ConfigLoader] = None):
        """
        Initialize locator.

        Args:
            working_dir: Directory containing the build directory (default: cwd)
            config: Optional ConfigLoader instance
        """
        self.logger = get_input_logger('build_output_locator')
        self.config = config if config else ConfigLoader()
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()

        self.build_dir = self.working_dir / self.config.get('build_dir')
        self.build_dir_suffix = self.config.get('build_dir_suffix').lower()
        self.report_suffix = self.config.get('report_suffix').lower()

    def locate(self) -> Path:
        """
        Find the build output statistics file.

        Returns:
            Path to the report file

        Raises:
            BuildOutputNotFoundError: If either level has zero or several matches
        """
        image_dir = self.locate_build_directory()
        report = self._single_match(
            image_dir, self.report_suffix, Path.is_file, LEVEL_BUILD_OUTPUT
        )
        self.logger.info(f"Build output report: {report}")
        return report

    def locate_build_directory(self) -> Path:
        """
        Find the native-image build directory inside the build directory.

        Raises:
            BuildOutputNotFoundError: If zero or several directories match
        """
        image_dir = self._single_match(
            self.build_dir, self.build_dir_suffix, Path.is_dir, LEVEL_BUILD_DIRECTORY
        )
        self.logger.debug(f"Native image build directory: {image_dir}")
        return image_dir

    def _single_match(
        self,
        directory: Path,
        suffix: str,
        kind: Callable[[Path], bool],
        level: str
    ) -> Path:
        """Return the only entry of directory whose name ends with suffix."""
        if not directory.is_dir():
            self.logger.warning(f"Directory not found: {directory}")
            raise BuildOutputNotFoundError(level, directory)

        matches = sorted(
            entry for entry in directory.iterdir()
            if entry.name.lower().endswith(suffix) and kind(entry)
        )

        if len(matches) != 1:
            self.logger.warning(
                f"Expected 1 match for *{suffix} in {directory}, found {len(matches)}"
            )
            raise BuildOutputNotFoundError(level, directory, matches)

        return matches[0]


def locate_build_output(working_dir: Optional[Path] = None, config: Optional[ConfigLoader] = None) -> Path:
    """Convenience wrapper around BuildOutputLocator.locate()."""
    return BuildOutputLocator(working_dir, config).locate()


__all__ = [
    'BuildOutputLocator',
    'locate_build_output',
    'LEVEL_BUILD_DIRECTORY',
    'LEVEL_BUILD_OUTPUT',
]
