# Path: image_metrics/loaders/resources.py
"""
Resource Providers for Image Metrics Module

Pluggable lookup of named resources (the expectations properties file).

Providers:
- DirectoryResourceProvider: search a list of directories, first hit wins
- PackageResourceProvider: read package data via importlib.resources
- ChainResourceProvider: try several providers in order

Every provider answers open_resource(name) with bytes, or None when it
does not have the resource. Read errors propagate as OSError.
"""

from importlib import resources
from pathlib import Path
from typing import Iterable, Optional, Protocol

from ..core.config_loader import ConfigLoader
from ..core.logger import get_input_logger

logger = get_input_logger('resources')


class ResourceProvider(Protocol):
    """Anything that can fetch a named resource."""

    def open_resource(self, name: str) -> Optional[bytes]:
        ...


class DirectoryResourceProvider:
    """
    Looks resources up in a list of directories.

    Relative directories are resolved against base_dir (default: cwd)
    at lookup time.

    Example:
        provider = DirectoryResourceProvider(['src/test/resources'])
        data = provider.open_resource('image-metrics-test.properties')
    """

    def __init__(self, search_dirs: Optional[Iterable[Path]] = None, base_dir: Optional[Path] = None):
        if search_dirs is None:
            search_dirs = ConfigLoader().get('resource_dirs')
        self.search_dirs = [Path(d) for d in search_dirs]
        self.base_dir = Path(base_dir) if base_dir else None

    def find(self, name: str) -> Optional[Path]:
        """Return the first existing file called name, or None."""
        base = self.base_dir if self.base_dir else Path.cwd()
        for directory in self.search_dirs:
            candidate = base / directory / name
            if candidate.is_file():
                return candidate
        return None

    def open_resource(self, name: str) -> Optional[bytes]:
        path = self.find(name)
        if path is None:
            logger.debug(f"{name} not found in {[str(d) for d in self.search_dirs]}")
            return None

        logger.debug(f"Reading resource {path}")
        return path.read_bytes()


class PackageResourceProvider:
    """
    Reads resources shipped inside a Python package.

    Example:
        provider = PackageResourceProvider('myapp.tests.resources')
    """

    def __init__(self, package: str):
        self.package = package

    def open_resource(self, name: str) -> Optional[bytes]:
        try:
            resource = resources.files(self.package).joinpath(name)
        except ModuleNotFoundError:
            logger.debug(f"Package {self.package} not importable")
            return None

        if not resource.is_file():
            return None

        logger.debug(f"Reading resource {name} from package {self.package}")
        return resource.read_bytes()


class ChainResourceProvider:
    """Asks each provider in turn; the first one holding the resource wins."""

    def __init__(self, *providers: ResourceProvider):
        self.providers = list(providers)

    def open_resource(self, name: str) -> Optional[bytes]:
        for provider in self.providers:
            data = provider.open_resource(name)
            if data is not None:
                return data
        return None


__all__ = [
    'ResourceProvider',
    'DirectoryResourceProvider',
    'PackageResourceProvider',
    'ChainResourceProvider',
]
