# Path: image_metrics/core/config_loader.py
"""
Configuration Loader for Image Metrics Module

Loads configuration from an optional .env file in the working directory
and from IMAGE_METRICS_* environment variables.
Singleton pattern ensures consistent configuration across all components.

Every value has a default reproducing the native-image build layout,
so no configuration is needed in the common case.
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

from ..constants import (
    DEFAULT_BUILD_DIR,
    NATIVE_IMAGE_DIR_SUFFIX,
    BUILD_OUTPUT_STATS_SUFFIX,
    DEFAULT_PROPERTIES_FILE,
    DEFAULT_RESOURCE_DIRS,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

DEFAULT_LOG_LEVEL: str = 'INFO'

ENV_PREFIX: str = 'IMAGE_METRICS_'


class ConfigLoader:
    """
    Singleton configuration loader for the image metrics module.

    Loads configuration from environment variables with type conversion
    and defaults.

    Example:
        config = ConfigLoader()
        build_dir = config.get('build_dir')  # Returns Path object
        properties = config.get('properties_file')  # Returns str
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        working directory (where the build directory also lives).
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # BUILD OUTPUT DISCOVERY
            # ================================================================
            'build_dir': self._get_path('BUILD_DIR') or Path(DEFAULT_BUILD_DIR),
            'build_dir_suffix': self._get_env('BUILD_DIR_SUFFIX', NATIVE_IMAGE_DIR_SUFFIX),
            'report_suffix': self._get_env('REPORT_SUFFIX', BUILD_OUTPUT_STATS_SUFFIX),

            # ================================================================
            # EXPECTATIONS
            # ================================================================
            'properties_file': self._get_env('PROPERTIES_FILE', DEFAULT_PROPERTIES_FILE),
            'resource_dirs': self._get_path_list('RESOURCE_DIRS', DEFAULT_RESOURCE_DIRS),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'debug': self._get_bool('DEBUG', False),
        }

        return config

    def _get_env(
        self,
        key: str,
        default: Optional[str] = None,
        required: bool = False
    ) -> Optional[str]:
        """Get string environment variable."""
        value = os.getenv(ENV_PREFIX + key)

        if value is None or not value.strip():
            if required:
                raise ValueError(f"Required environment variable '{ENV_PREFIX}{key}' is not set")
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """Get path environment variable."""
        value = self._get_env(key, required=required)
        if value is None:
            return None

        return Path(value)

    def _get_path_list(self, key: str, default: list[str]) -> list[Path]:
        """Get os.pathsep separated list of paths."""
        value = self._get_env(key)
        if value is None:
            return [Path(p) for p in default]

        return [Path(p.strip()) for p in value.split(os.pathsep) if p.strip()]

    def get(self, key: str, default: any = None) -> any:
        """Get configuration value."""
        return self._config.get(key, default)

    def __getitem__(self, key: str) -> any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __contains__(self, key: str) -> bool:
        """Check if configuration key exists."""
        return key in self._config

    @classmethod
    def reset(cls):
        """Reset singleton for testing purposes."""
        cls._instance = None
        cls._initialized = False


__all__ = ['ConfigLoader']
