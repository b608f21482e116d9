# Path: image_metrics/core/__init__.py
"""
Image Metrics Core

Configuration and logging shared by loaders and engine.
"""

from .config_loader import ConfigLoader

__all__ = ['ConfigLoader']
