# twang/config/__init__.py

"""
Configuration management for twang.

This package handles loading configuration from files (TOML),
environment variables, and internal defaults, providing a unified
configuration object.
"""

from .models import TwangConfig
from .loaders import load_configuration

__all__ = [
    "TwangConfig",
    "load_configuration",
]
