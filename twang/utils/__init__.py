# twang/utils/__init__.py

"""
Utility helpers shared by the CLI and library code.
"""

from .logging_config import setup_logging

__all__ = [
    "setup_logging",
]
