# twang/cli/__init__.py

"""
Command-line interface for twang.
"""

from .main import cli

__all__ = [
    "cli",
]
