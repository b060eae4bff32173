# twang/core/audio/__init__.py

"""
Audio buffer handling around the Signal core: file I/O and summary features.
"""

from . import io
from . import features

__all__ = [
    "io",
    "features",
]
