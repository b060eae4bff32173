# twang/core/__init__.py

"""
Core package for twang.

Contains:
- The Signal value type and its waveform-shaping operations
- The sample-by-sample synthesizer driver
- Named synthesis patches
- Audio buffer I/O and summary features
"""

from . import signal
from . import synth
from . import patches
from . import audio

from .signal import Mono, Signal, to_signal
from .synth import Fc, Synth

__all__ = [
    "signal",
    "synth",
    "patches",
    "audio",
    "Mono",
    "Signal",
    "to_signal",
    "Fc",
    "Synth",
]
