# twang/__init__.py

"""
twang: a small sample-by-sample waveform algebra for audio synthesis.
"""

from .version import __version__
from .core.signal import Mono, Signal, to_signal
from .core.synth import Fc, Synth

__all__ = [
    "__version__",
    "Mono",
    "Signal",
    "to_signal",
    "Fc",
    "Synth",
]
