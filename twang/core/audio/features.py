# twang/core/audio/features.py

"""
Summary statistics for rendered audio buffers: level, DC offset, clipping and
a zero-crossing based pitch estimate.
"""

import logging
from typing import Any, Dict

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

_EPSILON = np.finfo(np.float64).eps


def peak_amplitude(y: NDArray[np.float64]) -> float:
    """Maximum absolute sample value. 0.0 for an empty buffer."""
    if y.size == 0:
        return 0.0
    return float(np.max(np.abs(y)))


def rms_level(y: NDArray[np.float64]) -> float:
    """Root mean square level. 0.0 for an empty buffer."""
    if y.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(y))))


def dc_offset(y: NDArray[np.float64]) -> float:
    if y.size == 0:
        return 0.0
    return float(np.mean(y))


def crest_factor(y: NDArray[np.float64]) -> float:
    """
    Peak to RMS ratio (linear). A full scale sine gives ~1.414, a square
    wave 1.0. Returns 0.0 for silence.
    """
    rms = rms_level(y)
    if rms < _EPSILON:
        return 0.0
    return peak_amplitude(y) / rms


def zero_crossing_rate(y: NDArray[np.float64]) -> float:
    """
    Fraction of adjacent sample pairs whose sign differs.

    Exact zeros count as positive, so a signal resting at 0.0 does not
    produce spurious crossings.
    """
    if y.size < 2:
        return 0.0
    signs = np.signbit(y) & (y != 0.0)
    return float(np.count_nonzero(signs[1:] != signs[:-1]) / (y.size - 1))


def estimate_frequency(y: NDArray[np.float64], sr: int) -> float:
    """
    Rough fundamental frequency estimate in Hz from the zero-crossing rate
    (two crossings per period). Only meaningful for simple periodic waveforms.
    """
    return zero_crossing_rate(y) * sr / 2.0


def clipped_ratio(y: NDArray[np.float64], threshold: float = 1.0) -> float:
    """Fraction of samples whose magnitude reaches `threshold`."""
    if y.size == 0:
        return 0.0
    return float(np.count_nonzero(np.abs(y) >= threshold) / y.size)


def summarize(y: NDArray[np.float64], sr: int) -> Dict[str, Any]:
    """
    Computes all summary features of a mono buffer.

    Args:
        y: Audio samples (1D float64).
        sr: Sampling rate in Hz.

    Returns:
        Dictionary of plain Python scalars, in display order.

    Raises:
        ValueError: If `y` is not 1D or `sr` is not positive.
    """
    if y.ndim != 1:
        raise ValueError("Input audio data must be a 1D array.")
    if sr <= 0:
        raise ValueError(f"Sample rate must be positive, got {sr}")

    logger.debug(f"Summarizing {y.size} samples at {sr} Hz.")
    return {
        "samples": int(y.size),
        "sample_rate": int(sr),
        "duration_sec": y.size / sr,
        "peak": peak_amplitude(y),
        "rms": rms_level(y),
        "dc_offset": dc_offset(y),
        "crest_factor": crest_factor(y),
        "zero_crossing_rate": zero_crossing_rate(y),
        "estimated_frequency_hz": estimate_frequency(y, sr),
        "clipped_ratio": clipped_ratio(y),
    }
