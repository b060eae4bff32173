# twang/core/audio/io.py

"""
Loading and saving of rendered audio using soundfile (writing) and librosa
(reading, with optional resampling). This layer sits outside the Signal core:
it only ever sees plain float64 sample buffers.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

import librosa
import numpy as np
import soundfile as sf
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

SUPPORTED_WRITE_EXTENSIONS = {f".{fmt.lower()}" for fmt in sf.available_formats()}
# Read support is wider than write support (librosa falls back to audioread).
SUPPORTED_READ_EXTENSIONS = SUPPORTED_WRITE_EXTENSIONS | {".mp3"}


def load_audio(
    file_path: Path,
    sr: Optional[int] = None,
    mono: bool = True,
) -> Tuple[NDArray[np.float64], int]:
    """
    Loads an audio file using librosa.

    Args:
        file_path: Path to the audio file.
        sr: Target sampling rate. If None, the native rate is kept.
        mono: If True, multi-channel files are mixed down to one channel.

    Returns:
        A tuple (data, sample_rate). `data` is float64, shape (n_samples,) when
        mono, or (n_channels, n_samples) otherwise.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the path is not a file or the extension is not readable.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Audio input file not found: {file_path}")
    if not file_path.is_file():
        raise ValueError(f"Input path is not a file: {file_path}")
    if file_path.suffix.lower() not in SUPPORTED_READ_EXTENSIONS:
        raise ValueError(f"Unsupported audio input extension: '{file_path.suffix}'.")

    logger.info(f"Loading audio from: {file_path} (sr={sr}, mono={mono})")
    try:
        data, sample_rate = librosa.load(file_path, sr=sr, mono=mono)
    except Exception as e:
        logger.error(f"Error loading audio file {file_path}: {e}")
        raise

    # librosa returns float32
    data = data.astype(np.float64, copy=False)
    logger.debug(f"Audio loaded. Shape: {data.shape}, SR: {sample_rate}")
    return data, int(sample_rate)


def save_audio(
    data: NDArray[np.float64],
    sr: int,
    output_path: Path,
    subtype: Optional[str] = "PCM_16",
):
    """
    Saves a sample buffer to an audio file using soundfile.

    The container format is taken from the file extension. Samples outside
    [-1, 1] are clipped with a warning for PCM subtypes, since integer
    encodings would otherwise wrap around.

    Args:
        data: float64 samples, shape (n_samples,) or (n_samples, n_channels).
        sr: Sampling rate in Hz.
        output_path: Destination file. Parent directories are created.
        subtype: soundfile subtype such as 'PCM_16', 'PCM_24', 'FLOAT' or
                 'DOUBLE'. None lets soundfile pick the format default.

    Raises:
        ValueError: If the extension is unsupported, the sample rate is not
                    positive or the data has more than two dimensions.
    """
    output_path = Path(output_path)
    ext = output_path.suffix.lower()
    if ext not in SUPPORTED_WRITE_EXTENSIONS:
        raise ValueError(f"Unsupported audio output extension: '{ext}'. "
                         f"Supported extensions: {sorted(SUPPORTED_WRITE_EXTENSIONS)}")
    if sr <= 0:
        raise ValueError(f"Sample rate must be positive, got {sr}")
    if data.ndim not in (1, 2):
        raise ValueError(f"Input data must be 1D (mono) or 2D (multi-channel), got shape {data.shape}")

    logger.info(f"Saving audio to: {output_path} (sr={sr}, subtype={subtype})")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if subtype and "PCM" in subtype and data.size:
        max_abs_val = np.max(np.abs(data))
        if max_abs_val > 1.0:
            logger.warning(f"Audio data exceeds range [-1, 1] (max abs: {max_abs_val:.4f}) "
                           f"for PCM subtype '{subtype}'. Clipping data.")
            data = np.clip(data, -1.0, 1.0)

    try:
        sf.write(output_path, data, sr, subtype=subtype, format=ext[1:].upper())
    except Exception as e:
        logger.error(f"Error saving audio file {output_path}: {e}")
        raise
    logger.info(f"Audio successfully saved to {output_path}")
