# twang/core/synth.py

"""
Sample-by-sample synthesizer driver.

A `Synth` owns a synthesis callable (`Fc -> Signal`) and a frame counter. Each
frame it hands the callable a frequency counter `Fc` for the current time, and
converts the resulting Signal into a Mono sample. Buffers are plain float64
NumPy arrays so they can be handed straight to the audio I/O layer.
"""

import logging
from typing import Callable, Iterator

import numpy as np
from numpy.typing import NDArray

from .signal import Mono, Signal

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE_RATE = 48_000

SynthesizeFn = Callable[["Fc"], Signal]


class Fc:
    """
    Frequency counter for one frame: the elapsed time in seconds since the
    synthesizer started.
    """

    __slots__ = ("seconds",)

    def __init__(self, seconds: float):
        self.seconds = float(seconds)

    def freq(self, hz: float) -> Signal:
        """
        Sawtooth phase of an oscillator at `hz`, in [-1, 1).

        This is the input expected by `Signal.sine`, `Signal.triangle` and
        `Signal.pulse`.
        """
        return Signal(((self.seconds * hz) % 1.0) * 2.0 - 1.0)

    def __repr__(self) -> str:
        return f"Fc({self.seconds!r})"


class Synth:
    """
    Streams a synthesis graph into Mono samples.

    Args:
        synthesize: Callable receiving an `Fc` and returning the Signal for
                    that frame. Typically a lambda chaining Signal operations,
                    e.g. ``lambda fc: fc.freq(440.0).sine()``.
        sample_rate: Frames per second (Hz). Must be positive.

    Raises:
        ValueError: If `sample_rate` is not a positive whole number.
    """

    def __init__(self, synthesize: SynthesizeFn, sample_rate: int = DEFAULT_SAMPLE_RATE):
        rate = int(sample_rate)
        if rate <= 0 or rate != sample_rate:
            raise ValueError(f"Sample rate must be a positive whole number, got {sample_rate}")
        self.synthesize = synthesize
        self.sample_rate = rate
        self.frame = 0

    def reset(self):
        """Rewind the frame counter to the start."""
        self.frame = 0

    def next_sample(self) -> Mono:
        """Synthesize the next frame and advance the counter."""
        fc = Fc(self.frame / self.sample_rate)
        self.frame += 1
        return self.synthesize(fc).to_mono()

    def samples(self) -> Iterator[Mono]:
        """Endless generator of Mono samples, continuing from the current frame."""
        while True:
            yield self.next_sample()

    def render(self, num_frames: int) -> NDArray[np.float64]:
        """
        Renders `num_frames` consecutive frames.

        Consecutive calls continue where the previous one stopped, so a long
        signal can be rendered in blocks.

        Args:
            num_frames: Number of frames to render (>= 0).

        Returns:
            1D float64 array of samples in [-1, 1].

        Raises:
            ValueError: If `num_frames` is negative.
        """
        if num_frames < 0:
            raise ValueError(f"Number of frames must be non-negative, got {num_frames}")

        logger.debug(f"Rendering {num_frames} frames from frame {self.frame} at {self.sample_rate} Hz.")
        buffer = np.empty(int(num_frames), dtype=np.float64)
        for i in range(buffer.size):
            buffer[i] = self.next_sample().value
        return buffer

    def render_seconds(self, duration: float) -> NDArray[np.float64]:
        """Renders `duration` seconds of audio (rounded down to whole frames)."""
        if duration < 0:
            raise ValueError(f"Duration must be non-negative, got {duration}")
        return self.render(int(duration * self.sample_rate))
