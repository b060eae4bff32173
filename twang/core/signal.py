# twang/core/signal.py

"""
The Signal value type: a single unbounded audio sample with a closed set of
composable waveform-shaping operations.

Every operation is pure. It returns a new Signal and never mutates its operand,
so graphs are built by plain method chaining:

    >>> phase = Signal(0.25)
    >>> phase.sine().gain(0.5).clamp()
    Signal(value=0.3535533905932738)

Values are deliberately NOT restricted to [-1, 1]; only `Signal.to_mono()`
converts into the constrained single-channel domain. Floating point domain
problems (negative base with a fractional exponent, overflow) are not
intercepted: NaN and infinity propagate as IEEE-754 values.
"""

import math
import numbers
from dataclasses import dataclass
from functools import singledispatch
from typing import Union

import numpy as np

# Operands accepted wherever a "convertible to Signal" parameter is expected.
SignalLike = Union["Signal", float, int]


# --- Conversion contract ---

@singledispatch
def to_signal(value) -> "Signal":
    """
    Converts an operand into a Signal.

    Registered for real numbers and for Signal itself. Other types can take
    part in signal graphs by registering an implementation:

        @to_signal.register
        def _(value: MyControl) -> Signal:
            return Signal(value.current)

    Raises:
        TypeError: If no conversion is registered for the operand's type.
    """
    raise TypeError(
        f"Cannot convert {type(value).__name__!s} to Signal; "
        "expected a real number or a Signal."
    )


@to_signal.register(numbers.Real)
def _real_to_signal(value) -> "Signal":
    return Signal(value)


def _value_of(operand: SignalLike) -> float:
    return to_signal(operand).value


def _signum(x: float) -> float:
    # Sign of zero follows its sign bit: +0.0 -> 1.0, -0.0 -> -1.0.
    if math.isnan(x):
        return x
    return math.copysign(1.0, x)


# --- Channel sample ---

@dataclass(frozen=True)
class Mono:
    """
    A single-channel audio sample constrained to [-1, 1].

    Only produced by `Signal.to_mono()`. There is intentionally no conversion
    from Mono back into Signal.
    """
    value: float

    def __post_init__(self):
        value = float(self.value)
        if not -1.0 <= value <= 1.0:
            raise ValueError(f"Mono sample must be within [-1, 1], got {value}")
        object.__setattr__(self, "value", value)

    def __float__(self) -> float:
        return self.value


# --- Signal ---

@dataclass(frozen=True)
class Signal:
    """
    A signed digital audio signal that can be routed through processing
    components. Differs from `Mono` in that the value is not clamped to [-1, 1].
    """
    value: float = 0.0

    def __post_init__(self):
        if not isinstance(self.value, numbers.Real):
            raise TypeError(
                f"Signal value must be a real number, got {type(self.value).__name__!s}"
            )
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    # Oscillators. These take a sawtooth phase in [-1, 1] (see `Fc.freq`).

    def sine(self) -> "Signal":
        """Sine wave generator component - takes a sawtooth phase."""
        with np.errstate(all="ignore"):
            return Signal(np.cos(self.value * np.pi))

    def triangle(self) -> "Signal":
        """Triangle wave generator component - takes a sawtooth phase."""
        return Signal(abs(self.value) * 2.0 - 1.0)

    def pulse(self, half_duty: SignalLike) -> "Signal":
        """
        Pulse wave generator component - takes a sawtooth phase.

        Args:
            half_duty: Half of the duty cycle, range 0~1 (1.0 for a square wave).

        Returns:
            +1.0 or -1.0 (NaN if the phase is NaN). A difference of exactly
            +0.0 yields +1.0 and -0.0 yields -1.0.
        """
        phase_shifted = self.shift(half_duty)
        return Signal(_signum(self.value - phase_shifted.value))

    def shift(self, amount: SignalLike) -> "Signal":
        """
        Adds `amount` to the signal and wraps the result into (-1, 1] with a
        period of 2.

        The truncating remainder is exact, so `shift(x, 0) == x` for every x
        in (-1, 1].
        """
        x = math.fmod(self.value + _value_of(amount), 2.0)
        if x < -1.0:
            x += 2.0
        elif x > 1.0:
            x -= 2.0
        # -1 and 1 are the same phase; keep the upper end.
        if x == -1.0:
            x = 1.0
        return Signal(x)

    # Amplitude.

    def gain(self, volume: SignalLike) -> "Signal":
        """Increase (amplify) or decrease the gain of the signal. No clamping."""
        return Signal(self.value * _value_of(volume))

    def invert(self) -> "Signal":
        """Invert (negate) the signal."""
        return Signal(-self.value)

    def abs(self) -> "Signal":
        return Signal(abs(self.value))

    def min(self, limit: SignalLike) -> "Signal":
        """The minimum of two signals (a NaN operand is ignored)."""
        return Signal(np.fmin(self.value, _value_of(limit)))

    def max(self, limit: SignalLike) -> "Signal":
        """The maximum of two signals (a NaN operand is ignored)."""
        return Signal(np.fmax(self.value, _value_of(limit)))

    def gate(self, limit: SignalLike) -> "Signal":
        """
        Noise gate, side-chained on `limit`.

        Passes the signal through untouched when its magnitude is strictly
        greater than `limit`, otherwise outputs zero.
        """
        passing = float(abs(self.value) > _value_of(limit))
        return Signal(self.value * passing)

    def pow(self, exponent: SignalLike) -> "Signal":
        """
        Raise the signal to a power. Use `1 / n` for the n-th root.

        Negative values with fractional exponents yield NaN.
        """
        with np.errstate(all="ignore"):
            return Signal(np.power(self.value, _value_of(exponent)))

    # Clipping.

    def clip_soft(self, volume: SignalLike) -> "Signal":
        """
        Amplify the signal with soft clipping.

        A logistic curve scaled so that +/-1 maps onto +/-1 exactly: the full
        scale level is preserved while everything in between is compressed
        (or expanded) according to `volume`.
        """
        volume = _value_of(volume)
        with np.errstate(all="ignore"):
            curve = 2.0 / (1.0 + np.exp(self.value * -volume)) - 1.0
            unity = 2.0 / (1.0 + np.exp(-volume)) - 1.0
            return Signal(np.float64(curve) / np.float64(unity))

    def clamp(self) -> "Signal":
        """Clamp the signal to [-1, 1] (hard clipping)."""
        return self.min(1.0).max(-1.0)

    def to_mono(self) -> Mono:
        """Convert the signal into a Mono channel sample (clamped)."""
        return Mono(self.clamp().value)


@to_signal.register(Signal)
def _signal_to_signal(value: Signal) -> Signal:
    return value
