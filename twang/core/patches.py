# twang/core/patches.py

"""
Named synthesis graphs ("patches").

Each patch is a factory taking the fundamental frequency in Hz and returning
the synthesis callable expected by `Synth`. Patches are built exclusively from
Signal operations.
"""

from typing import Callable, Dict, List, NamedTuple, Tuple

from .synth import Fc, SynthesizeFn

PatchFactory = Callable[[float], SynthesizeFn]


class Patch(NamedTuple):
    factory: PatchFactory
    description: str


def _sine(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq).sine()


def _triangle(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq).triangle()


def _sawtooth(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq)


def _square(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq).pulse(1.0)


def _pulse(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq).pulse(0.5)


def _voice(freq: float) -> SynthesizeFn:
    # Rectified sawtooth amplitude-modulated by a sine at the same pitch.
    return lambda fc: fc.freq(freq).abs().gain(fc.freq(freq).sine())


def _overdrive(freq: float) -> SynthesizeFn:
    return lambda fc: fc.freq(freq).sine().clip_soft(4.0).gain(0.8)


def _tremolo(freq: float) -> SynthesizeFn:
    def synthesize(fc: Fc):
        # 5 Hz LFO mapped from [-1, 1] onto [0.2, 1.0]
        depth = fc.freq(5.0).sine().gain(0.4).shift(0.6)
        return fc.freq(freq).sine().gain(depth)
    return synthesize


def _gated(freq: float) -> SynthesizeFn:
    def synthesize(fc: Fc):
        envelope = fc.freq(2.0).triangle().abs()
        return fc.freq(freq).triangle().gain(envelope).gate(0.25)
    return synthesize


PATCHES: Dict[str, Patch] = {
    "sine": Patch(_sine, "Pure sine wave."),
    "triangle": Patch(_triangle, "Triangle wave."),
    "sawtooth": Patch(_sawtooth, "Raw sawtooth phase."),
    "square": Patch(_square, "Square wave (50% duty pulse)."),
    "pulse": Patch(_pulse, "Narrow pulse wave (25% duty)."),
    "voice": Patch(_voice, "Rectified sawtooth modulated by a sine."),
    "overdrive": Patch(_overdrive, "Soft clipped sine."),
    "tremolo": Patch(_tremolo, "Sine with a 5 Hz amplitude LFO."),
    "gated": Patch(_gated, "Triangle through a noise gate driven by a 2 Hz envelope."),
}


def get_patch(name: str, frequency: float) -> SynthesizeFn:
    """
    Builds the synthesis callable of a named patch.

    Raises:
        KeyError: If no patch with that name exists.
    """
    try:
        patch = PATCHES[name]
    except KeyError:
        raise KeyError(f"Unknown patch '{name}'. Available patches: {sorted(PATCHES)}") from None
    return patch.factory(frequency)


def list_patches() -> List[Tuple[str, str]]:
    """Returns (name, description) pairs sorted by name."""
    return [(name, PATCHES[name].description) for name in sorted(PATCHES)]
