# tests/test_synth.py

"""
Tests for the synthesizer driver (twang.core.synth) and the named patches
(twang.core.patches).
"""

from itertools import islice

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal

from twang.core.patches import PATCHES, get_patch, list_patches
from twang.core.signal import Mono, Signal
from twang.core.synth import DEFAULT_SAMPLE_RATE, Fc, Synth

# --- Fc ---

def test_fc_freq_is_sawtooth_phase():
    assert Fc(0.0).freq(440.0) == Signal(-1.0)
    assert Fc(0.5).freq(1.0) == Signal(0.0)
    assert Fc(0.75).freq(1.0) == Signal(0.5)
    assert Fc(1.25).freq(1.0) == Signal(-0.5)  # wraps every period

def test_fc_freq_range():
    phases = [Fc(t / 1000.0).freq(3.3).value for t in range(5000)]
    assert min(phases) >= -1.0
    assert max(phases) < 1.0

# --- Synth ---

def test_synth_rejects_invalid_sample_rate():
    with pytest.raises(ValueError):
        Synth(lambda fc: fc.freq(1.0), sample_rate=0)
    with pytest.raises(ValueError):
        Synth(lambda fc: fc.freq(1.0), sample_rate=-48000)
    with pytest.raises(ValueError):
        Synth(lambda fc: fc.freq(1.0), sample_rate=0.5)
    with pytest.raises(ValueError):
        Synth(lambda fc: fc.freq(1.0), sample_rate=22050.5)

def test_synth_accepts_whole_float_sample_rate():
    synth = Synth(lambda fc: fc.freq(1.0), sample_rate=8000.0)
    assert synth.sample_rate == 8000
    assert isinstance(synth.sample_rate, int)

def test_synth_default_sample_rate():
    assert Synth(lambda fc: Signal(0.0)).sample_rate == DEFAULT_SAMPLE_RATE

def test_render_sawtooth_exact():
    synth = Synth(lambda fc: fc.freq(1.0), sample_rate=8)
    out = synth.render(10)
    expected = np.array([-1.0, -0.75, -0.5, -0.25, 0.0, 0.25, 0.5, 0.75, -1.0, -0.75])
    assert out.dtype == np.float64
    assert_array_equal(out, expected)

def test_render_passes_frame_time():
    seen = []

    def synthesize(fc):
        seen.append(fc.seconds)
        return Signal(0.0)

    Synth(synthesize, sample_rate=4).render(5)
    assert seen == [0.0, 0.25, 0.5, 0.75, 1.0]

def test_render_is_continuous_across_calls():
    graph = lambda fc: fc.freq(110.0).sine().gain(fc.freq(3.0).triangle())
    blocks = Synth(graph, sample_rate=8000)
    joined = np.concatenate([blocks.render(100), blocks.render(37), blocks.render(63)])
    whole = Synth(graph, sample_rate=8000).render(200)
    assert_array_equal(joined, whole)

def test_reset_rewinds():
    synth = Synth(lambda fc: fc.freq(5.0).sine(), sample_rate=100)
    first = synth.render(20)
    synth.reset()
    assert synth.frame == 0
    assert_array_equal(synth.render(20), first)

def test_render_clamps_to_mono_range():
    out = Synth(lambda fc: Signal(3.0), sample_rate=10).render(4)
    assert_array_equal(out, np.ones(4))
    out = Synth(lambda fc: fc.freq(2.0).gain(-5.0), sample_rate=10).render(10)
    assert np.all(np.abs(out) <= 1.0)

def test_render_zero_and_negative_frames():
    synth = Synth(lambda fc: fc.freq(1.0), sample_rate=10)
    assert synth.render(0).size == 0
    with pytest.raises(ValueError):
        synth.render(-1)

def test_render_seconds():
    synth = Synth(lambda fc: fc.freq(1.0), sample_rate=100)
    assert synth.render_seconds(0.5).size == 50
    assert synth.frame == 50
    with pytest.raises(ValueError):
        synth.render_seconds(-1.0)

def test_samples_generator_yields_mono():
    synth = Synth(lambda fc: fc.freq(1.0), sample_rate=4)
    samples = list(islice(synth.samples(), 6))
    assert all(isinstance(s, Mono) for s in samples)
    assert [s.value for s in samples] == [-1.0, -0.5, 0.0, 0.5, -1.0, -0.5]
    assert synth.frame == 6

# --- Patches ---

def test_list_patches():
    patches = list_patches()
    names = [name for name, _ in patches]
    assert names == sorted(names)
    assert {"sine", "square", "voice", "triangle"} <= set(names)
    assert all(description for _, description in patches)

def test_get_patch_unknown():
    with pytest.raises(KeyError, match="Unknown patch"):
        get_patch("kazoo", 440.0)

@pytest.mark.parametrize("name", sorted(PATCHES))
def test_every_patch_renders_audible_in_range(name):
    out = Synth(get_patch(name, 220.0), sample_rate=8000).render(8000)
    assert np.all(np.isfinite(out))
    assert np.all(np.abs(out) <= 1.0)
    assert np.max(np.abs(out)) > 0.1

def test_voice_patch_matches_graph():
    freq = 440.0
    out = Synth(get_patch("voice", freq), sample_rate=48000).render(256)
    expected = [
        Fc(i / 48000).freq(freq).abs().gain(Fc(i / 48000).freq(freq).sine()).value
        for i in range(256)
    ]
    assert_allclose(out, expected, atol=1e-12)

@pytest.mark.parametrize("name, expected_high", [("square", 0.5), ("pulse", 0.25)])
def test_pulse_patch_duty_cycle(name, expected_high):
    out = Synth(get_patch(name, 100.0), sample_rate=8000).render(8000)
    assert set(np.unique(out)) == {-1.0, 1.0}
    assert np.mean(out > 0) == pytest.approx(expected_high, abs=0.03)

def test_gated_patch_contains_silence():
    out = Synth(get_patch("gated", 220.0), sample_rate=8000).render(8000)
    silent = np.mean(out == 0.0)
    assert 0.05 < silent < 0.95
