import pytest

from dspkit.dcblock import DcBlock


def test_first_sample_passes_through():
    block = DcBlock(48000)
    assert block.process(0.7) == 0.7


def test_constant_input_decays_to_zero():
    block = DcBlock(48000)
    out = [block.process(1.0) for _ in range(3000)]
    assert abs(out[-1]) < 1e-6
    assert all(a >= b for a, b in zip(out, out[1:]))


def test_alternating_signal_passes():
    block = DcBlock(48000)
    out = [block.process(1.0 if i % 2 else -1.0) for i in range(2000)]
    assert abs(out[-1]) > 0.9


def test_linear_in_input():
    a, b = DcBlock(44100), DcBlock(44100)
    signal = [0.1, 0.5, -0.2, 0.3, 0.0]
    for s in signal:
        assert b.process(2 * s) == pytest.approx(2 * a.process(s))