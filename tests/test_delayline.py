import pytest

from dspkit.delayline import DelayLine


def filled(size, values):
    line = DelayLine(size)
    for v in values:
        line.write(float(v))
    return line


def test_integer_reads_return_past_writes():
    line = filled(16, range(1, 6))
    assert line.read(1) == 5.0
    assert line.read(2) == 4.0
    assert line.read(5) == 1.0


def test_set_delay_used_by_default_read():
    line = filled(16, range(1, 6))
    line.set_delay(3)
    assert line.read() == line.read(3)
    line.set_delay(2.5)
    assert line.read() == pytest.approx((line.read(2) + line.read(3)) / 2)


def test_fractional_read_interpolates():
    line = filled(16, range(1, 6))
    assert line.read(1.5) == pytest.approx((line.read(1) + line.read(2)) / 2)


@pytest.mark.parametrize("delay", [2.0, 2.25, 2.5, 3.75])
def test_hermite_exact_on_ramp(delay):
    line = filled(32, range(1, 11))
    assert line.read_hermite(delay) == pytest.approx(line.read(delay))


def test_wraps_around():
    line = filled(4, range(10))
    assert line.read(1) == 9.0
    assert line.read(3) == 7.0


def test_set_delay_clamps():
    line = filled(8, range(1, 9))
    line.set_delay(100)
    assert line.read() == line.read(7)


def test_reset_clears():
    line = filled(8, range(1, 9))
    line.reset()
    assert all(line.read(d) == 0.0 for d in range(8))


def test_allpass_zero_coefficient_is_delay():
    line = filled(16, range(1, 6))
    expected = line.read(3)
    out = line.allpass(42.0, 3, 0.0)
    assert out == expected
    assert line.read(1) == 42.0


def test_invalid_size():
    with pytest.raises(ValueError):
        DelayLine(0)