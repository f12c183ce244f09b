import random

from dspkit.dust import Dust


def test_zero_density_is_silent():
    dust = Dust()
    dust.set_density(0.0)
    assert all(dust.process() == 0.0 for _ in range(2000))


def test_negative_density_clamps_to_silence():
    dust = Dust()
    dust.set_density(-3.0)
    assert all(dust.process() == 0.0 for _ in range(2000))


def test_output_range():
    random.seed(7)
    dust = Dust()
    dust.set_density(1.0)
    samples = [dust.process() for _ in range(5000)]
    assert all(0.0 <= s < 1.0 for s in samples)
    assert any(s > 0.0 for s in samples)


def test_full_density_fires_about_three_tenths_of_the_time():
    random.seed(11)
    dust = Dust()
    dust.set_density(1.0)
    hits = sum(1 for _ in range(20000) if dust.process() > 0.0)
    assert 0.25 < hits / 20000 < 0.35


def test_higher_density_gives_more_impulses():
    random.seed(3)
    sparse = Dust()
    sparse.set_density(0.1)
    low = sum(1 for _ in range(10000) if sparse.process() > 0.0)
    random.seed(3)
    dense = Dust()
    dense.set_density(0.9)
    high = sum(1 for _ in range(10000) if dense.process() > 0.0)
    assert high > low