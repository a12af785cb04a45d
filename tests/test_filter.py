import pytest

from pocketgb.filter import HighPassFilter


def test_default_filter_passes_through():
    f = HighPassFilter()
    inputs = [0.5, -0.25, 1.0, 0.0, 0.75]
    assert [f.process(x) for x in inputs] == inputs


def test_zero_input_gives_zero_output():
    f = HighPassFilter()
    f.set_cutoff(30.0, 44100.0)
    assert all(f.process(0.0) == 0.0 for _ in range(100))


def test_dc_is_removed():
    f = HighPassFilter()
    f.set_cutoff(30.0, 44100.0)
    out = 1.0
    for _ in range(20000):
        out = f.process(1.0)
    assert abs(out) < 1e-3


def test_step_response_starts_near_input():
    f = HighPassFilter()
    f.set_cutoff(30.0, 44100.0)
    first = f.process(1.0)
    assert 0.9 < first <= 1.0


def test_nyquist_passes_with_unit_gain():
    f = HighPassFilter()
    f.set_cutoff(30.0, 44100.0)
    out = 0.0
    for i in range(20000):
        out = f.process(1.0 if i % 2 == 0 else -1.0)
    assert abs(out) == pytest.approx(1.0, rel=1e-3)


def test_zero_sample_rate_raises():
    f = HighPassFilter()
    with pytest.raises(ZeroDivisionError):
        f.set_cutoff(30.0, 0.0)