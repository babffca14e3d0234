import pytest

from arkanoid.frame_rate import FixedFrameRate


class FakeClock:
    def __init__(self, times):
        self._times = iter(times)

    def __call__(self):
        return next(self._times)


def test_locked_rate_sleeps_the_remaining_time():
    slept = []
    rate = FixedFrameRate(60, clock=FakeClock([0, 10_000_000, 16_666_666]), sleep=slept.append)
    rate.wait()
    assert len(slept) == 1
    assert 0 < slept[0] < 1 / 60
    assert rate.delta_time == pytest.approx(1 / 60, rel=1e-6)


def test_slow_frame_does_not_sleep_and_reports_fixed_time():
    slept = []
    rate = FixedFrameRate(60, clock=FakeClock([0, 20_000_000, 20_000_000]), sleep=slept.append)
    rate.wait()
    assert slept == []
    assert rate.delta_time == pytest.approx(1 / 60, rel=1e-6)


def test_unlocked_rate_measures_real_time():
    slept = []
    rate = FixedFrameRate(0, clock=FakeClock([0, 5_000_000, 5_000_000]), sleep=slept.append)
    rate.wait()
    assert slept == []
    assert rate.delta_time == pytest.approx(0.005)
    assert rate.current_frame_rate == 200
    assert rate.is_locked is False


def test_frame_rate_before_any_frame_is_zero():
    rate = FixedFrameRate(60, clock=FakeClock([0]), sleep=lambda s: None)
    assert rate.current_frame_rate == 0
    assert rate.delta_time == 0.0


def test_changing_fixed_rate():
    rate = FixedFrameRate(clock=FakeClock([0]), sleep=lambda s: None)
    assert rate.is_locked is False
    rate.fixed_rate = 30
    assert rate.fixed_rate == 30
    assert rate.is_locked is True


def test_locked_frame_rate_reported_matches_target():
    rate = FixedFrameRate(60, clock=FakeClock([0, 1_000_000, 16_666_666]), sleep=lambda s: None)
    rate.wait()
    assert rate.current_frame_rate == 60