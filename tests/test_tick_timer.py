import pytest

from life.utils.tick_timer import TickTimer


def test_tick_timer_accumulates_partial_frames():
    timer = TickTimer(interval=0.25)

    assert timer.advance(0.1) == 0
    assert timer.advance(0.1) == 0
    assert timer.advance(0.1) == 1
    assert timer.pending == pytest.approx(0.05)


def test_tick_timer_releases_multiple_steps():
    timer = TickTimer(interval=0.25, max_steps=10)

    assert timer.advance(0.8) == 3
    assert timer.pending == pytest.approx(0.05)


def test_tick_timer_caps_steps_and_drops_backlog():
    timer = TickTimer(interval=0.1, max_steps=2)

    assert timer.advance(3.0) == 2
    assert timer.pending == 0.0


@pytest.mark.parametrize("dt", [0.0, -1.0, None, "soon", float("nan"), float("inf")])
def test_tick_timer_ignores_invalid_deltas(dt):
    timer = TickTimer(interval=0.1)

    assert timer.advance(dt) == 0
    assert timer.pending == 0.0


def test_tick_timer_reset_clears_pending_time():
    timer = TickTimer(interval=0.5)
    timer.advance(0.4)

    timer.reset()
    assert timer.advance(0.2) == 0


@pytest.mark.parametrize("interval", [0.0, -0.5, float("nan")])
def test_tick_timer_rejects_unusable_interval(interval):
    with pytest.raises(ValueError):
        TickTimer(interval=interval)


def test_tick_timer_keeps_counting_after_invalid_delta():
    timer = TickTimer(interval=0.25)

    assert timer.advance(float("nan")) == 0
    assert timer.advance(0.3) == 1
