"""Tests for the per-refresh schedulers."""

from animation_studio.timeline import (
    ManualScheduler,
    RealtimeScheduler,
    Timeline,
    TimelineConfig,
)


def test_manual_scheduler_fires_with_clock_reading():
    scheduler = ManualScheduler(start=1000)
    calls: list[float] = []
    scheduler.request(calls.append)

    fired = scheduler.advance(50)

    assert fired == 1
    assert calls == [1050]
    assert scheduler.pending == ()


def test_cancelled_handle_never_fires():
    scheduler = ManualScheduler()
    calls: list[float] = []
    handle = scheduler.request(calls.append)

    scheduler.cancel(handle)

    assert not handle.active
    assert scheduler.advance() == 0
    assert calls == []


def test_cancel_none_is_ignored():
    ManualScheduler().cancel(None)


def test_callbacks_requested_while_firing_wait_for_next_refresh():
    scheduler = ManualScheduler()
    calls: list[float] = []

    def chain(now: float) -> None:
        calls.append(now)
        if len(calls) < 3:
            scheduler.request(chain)

    scheduler.request(chain)
    scheduler.advance(10)
    assert calls == [10]

    refreshes = scheduler.run_until_idle(step=10)
    assert calls == [10, 20, 30]
    assert refreshes == 2


def test_handle_cancelled_by_earlier_callback_is_skipped():
    scheduler = ManualScheduler()
    calls: list[str] = []
    second = None

    def first(now: float) -> None:
        calls.append("first")
        scheduler.cancel(second)

    scheduler.request(first)
    second = scheduler.request(lambda now: calls.append("second"))
    scheduler.advance()

    assert calls == ["first"]


def test_realtime_scheduler_plays_timeline_to_completion():
    clock = {"t": 0.0}
    sleeps: list[float] = []

    def sleep(seconds: float) -> None:
        sleeps.append(seconds)
        clock["t"] += seconds

    scheduler = RealtimeScheduler(interval=100, clock=lambda: clock["t"], sleep=sleep)
    timeline = Timeline(TimelineConfig(duration=500), scheduler)
    refreshes: list[float] = []

    timeline.play()
    scheduler.run_until_idle(on_refresh=lambda: refreshes.append(timeline.progress))

    assert timeline.progress == 1.0
    assert not timeline.is_playing
    assert 5 <= len(refreshes) <= 7
    assert all(seconds > 0 for seconds in sleeps)
