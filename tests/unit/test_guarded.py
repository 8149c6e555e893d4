# tests/unit/test_guarded.py
import threading

from chronometer import Chronometer, LockedChronometer
from chronometer.clock import NS_PER_MS


class _StepClock:
    """Advances one millisecond on every read."""

    def __init__(self):
        self.now = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            self.now += NS_PER_MS
            return self.now


def test_delegates_to_inner_chronometer():
    inner = Chronometer(clock=_StepClock())
    shared = LockedChronometer(inner)

    assert shared.duration() is None
    assert str(shared) == "<not started>"

    shared.start()
    shared.lap()
    shared.pause()

    assert inner.started and inner.paused
    assert shared.laps() == inner.laps
    assert shared.duration() == inner.accumulated
    assert shared.duration_ms() == inner.duration_ms()
    assert shared.snapshot().state == "paused"
    assert repr(shared).startswith("LockedChronometer(")

    shared.reset()
    assert inner == Chronometer()


def test_laps_returns_copy():
    shared = LockedChronometer(Chronometer(clock=_StepClock()))
    shared.start()
    shared.lap()
    laps = shared.laps()
    laps.append(123)
    assert len(shared.laps()) == 1


def test_locked_context_exposes_inner():
    inner = Chronometer(clock=_StepClock())
    shared = LockedChronometer(inner)
    with shared.locked() as chrono:
        assert chrono is inner
        chrono.start()
        chrono.lap()
    assert len(shared.laps()) == 1


def test_concurrent_laps_are_all_recorded():
    shared = LockedChronometer(Chronometer(clock=_StepClock()))
    shared.start()

    def worker():
        for _ in range(200):
            shared.lap()

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    laps = shared.laps()
    assert len(laps) == 8 * 200
    assert laps == sorted(laps)
