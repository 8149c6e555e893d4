from __future__ import annotations

import contextlib
from threading import Lock
from typing import Iterator, List, Optional

from .events import ChronoSnapshot
from .timing import Chronometer


class LockedChronometer:
    """
    Chronometer behind a mutex, for sharing between threads.
    Every call holds the lock for its whole duration; use locked() to make
    several calls atomic.
    """
    def __init__(self, chrono: Optional[Chronometer] = None):
        self._chrono = chrono if chrono is not None else Chronometer()
        self._lock = Lock()

    @contextlib.contextmanager
    def locked(self) -> Iterator[Chronometer]:
        with self._lock:
            yield self._chrono

    def start(self) -> None:
        with self._lock:
            self._chrono.start()

    def pause(self) -> None:
        with self._lock:
            self._chrono.pause()

    def lap(self) -> None:
        with self._lock:
            self._chrono.lap()

    def reset(self) -> None:
        with self._lock:
            self._chrono.reset()

    def duration(self) -> Optional[int]:
        with self._lock:
            return self._chrono.duration()

    def duration_ms(self) -> Optional[int]:
        with self._lock:
            return self._chrono.duration_ms()

    def laps(self) -> List[int]:
        with self._lock:
            return list(self._chrono.laps)

    def snapshot(self) -> ChronoSnapshot:
        with self._lock:
            return self._chrono.snapshot()

    def __str__(self) -> str:
        with self._lock:
            return str(self._chrono)

    def __repr__(self) -> str:
        with self._lock:
            return f"Locked{self._chrono!r}"
