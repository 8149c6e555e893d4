"""Pausable, lap-recording chronometer over the monotonic clock.

All timestamps and durations are integer nanoseconds.  ``None`` means "no
value" and is never interchangeable with ``0``: a fresh chronometer has no
duration at all, whereas one started an instant ago has a duration close to
zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .clock import NS_PER_MS, Clock, now_monotonic_ns, ns_to_ms
from .events import ChronoSnapshot, ChronoState


@dataclass(repr=False)
class Chronometer:
    """Accumulates running time across start/pause cycles and records laps.

    Not thread-safe; share it through :class:`chronometer.guarded.LockedChronometer`.
    """

    clock: Clock = field(default=now_monotonic_ns, repr=False, compare=False)
    running_since: Optional[int] = None
    accumulated: Optional[int] = None
    laps: List[int] = field(default_factory=list)
    started: bool = False
    paused: bool = False

    def start(self) -> None:
        # Restarting while running drops the open interval instead of banking it.
        self.running_since = self.clock()
        self.started = True
        self.paused = False

    def pause(self) -> None:
        # ``started`` is not checked; on a fresh instance only the flag changes.
        if self.running_since is not None:
            elapsed = self.clock() - self.running_since
            self.accumulated = elapsed if self.accumulated is None else self.accumulated + elapsed
        self.running_since = None
        self.paused = True

    def lap(self) -> None:
        """Record time since the last start/resume; ignored unless running.

        The banked ``accumulated`` time is not included, so after a resume a
        lap reads less than :meth:`duration` at the same instant.
        """
        if self.running_since is not None:
            self.laps.append(self.clock() - self.running_since)

    def reset(self) -> None:
        self.running_since = None
        self.accumulated = None
        self.laps = []
        self.started = False
        self.paused = False

    def duration(self) -> Optional[int]:
        """Total elapsed nanoseconds, or ``None`` if nothing has been measured."""
        if not self.started:
            return None
        if self.paused:
            return self.accumulated
        if self.running_since is None:
            return None
        elapsed = self.clock() - self.running_since
        return elapsed if self.accumulated is None else elapsed + self.accumulated

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    @property
    def state(self) -> ChronoState:
        if self.paused:
            return ChronoState.PAUSED
        if self.started and self.running_since is not None:
            return ChronoState.RUNNING
        return ChronoState.FRESH

    def duration_ms(self) -> Optional[int]:
        return ns_to_ms(self.duration())

    def laps_ms(self) -> List[int]:
        return [lap // NS_PER_MS for lap in self.laps]

    def snapshot(self) -> ChronoSnapshot:
        return ChronoSnapshot(
            state=self.state,
            started=self.started,
            paused=self.paused,
            duration_ms=self.duration_ms(),
            laps_ms=self.laps_ms(),
        )

    def __str__(self) -> str:
        ms = self.duration_ms()
        return "<not started>" if ms is None else str(ms)

    def __repr__(self) -> str:
        ms = self.duration_ms()
        return (
            f"Chronometer(started={self.started}, paused={self.paused}, "
            f"laps={len(self.laps)}, duration_ms={0 if ms is None else ms})"
        )


__all__ = ["ChronoState", "Chronometer"]
