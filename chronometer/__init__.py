"""Elapsed-time chronometer with pause/resume and lap marks."""

from .events import ChronoSnapshot, snapshot_dump
from .guarded import LockedChronometer
from .timing import ChronoState, Chronometer

__all__ = ["ChronoSnapshot", "ChronoState", "Chronometer", "LockedChronometer", "snapshot_dump"]
