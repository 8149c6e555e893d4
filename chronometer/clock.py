from __future__ import annotations
import time
from typing import Callable, Optional
NS_PER_MS = 1_000_000
Clock = Callable[[], int]
def now_monotonic_ns() -> int: return time.monotonic_ns()
def now_ts_ms() -> int: return time.time_ns() // NS_PER_MS
def ns_to_ms(ns: Optional[int]) -> Optional[int]: return None if ns is None else ns // NS_PER_MS
def ms_to_ns(ms: float) -> int: return int(ms * NS_PER_MS)
