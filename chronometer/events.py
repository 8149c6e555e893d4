"""Snapshot model describing a chronometer at one instant."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .clock import now_ts_ms


class ChronoState(str, Enum):
    FRESH = "fresh"
    RUNNING = "running"
    PAUSED = "paused"


class ChronoSnapshot(BaseModel):
    """Point-in-time view of a chronometer, for diagnostics and JSON output."""

    state: ChronoState
    started: bool
    paused: bool
    duration_ms: Optional[int] = None
    laps_ms: List[int] = Field(default_factory=list)
    taken_ts_ms: int = Field(default_factory=now_ts_ms)


def snapshot_dump(snapshot: ChronoSnapshot) -> Dict[str, Any]:
    """Return ``snapshot`` as a plain ``dict`` under either pydantic major version."""

    if hasattr(snapshot, "model_dump"):
        return snapshot.model_dump()  # type: ignore[return-value]
    return snapshot.dict()  # type: ignore[return-value]


__all__ = ["ChronoSnapshot", "ChronoState", "snapshot_dump"]
