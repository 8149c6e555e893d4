from __future__ import annotations
import os
from typing import Optional
from pydantic import BaseModel, Field

def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}

class ChronoConfig(BaseModel):
    prompt: str = Field(default_factory=lambda: os.getenv("CHRONO_PROMPT", "chrono> "))
    echo_state: bool = Field(default_factory=lambda: _env_flag("CHRONO_ECHO_STATE"))
    json_output: bool = Field(default_factory=lambda: _env_flag("CHRONO_JSON"))

_config_singleton: Optional[ChronoConfig] = None

def get_config(force_refresh: bool = False) -> ChronoConfig:
    """Return a cached ChronoConfig built from the environment."""
    global _config_singleton
    if force_refresh or _config_singleton is None:
        _config_singleton = ChronoConfig()
    return _config_singleton
