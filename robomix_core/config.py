from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

SPAWN_POLICIES = ("player", "tick")


def _env_flag(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameConfig:
    """Game-wide settings. spawn_policy "tick" adds a random robot on every timer tick."""
    spawn_policy: str = "player"
    tick_ms: int = 1000
    wrap_edges: bool = True

    def __post_init__(self) -> None:
        if self.spawn_policy not in SPAWN_POLICIES:
            raise ValueError(f"unknown spawn policy: {self.spawn_policy!r} (expected one of {SPAWN_POLICIES})")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    @property
    def spawns_on_tick(self) -> bool:
        return self.spawn_policy == "tick"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        env = os.environ if environ is None else environ
        return cls(
            spawn_policy=(env.get("ROBOMIX_SPAWN_POLICY") or "player").strip().lower(),
            tick_ms=int(env.get("ROBOMIX_TICK_MS") or 1000),
            wrap_edges=_env_flag(env.get("ROBOMIX_WRAP_EDGES"), True),
        )
