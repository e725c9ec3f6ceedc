"""Rebuild telemetry value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from rebuild_inspector.telemetry.geometry import Rect


class RebuildReason(StrEnum):
    """Best-effort category of what likely triggered a rebuild."""

    SET_STATE = "set_state"
    INHERITED_STATE = "inherited_state"
    ASYNC_RESOLUTION = "async_resolution"
    STATE_CONTAINER = "state_container"
    UNKNOWN = "unknown"


class Severity(StrEnum):
    STABLE = "stable"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class ComponentStats:
    """Point-in-time copy of one tracked component's rebuild record."""

    name: str
    count: int
    last_event_ms: int
    inferred_reason: RebuildReason | None = None

    def __str__(self) -> str:
        return f"ComponentStats({self.name}: {self.count} rebuilds)"


@dataclass(frozen=True, slots=True)
class Thresholds:
    """Rebuild count cut points for the stable/medium/high tiers.

    - below `stable_threshold`: stable
    - from `stable_threshold` up to `warning_threshold`: medium
    - `warning_threshold` and above: high
    """

    stable_threshold: int = 5
    warning_threshold: int = 20


@dataclass(frozen=True, slots=True)
class Suggestion:
    """Optimization hint derived from a component's rebuild count."""

    target_name: str
    message: str
    fix_hint: str | None = None
    triggering_count: int = 0

    def __str__(self) -> str:
        return f"Suggestion({self.target_name}: {self.message})"


@dataclass(frozen=True, slots=True)
class HeatmapEntry:
    """On-screen bounds of a tracked component joined with its rebuild count."""

    name: str
    rect: Rect
    count: int


DEFAULT_THRESHOLDS = Thresholds()
