"""Inspector configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from rebuild_inspector.telemetry.suggestions import DEFAULT_HIGH_CUTOFF, DEFAULT_MEDIUM_CUTOFF

# `python -O` clears __debug__; treat that as the release build.
BUILD_INSTRUMENTED = __debug__


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Immutable inspector configuration."""

    instrumentation_enabled: bool = BUILD_INSTRUMENTED
    debug_logs_enabled: bool = BUILD_INSTRUMENTED
    capture_reasons: bool = False
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None
    dashboard_top_n: int = 10
    suggestion_medium_cutoff: int = DEFAULT_MEDIUM_CUTOFF
    suggestion_high_cutoff: int = DEFAULT_HIGH_CUTOFF


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with inspector-prefixed override."""
    value = _raw("REBUILD_INSPECTOR_LOG_LEVEL", env=env)
    if value is None:
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper() or default


def _normalize_log_format(raw: str) -> str:
    value = str(raw).strip().lower()
    return value if value in {"text", "json"} else "text"


def load_inspector_config(*, env: Mapping[str, str] | None = None) -> InspectorConfig:
    """Load immutable inspector configuration from env vars."""
    enabled = _flag("REBUILD_INSPECTOR_ENABLED", BUILD_INSTRUMENTED, env=env)
    medium_cutoff = _int(
        "REBUILD_INSPECTOR_SUGGEST_MEDIUM", DEFAULT_MEDIUM_CUTOFF, minimum=1, env=env
    )
    high_cutoff = _int(
        "REBUILD_INSPECTOR_SUGGEST_HIGH", DEFAULT_HIGH_CUTOFF, minimum=medium_cutoff, env=env
    )
    log_file = _text("REBUILD_INSPECTOR_LOG_FILE", "", env=env)
    return InspectorConfig(
        instrumentation_enabled=enabled,
        debug_logs_enabled=_flag("REBUILD_INSPECTOR_DEBUG_LOGS", enabled, env=env),
        capture_reasons=_flag("REBUILD_INSPECTOR_CAPTURE_REASONS", False, env=env),
        log_level=resolve_log_level_name(env=env),
        log_format=_normalize_log_format(_text("REBUILD_INSPECTOR_LOG_FORMAT", "text", env=env)),
        log_file=log_file or None,
        dashboard_top_n=_int("REBUILD_INSPECTOR_DASHBOARD_TOP_N", 10, minimum=1, env=env),
        suggestion_medium_cutoff=medium_cutoff,
        suggestion_high_cutoff=high_cutoff,
    )


__all__ = [
    "BUILD_INSTRUMENTED",
    "InspectorConfig",
    "load_inspector_config",
    "resolve_log_level_name",
]
