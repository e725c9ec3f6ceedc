"""Optimization hints derived from a rebuild stats snapshot."""

from __future__ import annotations

from collections.abc import Iterable

from rebuild_inspector.telemetry.records import ComponentStats, Suggestion

DEFAULT_MEDIUM_CUTOFF = 10
DEFAULT_HIGH_CUTOFF = 20

_HIGH_FIX_HINT = "Try: const, Selector instead of Consumer, or move setState lower"
_MEDIUM_FIX_HINT = "Consider: const constructor, or extracting to separate widget"


def build_suggestions(
    snapshot: Iterable[ComponentStats],
    *,
    medium_cutoff: int = DEFAULT_MEDIUM_CUTOFF,
    high_cutoff: int = DEFAULT_HIGH_CUTOFF,
) -> list[Suggestion]:
    """Return one suggestion per record at or above `medium_cutoff`.

    Output follows the snapshot order, so a count-sorted snapshot yields the
    noisiest components first.
    """
    suggestions: list[Suggestion] = []
    for stats in snapshot:
        if stats.count >= high_cutoff:
            suggestions.append(_suggestion_for(stats, high=True))
        elif stats.count >= medium_cutoff:
            suggestions.append(_suggestion_for(stats, high=False))
    return suggestions


def _suggestion_for(stats: ComponentStats, *, high: bool) -> Suggestion:
    if high:
        message = f'Widget "{stats.name}" rebuilt {stats.count} times, likely causing jank'
        fix_hint = _HIGH_FIX_HINT
    else:
        message = f'Widget "{stats.name}" rebuilt {stats.count} times, worth optimizing'
        fix_hint = _MEDIUM_FIX_HINT
    return Suggestion(
        target_name=stats.name,
        message=message,
        fix_hint=fix_hint,
        triggering_count=stats.count,
    )


__all__ = ["DEFAULT_HIGH_CUTOFF", "DEFAULT_MEDIUM_CUTOFF", "build_suggestions"]
