"""Heuristic rebuild-reason inference from a captured call context.

The classifier only looks for well-known marker substrings in the capture
text. It is a UI hint, never ground truth.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable

from rebuild_inspector.telemetry.records import RebuildReason

ReasonClassifier = Callable[[str], RebuildReason]

# Checked in order; the first category with a matching marker wins.
_REASON_MARKERS: tuple[tuple[RebuildReason, tuple[str, ...]], ...] = (
    (RebuildReason.SET_STATE, ("setState", "set_state")),
    (
        RebuildReason.INHERITED_STATE,
        ("Consumer", "Provider", "InheritedWidget", "context.watch"),
    ),
    (RebuildReason.ASYNC_RESOLUTION, ("StreamBuilder", "FutureBuilder")),
    (RebuildReason.STATE_CONTAINER, ("BlocBuilder", "BlocConsumer")),
)


def classify_reason(capture: str) -> RebuildReason:
    """Map a context capture to the first matching reason category."""
    text = str(capture)
    for reason, markers in _REASON_MARKERS:
        if any(marker in text for marker in markers):
            return reason
    return RebuildReason.UNKNOWN


def capture_call_context(*, skip: int = 1, limit: int | None = None) -> str:
    """Return the current Python call stack as text for `classify_reason`.

    `skip` drops the innermost frames (this helper and its direct caller by
    default) so the capture starts at the code that triggered the build.
    `limit` caps the remaining frames, keeping the ones nearest that code.
    """
    frames = traceback.format_stack()
    keep = max(0, len(frames) - max(0, int(skip)) - 1)
    kept = frames[:keep]
    if limit is not None:
        kept = kept[max(0, keep - max(0, int(limit))) :]
    return "".join(kept)


__all__ = ["ReasonClassifier", "capture_call_context", "classify_reason"]
