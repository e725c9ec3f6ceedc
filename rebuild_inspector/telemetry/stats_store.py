"""Per-component rebuild counters."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from rebuild_inspector.telemetry.notifier import ChangeNotifier
from rebuild_inspector.telemetry.reasons import ReasonClassifier, classify_reason
from rebuild_inspector.telemetry.records import ComponentStats, RebuildReason

_LOG = logging.getLogger("rebuild_inspector.telemetry")

# Debug-log lines fire once when a count climbs past each of these.
LOG_CROSSING_THRESHOLDS: tuple[int, ...] = (20, 50)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(slots=True)
class _Record:
    name: str
    count: int = 0
    last_event_ms: int = 0
    inferred_reason: RebuildReason | None = None

    def freeze(self) -> ComponentStats:
        return ComponentStats(
            name=self.name,
            count=self.count,
            last_event_ms=self.last_event_ms,
            inferred_reason=self.inferred_reason,
        )


class RebuildStatsStore:
    """Own the rebuild counters for every tracked component name.

    All reads return frozen copies. When `enabled` is false every mutation is
    a no-op, every query is empty and the change version never moves.
    """

    def __init__(
        self,
        notifier: ChangeNotifier,
        *,
        enabled: bool = True,
        debug_logs_enabled: bool = False,
        classifier: ReasonClassifier = classify_reason,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._notifier = notifier
        self._enabled = bool(enabled)
        self._debug_logs_enabled = bool(debug_logs_enabled)
        self._classifier = classifier
        self._clock = clock or _now_ms
        self._records: dict[str, _Record] = {}
        self._lock = Lock()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def changes(self) -> ChangeNotifier:
        return self._notifier

    @property
    def debug_logs_enabled(self) -> bool:
        return self._debug_logs_enabled

    @debug_logs_enabled.setter
    def debug_logs_enabled(self, value: bool) -> None:
        self._debug_logs_enabled = bool(value)

    def record_event(self, name: str, capture: str | None = None) -> None:
        """Count one completed render of `name`."""
        if not self._enabled:
            return
        reason = self._classify(name, capture) if capture is not None else None
        with self._lock:
            record = self._records.get(name)
            if record is None:
                record = _Record(name=name)
                self._records[name] = record
            previous = record.count
            record.count += 1
            record.last_event_ms = int(self._clock())
            if reason is not None:
                record.inferred_reason = reason
            count = record.count
        if self._debug_logs_enabled:
            self._log_crossings(name, previous, count)
        self._notifier.notify()

    def get_stats(self, name: str) -> ComponentStats | None:
        if not self._enabled:
            return None
        with self._lock:
            record = self._records.get(name)
            return record.freeze() if record is not None else None

    def get_all_stats(self) -> list[ComponentStats]:
        """Return every record, highest count first; ties keep first-seen order."""
        if not self._enabled:
            return []
        with self._lock:
            frozen = [record.freeze() for record in self._records.values()]
        return sorted(frozen, key=lambda stats: stats.count, reverse=True)

    def get_top(self, n: int) -> list[ComponentStats]:
        return self.get_all_stats()[: max(0, int(n))]

    def count_for(self, name: str) -> int:
        stats = self.get_stats(name)
        return stats.count if stats is not None else 0

    def tracked_names(self) -> tuple[str, ...]:
        if not self._enabled:
            return ()
        with self._lock:
            return tuple(self._records)

    def reset(self, name: str) -> None:
        """Zero one record and clear its inferred reason."""
        if not self._enabled:
            return
        with self._lock:
            record = self._records.get(name)
            if record is not None:
                record.count = 0
                record.inferred_reason = None
        self._notifier.notify()

    def reset_all(self) -> None:
        if not self._enabled:
            return
        with self._lock:
            for record in self._records.values():
                record.count = 0
                record.inferred_reason = None
            total = len(self._records)
        if self._debug_logs_enabled:
            _LOG.info("rebuild_counts_reset tracked=%d", total)
        self._notifier.notify()

    def clear(self) -> None:
        """Forget every record; later lookups return None, not zeroed stats."""
        if not self._enabled:
            return
        with self._lock:
            self._records.clear()
        self._notifier.notify()

    def _classify(self, name: str, capture: str) -> RebuildReason:
        try:
            return self._classifier(capture)
        except Exception:  # pylint: disable=broad-exception-caught
            _LOG.debug("rebuild_reason_classifier_failed name=%s", name, exc_info=True)
            return RebuildReason.UNKNOWN

    def _log_crossings(self, name: str, previous: int, count: int) -> None:
        for threshold in LOG_CROSSING_THRESHOLDS:
            if previous < threshold <= count:
                _LOG.warning(
                    "rebuild_threshold_exceeded name=%s count=%d threshold=%d",
                    name,
                    count,
                    threshold,
                )
