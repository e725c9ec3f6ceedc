"""Versioned change signal with deferred, coalesced listener dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from rebuild_inspector.api.scheduling import FrameScheduler

_LOG = logging.getLogger("rebuild_inspector.telemetry")

ChangeListener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque listener subscription token."""

    id: int


class ChangeNotifier:
    """Monotonic version counter that tells listeners to re-query.

    `notify()` never calls listeners directly. It advances the version and
    posts a single dispatch to the frame scheduler; further notifications
    before that dispatch runs are folded into it. A listener that mutates the
    store during dispatch therefore schedules a fresh dispatch for the next
    frame instead of recursing.
    """

    def __init__(self, scheduler: FrameScheduler) -> None:
        self._scheduler = scheduler
        self._lock = Lock()
        self._version = 0
        self._listeners: dict[int, ChangeListener] = {}
        self._next_subscription_id = 1
        self._dispatch_pending = False

    @property
    def version(self) -> int:
        return self._version

    @property
    def dispatch_pending(self) -> bool:
        return self._dispatch_pending

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: ChangeListener) -> Subscription:
        with self._lock:
            token = self._next_subscription_id
            self._next_subscription_id += 1
            self._listeners[token] = listener
        return Subscription(token)

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            self._listeners.pop(subscription.id, None)

    def notify(self) -> int:
        """Advance the version and schedule a dispatch if none is pending."""
        with self._lock:
            self._version += 1
            version = self._version
            schedule = not self._dispatch_pending
            self._dispatch_pending = True
        if schedule:
            self._scheduler.post_frame_callback(self._dispatch)
        return version

    def _dispatch(self) -> None:
        with self._lock:
            self._dispatch_pending = False
            version = self._version
            listeners = tuple(self._listeners.values())
        for listener in listeners:
            try:
                listener()
            except Exception:  # pylint: disable=broad-exception-caught
                _LOG.exception("change_listener_failed version=%d", version)


__all__ = ["ChangeListener", "ChangeNotifier", "Subscription"]
