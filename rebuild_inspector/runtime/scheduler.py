"""Post-frame callback queue pumped by the host event loop."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

TaskCallback = Callable[[], None]


@dataclass(slots=True)
class _Task:
    task_id: int
    callback: TaskCallback
    cancelled: bool = False


class PostFrameScheduler:
    """FIFO "schedule after current frame" queue.

    The host calls `run_frame_callbacks()` once its frame has finished.
    Callbacks posted while a batch is running are queued for the next frame.
    """

    def __init__(self) -> None:
        self._next_task_id = 1
        self._queue: deque[_Task] = deque()
        self._lock = Lock()
        self._frames_run = 0

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        with self._lock:
            return sum(1 for task in self._queue if not task.cancelled)

    @property
    def frames_run(self) -> int:
        return self._frames_run

    def post_frame_callback(self, callback: TaskCallback) -> int:
        """Queue a one-shot callback for the end of the current frame."""
        with self._lock:
            task_id = self._next_task_id
            self._next_task_id += 1
            self._queue.append(_Task(task_id=task_id, callback=callback))
            return task_id

    def cancel(self, task_id: int) -> None:
        """Cancel a queued task if it exists."""
        with self._lock:
            for task in self._queue:
                if task.task_id == task_id:
                    task.cancelled = True
                    return

    def run_frame_callbacks(self) -> int:
        """Run the callbacks queued before this call and return how many ran."""
        with self._lock:
            batch = list(self._queue)
            self._queue.clear()
            self._frames_run += 1
        executed = 0
        for task in batch:
            if task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed


__all__ = ["PostFrameScheduler"]
