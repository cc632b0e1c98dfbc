"""One-shot deferred tasks on timer threads."""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class TimerScheduler:
    """Runs ``task(context)`` once after a delay, off the calling thread.

    Scheduled tasks cannot be cancelled. Timer threads are daemons so a
    pending task never keeps the process alive.
    """

    def __init__(self) -> None:
        self._timers: set[threading.Timer] = set()
        self._lock = threading.Lock()

    def schedule(self, delay_secs: float, task: Callable[[Any], None], context: Any) -> threading.Timer:
        timer = threading.Timer(delay_secs, self._run, args=(task, context))
        timer.daemon = True
        with self._lock:
            self._timers.add(timer)
        timer.start()
        return timer

    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until every scheduled task has run.

        Returns:
            True if no task is pending afterwards.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            with self._lock:
                timers = list(self._timers)
            if not timers:
                return True
            for timer in timers:
                timer.join(None if deadline is None else max(0.0, deadline - time.monotonic()))
            if deadline is not None and time.monotonic() >= deadline:
                return self.pending() == 0

    def _run(self, task: Callable[[Any], None], context: Any) -> None:
        try:
            task(context)
        except Exception:
            logger.exception("Scheduled task failed for %s", context)
        finally:
            with self._lock:
                self._timers.discard(threading.current_thread())  # type: ignore[arg-type]
