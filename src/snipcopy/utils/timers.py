import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


class Scheduler(ABC):

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` once, ``delay`` seconds from now."""


class ThreadingScheduler(Scheduler):
    """One daemon ``threading.Timer`` per scheduled callback.

    Callbacks run on the timer thread, not on the caller's thread. Callers
    that touch shared state from a callback need their own locking; the
    snippet marker revert only removes a class and is safe to repeat.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._timers: List[threading.Timer] = []

    def call_later(self, delay: float, callback: Callable[[], Any]) -> threading.Timer:
        timer = threading.Timer(delay, self._run, args=(callback,))
        timer.daemon = True
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
            self._timers.append(timer)
        timer.start()
        return timer

    def _run(self, callback: Callable[[], Any]) -> None:
        try:
            callback()
        except Exception:
            logger.exception("Scheduled callback failed")

    def pending(self) -> int:
        with self._lock:
            return sum(1 for t in self._timers if t.is_alive())

    def join_all(self, timeout: Optional[float] = None) -> None:
        with self._lock:
            timers = list(self._timers)
        for timer in timers:
            timer.join(timeout)

    def cancel_all(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, []
        for timer in timers:
            timer.cancel()
