# cocktail_browser/src/application/debounce.py
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional, Tuple

log = logging.getLogger("app.debounce")


class Debouncer:
    """
    Wait for input to settle, then act: only the last call() within `delay_s` fires.
    The callback runs on a timer thread.
    """

    def __init__(self, delay_s: float, callback: Callable[..., Any]) -> None:
        self.delay_s = delay_s
        self.callback = callback
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[tuple, dict]] = None
        self._generation = 0
        self._lock = threading.Lock()

    def call(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = threading.Timer(self.delay_s, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
            self._generation += 1

    def flush(self) -> None:
        """Fire the pending call now, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            gen = self._generation
        self._fire(gen)

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a newer call() superseded this timer
            if generation != self._generation or self._pending is None:
                return
            args, kwargs = self._pending
            self._pending = None
            self._timer = None
        try:
            self.callback(*args, **kwargs)
        except Exception:
            log.exception("Debounced callback failed")
