"""Caller-side coalescing of rapid calls into one delayed call."""

from __future__ import annotations

import logging
from threading import Lock, Timer
from typing import Any, Callable, Optional, Tuple


class Debouncer:
    """Run *func* once, *delay* seconds after the last of a burst of calls."""

    def __init__(self, func: Callable[..., Any], delay: float = 0.3) -> None:
        self._func = func
        self._delay = max(0.0, float(delay))
        self._lock = Lock()
        self._timer: Optional[Timer] = None
        self._args: Tuple[Any, ...] = ()
        self._log = logging.getLogger("newsdeck.debounce")

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def call(self, *args: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            timer = Timer(self._delay, self._fire)
            timer.args = (timer, args)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def flush(self) -> bool:
        """Run the pending call now; returns False when nothing was pending."""

        with self._lock:
            timer, args = self._timer, self._args
            self._timer = None
        if timer is None:
            return False
        timer.cancel()
        self._func(*args)
        return True

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None

    def _fire(self, timer: Timer, args: Tuple[Any, ...]) -> None:
        with self._lock:
            # superseded by a later call, cancel() or flush()
            if self._timer is not timer:
                return
            self._timer = None
        try:
            self._func(*args)
        except Exception:  # pragma: no cover - logged for visibility
            self._log.exception("error in debounced call")


__all__ = ["Debouncer"]
