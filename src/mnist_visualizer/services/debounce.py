"""Debounced scheduling of forward passes while the user draws.

Every stroke event replaces the pending recompute, so the network only runs
once input has been quiet for delay_ms. Scheduling goes through Tk's
after/after_cancel, which keeps everything on the UI thread.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol


logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    def after(self, delay_ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, job: Any) -> None: ...


class Debouncer:
    """Run callback once, delay_ms after the most recent trigger()."""

    def __init__(self, scheduler: Scheduler, delay_ms: int, callback: Callable[[], None]) -> None:
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self._callback = callback
        self._job: Any | None = None

    @property
    def pending(self) -> bool:
        return self._job is not None

    def trigger(self) -> None:
        """(Re)start the quiet-period timer."""
        if self._job is not None:
            self._scheduler.after_cancel(self._job)
        self._job = self._scheduler.after(self._delay_ms, self._fire)

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._job is not None:
            self._scheduler.after_cancel(self._job)
            self._job = None

    def _fire(self) -> None:
        self._job = None
        logger.debug("Debounce interval of %d ms elapsed", self._delay_ms)
        self._callback()
