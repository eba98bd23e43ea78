"""Percentage-complete reporting for long apply loops."""

from __future__ import annotations

from typing import Callable

from loguru import logger

DEFAULT_STEP = 10

ProgressCallback = Callable[[str, int], None]


class ProgressReporter:
    """Turn a running amount into a monotonic percentage signal.

    One reporter belongs to one apply loop.  *total* is fixed up front (bytes
    for files, operations for folders) and ``advance`` is called with the
    amount each completed item contributed.  A percentage is emitted each
    time a new multiple of *step* is reached; emitted values never decrease
    and never exceed 100.  With a zero *total* nothing is emitted between
    the initial 0 % and the final 100 %.
    """

    def __init__(
        self,
        total: int,
        *,
        label: str,
        step: int = DEFAULT_STEP,
        callback: ProgressCallback | None = None,
    ) -> None:
        if step < 1 or step > 100:
            raise ValueError(f"step must be between 1 and 100, got {step}")
        self.total = total
        self.label = label
        self.step = step
        self.done = 0
        self.last: int | None = None
        self._callback = callback

    @property
    def percent(self) -> int:
        """Current completion, floored to a multiple of ``step``."""
        if self.total <= 0:
            return 0
        pct = min(100, self.done * 100 // self.total)
        return pct - pct % self.step

    def start(self) -> None:
        self._emit(0)

    def advance(self, amount: int = 1) -> None:
        self.done += amount
        pct = self.percent
        if self.last is None or pct > self.last:
            self._emit(pct)

    def finish(self) -> None:
        if self.last != 100:
            self._emit(100)

    def _emit(self, pct: int) -> None:
        self.last = pct
        if self._callback is not None:
            self._callback(self.label, pct)
        else:
            logger.info(f"{self.label} {pct}%")
