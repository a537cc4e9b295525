"""Span-based stopwatch.

A :class:`Stopwatch` keeps a list of :class:`Span` records.  ``start`` opens
a span, ``stop`` closes it, and ``elapsed`` sums every span so pauses between
spans are not counted.  The ``spans`` list is public: read it, iterate it, or
``clear()`` it to reset the stopwatch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from . import clock
from .render import format_total

logger = logging.getLogger(__name__)


@dataclass
class Span:
    """One contiguous interval in monotonic nanoseconds."""

    start: int
    stop: Optional[int] = None

    @property
    def running(self) -> bool:
        return self.stop is None

    def duration_ns(self, now: Optional[int] = None) -> int:
        if self.stop is not None:
            return self.stop - self.start
        end = clock.now_monotonic_ns() if now is None else now
        return end - self.start


@dataclass
class Stopwatch:
    spans: List[Span] = field(default_factory=list)

    @property
    def is_running(self) -> bool:
        return bool(self.spans) and self.spans[-1].running

    def start(self) -> None:
        if self.is_running:
            logger.debug("start ignored, span #%d still open", len(self.spans) - 1)
            return
        self.spans.append(Span(start=clock.now_monotonic_ns()))
        logger.debug("opened span #%d", len(self.spans) - 1)

    def stop(self) -> None:
        if not self.is_running:
            logger.debug("stop ignored, stopwatch not running")
            return
        self.spans[-1].stop = clock.now_monotonic_ns()
        logger.debug("closed span #%d", len(self.spans) - 1)

    def lap(self) -> float:
        """Close the running span and open the next one at the same instant.

        Returns the closed span's duration in seconds, or ``0.0`` when the
        stopwatch is not running.  The total is unchanged since no gap is
        introduced between the two spans.
        """

        if not self.is_running:
            return 0.0
        now = clock.now_monotonic_ns()
        current = self.spans[-1]
        current.stop = now
        self.spans.append(Span(start=now))
        d = current.duration_ns()
        logger.debug("lap closed span #%d after %d ns", len(self.spans) - 2, d)
        return clock.ns_to_s(d)

    def reset(self) -> None:
        self.spans.clear()
        logger.debug("reset")

    def restart(self) -> None:
        self.reset()
        self.start()

    @property
    def elapsed_ns(self) -> int:
        if not self.spans:
            return 0
        # one clock read shared by every open span
        now = clock.now_monotonic_ns() if any(s.running for s in self.spans) else None
        return sum(s.duration_ns(now) for s in self.spans)

    @property
    def elapsed_ms(self) -> float:
        return clock.ns_to_ms(self.elapsed_ns)

    def elapsed(self) -> float:
        """Total seconds across all spans; an open span counts up to now."""

        return clock.ns_to_s(self.elapsed_ns)

    def __enter__(self) -> "Stopwatch":
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()

    def __str__(self) -> str:
        return format_total(self)


__all__ = ["Span", "Stopwatch"]
