"""Plain-text views over a stopwatch.

These helpers only read ``elapsed()`` and ``spans``; they keep no state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from . import clock
from .config import get_settings

if TYPE_CHECKING:  # pragma: no cover
    from .stopwatch import Stopwatch


def format_seconds(seconds: float, precision: Optional[int] = None) -> str:
    """Render ``seconds`` as ``"12.345s"``."""

    if precision is None:
        precision = get_settings().precision
    return f"{seconds:.{precision}f}s"


def format_total(watch: "Stopwatch", precision: Optional[int] = None) -> str:
    return format_seconds(watch.elapsed(), precision)


def format_spans(watch: "Stopwatch", precision: Optional[int] = None) -> str:
    """One line per span, ``stop=pending`` for an open span."""

    if not watch.spans:
        return "<no spans>"
    now = clock.now_monotonic_ns() if any(s.running for s in watch.spans) else None
    lines = []
    for i, span in enumerate(watch.spans):
        stop = "pending" if span.stop is None else str(span.stop)
        took = format_seconds(clock.ns_to_s(span.duration_ns(now)), precision)
        lines.append(f"#{i} start={span.start} stop={stop} ({took})")
    return "\n".join(lines)


__all__ = ["format_seconds", "format_spans", "format_total"]
