"""Cumulative elapsed-time measurement over start/stop spans."""

from .render import format_seconds, format_spans, format_total
from .stopwatch import Span, Stopwatch

__all__ = ["Span", "Stopwatch", "format_seconds", "format_spans", "format_total"]
