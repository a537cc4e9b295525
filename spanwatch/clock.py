from __future__ import annotations

import time

NS_PER_MS = 1_000_000
NS_PER_S = 1_000_000_000

def now_monotonic_ns() -> int: return time.monotonic_ns()
def ns_to_ms(ns: int) -> float: return ns / NS_PER_MS
def ns_to_s(ns: int) -> float: return ns / NS_PER_S
