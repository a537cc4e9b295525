from typing import Iterable, List

import pytest

import spanwatch.clock as clock_mod


class ScriptedClock:
    """Feeds ``now_monotonic_ns`` from a fixed list and records each read."""

    def __init__(self, ticks: Iterable[int]):
        self._ticks = list(ticks)
        self.reads: List[int] = []

    def __call__(self) -> int:
        if not self._ticks:
            raise AssertionError("scripted clock exhausted")
        t = self._ticks.pop(0)
        self.reads.append(t)
        return t


@pytest.fixture
def scripted_clock(monkeypatch):
    """
    Return a factory; each call replaces the monotonic clock with the given ticks.
    """
    def _install(*ticks: int) -> ScriptedClock:
        fake = ScriptedClock(ticks)
        monkeypatch.setattr(clock_mod, "now_monotonic_ns", fake)
        return fake
    return _install


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Keep SPANWATCH_* env and the cached settings from leaking between tests."""
    import spanwatch.config as config_mod

    monkeypatch.delenv("SPANWATCH_PRECISION", raising=False)
    monkeypatch.delenv("SPANWATCH_LOG_LEVEL", raising=False)
    config_mod._settings_singleton = None
    yield
    config_mod._settings_singleton = None
