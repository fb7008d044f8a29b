"""
Global pytest configuration and fixtures for Breve tests
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List

import pytest

import breve
from breve import config as breve_config
from breve.timers import Scheduler

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@dataclass
class ManualTimer:
    """Timer handle issued by ManualScheduler"""
    due: float
    seq: int
    callback: Callable[[], Any]
    cancelled: bool = False
    fired: bool = False


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock, advanced explicitly by tests"""

    def __init__(self):
        self.now = 0.0
        self.timers: List[ManualTimer] = []
        self._seq = 0

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> ManualTimer:
        self._seq += 1
        timer = ManualTimer(due=self.now + delay_ms, seq=self._seq, callback=callback)
        self.timers.append(timer)
        return timer

    def cancel(self, handle: ManualTimer) -> None:
        handle.cancelled = True

    @property
    def pending(self) -> List[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing due timers in order"""
        target = self.now + ms
        while True:
            due = [t for t in self.pending if t.due <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due, t.seq))
            self.now = timer.due
            timer.fired = True
            timer.callback()
        self.now = target


@pytest.fixture
def scheduler():
    """Virtual clock scheduler"""
    return ManualScheduler()


@pytest.fixture(autouse=True)
def reset_breve_defaults():
    """Give every test fresh module-level hub and gate"""
    breve.reset_defaults()
    yield
    breve.reset_defaults()


@pytest.fixture
def no_config_file(tmp_path, monkeypatch):
    """Point the default config file at a path that does not exist"""
    missing = tmp_path / 'missing' / 'config.yaml'
    monkeypatch.setattr(breve_config, 'DEFAULT_CONFIG_FILE', missing)
    for name in ('BREVE_LOG_LEVEL', 'BREVE_LOG_FORMAT', 'BREVE_FRAME_RATE'):
        monkeypatch.delenv(name, raising=False)
    return missing


# Custom markers for test categorization
def pytest_configure(config):
    """Configure custom pytest markers"""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests against a real event loop")
