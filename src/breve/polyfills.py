"""
Environment polyfills

Stand-ins for a console-like logging sink and an animation-frame scheduler
when the host does not provide them.
"""

import logging
from types import SimpleNamespace
from typing import Any, Callable, Optional

from .config import BreveConfig
from .timers import AsyncioScheduler, Scheduler

logger = logging.getLogger(__name__)


# ``assert`` is a keyword, so the console method is ``assert_``
CONSOLE_METHODS = ('log', 'warn', 'error', 'assert_', 'info', 'debug')


def _noop(*args, **kwargs) -> None:
    return None


def stub_console(console: Any = None) -> Any:
    """
    Fill in missing console methods with no-ops.

    Existing methods are never replaced. With no console a new object is
    returned whose methods all do nothing.
    """
    if console is None:
        console = SimpleNamespace()
    for name in CONSOLE_METHODS:
        if not callable(getattr(console, name, None)):
            setattr(console, name, _noop)
            logger.debug(f"Stubbed console.{name}")
    return console


class LoggingConsole:
    """Console that writes through the ``logging`` module"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger('breve.console')

    def log(self, *args):
        self.logger.info(self._format(args))

    def info(self, *args):
        self.logger.info(self._format(args))

    def warn(self, *args):
        self.logger.warning(self._format(args))

    def error(self, *args):
        self.logger.error(self._format(args))

    def debug(self, *args):
        self.logger.debug(self._format(args))

    def assert_(self, condition: Any, *args):
        if not condition:
            self.logger.error("Assertion failed" + (f": {self._format(args)}" if args else ""))

    @staticmethod
    def _format(args) -> str:
        return " ".join(str(arg) for arg in args)


class FrameScheduler:
    """
    Animation-frame scheduling.

    Uses the host's native request/cancel functions when given, otherwise
    falls back to the scheduler at ``1000 / frame_rate`` milliseconds.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        request: Optional[Callable[[Callable[[], Any]], Any]] = None,
        cancel: Optional[Callable[[Any], None]] = None,
        frame_rate: float = 60
    ):
        if frame_rate <= 0:
            raise ValueError("frame_rate must be positive")
        self.scheduler = scheduler or AsyncioScheduler()
        self.native_request = request
        self.native_cancel = cancel
        self.frame_rate = frame_rate

    @classmethod
    def from_config(cls, config: BreveConfig, scheduler: Optional[Scheduler] = None) -> 'FrameScheduler':
        """Fallback-only frame scheduler running at the configured frame rate"""
        return cls(scheduler, frame_rate=config.frame_rate)

    @property
    def frame_interval_ms(self) -> float:
        return 1000 / self.frame_rate

    def request(self, callback: Callable[[], Any]) -> Any:
        """Run ``callback`` on the next frame and return a handle"""
        if self.native_request is not None:
            return self.native_request(callback)
        return self.scheduler.schedule(callback, self.frame_interval_ms)

    def cancel(self, handle: Any) -> None:
        """Cancel a frame requested with ``request``"""
        if self.native_cancel is not None:
            self.native_cancel(handle)
        else:
            self.scheduler.cancel(handle)
