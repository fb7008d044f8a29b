"""
Throttle and debounce scheduling for Breve

Provides a delay primitive contract and an id-keyed gate that throttles
(leading edge) or debounces (trailing edge) calls. Each key has its own
independent timeline.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from .calling import invoke

logger = logging.getLogger(__name__)


class Scheduler(ABC):
    """
    Delay primitive used by timers.

    ``callback`` must run exactly once, asynchronously, no earlier than
    ``delay_ms`` after scheduling, unless the handle is cancelled first.
    """

    @abstractmethod
    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> Any:
        """Schedule ``callback`` and return a handle for ``cancel``"""

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a scheduled callback. Cancelling a fired handle is a no-op"""


class AsyncioScheduler(Scheduler):
    """Scheduler backed by ``loop.call_later``"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(max(delay_ms, 0) / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class TimerGate:
    """
    Id-keyed throttle and debounce.

    ``throttles`` maps a key to the handle closing its suppression window;
    ``debounces`` maps a key to the handle of its pending invocation.
    A key is present only while its window is open or its call is pending.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None):
        self.scheduler = scheduler or AsyncioScheduler()
        self.throttles: Dict[str, Any] = {}
        self.debounces: Dict[str, Any] = {}

    def throttle(
        self,
        key: str,
        func: Callable[..., Any],
        scope: Any = None,
        delay_ms: float = 0,
        args: Any = None
    ) -> None:
        """
        Call ``func`` now unless ``key`` was called within the last ``delay_ms``.

        Calls made while the window is open are dropped.
        """
        if key in self.throttles:
            logger.debug(f"Throttled call dropped for '{key}'")
            return

        self.throttles[key] = self.scheduler.schedule(
            lambda: self._close_window(key), delay_ms
        )
        try:
            invoke(func, scope, args)
        except Exception:
            if key in self.throttles:
                self.scheduler.cancel(self.throttles.pop(key))
            raise

    def _close_window(self, key: str):
        self.throttles.pop(key, None)
        logger.debug(f"Throttle window closed for '{key}'")

    def debounce(
        self,
        key: str,
        func: Callable[..., Any],
        scope: Any = None,
        delay_ms: float = 0,
        args: Any = None
    ) -> None:
        """
        Call ``func`` ``delay_ms`` after the last call for ``key``.

        A call arriving while one is pending replaces it, so only the last
        call's ``args`` are used.
        """
        if key in self.debounces:
            self.scheduler.cancel(self.debounces.pop(key))
            logger.debug(f"Pending debounce replaced for '{key}'")

        self.debounces[key] = self.scheduler.schedule(
            lambda: self._fire(key, func, scope, args), delay_ms
        )

    def _fire(self, key: str, func: Callable[..., Any], scope: Any, args: Any):
        self.debounces.pop(key, None)
        invoke(func, scope, args)

    def is_throttled(self, key: str) -> bool:
        """Whether calls for ``key`` are currently suppressed"""
        return key in self.throttles

    def is_pending(self, key: str) -> bool:
        """Whether a debounced call for ``key`` is waiting to fire"""
        return key in self.debounces

    def cancel(self, key: str) -> None:
        """Drop the pending debounce and the open throttle window for ``key``"""
        if key in self.debounces:
            self.scheduler.cancel(self.debounces.pop(key))
        if key in self.throttles:
            self.scheduler.cancel(self.throttles.pop(key))

    def reset(self) -> None:
        """Cancel every scheduled timer and forget all keys"""
        for handle in list(self.debounces.values()) + list(self.throttles.values()):
            self.scheduler.cancel(handle)
        self.debounces.clear()
        self.throttles.clear()
        logger.debug("Timer gate reset")
