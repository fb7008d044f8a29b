"""Breve - small toolbox of mixins, custom events, tokens, throttle/debounce and polyfills"""

__version__ = "0.1.0"

from typing import Any, Optional

from breve.calling import CallMode, invoke
from breve.composition import Observable, extend, make_observable, mixin
from breve.config import BreveConfig, setup_logging
from breve.errors import ArityError, BreveError, ConfigError
from breve.events import EventHub, Listener
from breve.ids import uuid
from breve.polyfills import FrameScheduler, LoggingConsole, stub_console
from breve.timers import AsyncioScheduler, Scheduler, TimerGate


# Module-level defaults (optional use)
_default_hub: Optional[EventHub] = None
_default_gate: Optional[TimerGate] = None


def get_default_hub() -> EventHub:
    """Return the process-wide EventHub, creating one if necessary."""
    global _default_hub
    if _default_hub is None:
        _default_hub = EventHub()
    return _default_hub


def get_default_gate() -> TimerGate:
    """Return the process-wide TimerGate, creating one if necessary."""
    global _default_gate
    if _default_gate is None:
        _default_gate = TimerGate()
    return _default_gate


def reset_defaults() -> None:
    """Discard the default hub and gate, cancelling any pending timers."""
    global _default_hub, _default_gate
    if _default_gate is not None:
        _default_gate.reset()
    _default_hub = None
    _default_gate = None


def subscribe(event: str, callback, scope: Any = None) -> str:
    return get_default_hub().subscribe(event, callback, scope)


def publish(event: str, args: Any = None) -> None:
    get_default_hub().publish(event, args)


def unsubscribe(event: str, token: Optional[str] = None) -> None:
    get_default_hub().unsubscribe(event, token)


def unsubscribe_all(event: Optional[str] = None) -> None:
    get_default_hub().unsubscribe_all(event)


def throttle(key: str, func, scope: Any = None, delay_ms: float = 0, args: Any = None) -> None:
    get_default_gate().throttle(key, func, scope, delay_ms, args)


def debounce(key: str, func, scope: Any = None, delay_ms: float = 0, args: Any = None) -> None:
    get_default_gate().debounce(key, func, scope, delay_ms, args)


__all__ = [
    "mixin",
    "extend",
    "make_observable",
    "uuid",
    "publish",
    "subscribe",
    "unsubscribe",
    "unsubscribe_all",
    "throttle",
    "debounce",
    "get_default_hub",
    "get_default_gate",
    "reset_defaults",
    "EventHub",
    "Observable",
    "Listener",
    "TimerGate",
    "Scheduler",
    "AsyncioScheduler",
    "FrameScheduler",
    "LoggingConsole",
    "stub_console",
    "CallMode",
    "invoke",
    "BreveConfig",
    "setup_logging",
    "BreveError",
    "ArityError",
    "ConfigError",
]
