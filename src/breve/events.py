"""
Publish/subscribe event hub

Provides a per-object registry of named events. Subscriptions are identified
by opaque tokens and listeners are called synchronously, most recently
subscribed first.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .calling import CallMode, call_mode, invoke
from .ids import uuid

logger = logging.getLogger(__name__)


EventCallback = Callable[..., Any]
TokenFactory = Callable[..., str]


@dataclass
class Listener:
    """A single subscription to an event"""
    callback: EventCallback
    scope: Any
    token: str
    mode: CallMode = field(init=False)

    def __post_init__(self):
        self.mode = call_mode(self.callback)


class EventHub:
    """
    Publish/subscribe registry owned by a single object.

    Features:
    - Named events with ordered listener lists
    - Token based unsubscription
    - Scoped callback invocation (the owner is the default scope)
    - Lazily created registry, discarded by ``unsubscribe_all()``

    Callback exceptions are not caught: they propagate to the publisher and
    stop the remaining listeners of that publish call.
    """

    def __init__(self, owner: Any = None, token_factory: Optional[TokenFactory] = None):
        self.owner = self if owner is None else owner
        self.token_factory = token_factory or uuid
        self.listeners: Optional[Dict[str, List[Listener]]] = None

    def _registry(self) -> Dict[str, List[Listener]]:
        if self.listeners is None:
            self.listeners = {}
        return self.listeners

    def subscribe(self, event: str, callback: EventCallback, scope: Any = None) -> str:
        """
        Subscribe to an event

        Args:
            event: Event name
            callback: Called with the published value on every publish
            scope: Object bound to callbacks that ask for a scope

        Returns:
            Token that can be passed to ``unsubscribe``
        """
        token = self.token_factory('event')
        listeners = self._registry().setdefault(event, [])
        listeners.append(Listener(callback=callback, token=token, scope=scope))
        logger.debug(f"Subscribed to '{event}' ({token}), {len(listeners)} listeners")
        return token

    def publish(self, event: str, args: Any = None) -> None:
        """
        Publish an event

        Every listener is called with ``args`` as a single value, last
        subscribed first.
        """
        callbacks = self._registry().get(event)
        if not callbacks:
            return

        snapshot = list(reversed(callbacks))
        logger.debug(f"Publishing '{event}' to {len(snapshot)} listeners")
        for listener in snapshot:
            scope = listener.scope if listener.scope is not None else self.owner
            invoke(listener.callback, scope, args, listener.mode)

    def unsubscribe(self, event: str, token: Optional[str] = None) -> None:
        """
        Remove a single subscription. Without a token every listener of
        ``event`` is removed.
        """
        registry = self._registry()
        listeners = registry.setdefault(event, [])

        if not token:
            registry[event] = []
            logger.debug(f"Unsubscribed every listener from '{event}'")
            return

        for index in range(len(listeners) - 1, -1, -1):
            if listeners[index].token == token:
                del listeners[index]
                logger.debug(f"Unsubscribed {token} from '{event}'")
                return

    def unsubscribe_all(self, event: Optional[str] = None) -> None:
        """Unsubscribe every listener of ``event``, or of every event"""
        if event:
            self._registry()[event] = []
        else:
            self.listeners = None
        logger.debug(f"Unsubscribed all listeners from {repr(event) if event else 'every event'}")

    def listener_count(self, event: Optional[str] = None) -> int:
        """Number of listeners for ``event``, or across every event"""
        if not self.listeners:
            return 0
        if event is not None:
            return len(self.listeners.get(event, []))
        return sum(len(listeners) for listeners in self.listeners.values())
