"""
Composition helpers: mixins, class extension and observables.
"""

import logging
from typing import Any, Optional

from .errors import ArityError
from .events import EventHub, TokenFactory

logger = logging.getLogger(__name__)


OBSERVABLE_METHODS = ('publish', 'subscribe', 'unsubscribe', 'unsubscribe_all')


def mixin(*args: Any) -> None:
    """
    Copy named attributes from a source onto a target.

    Usage: ``mixin(target, source, 'name', ...)``. At least one name is
    required.
    """
    if len(args) < 3:
        raise ArityError('mixin', 'a target, a source and at least one method name', len(args))

    target, source, *method_names = args
    for name in method_names:
        setattr(target, name, getattr(source, name))


def extend(*classes: type) -> type:
    """
    Derive a class from ``parent``.

    ``extend(parent)`` synthesizes an empty subclass; ``extend(child, parent)``
    returns ``child`` re-derived from ``parent``. Either way the returned
    class has a ``superclass`` attribute pointing at ``parent``.
    """
    if not classes or len(classes) > 2:
        raise ArityError('extend', 'a parent class and an optional child class', len(classes))

    if len(classes) == 1:
        parent = classes[0]
        name = f"{parent.__name__}Child"
        bases = (parent,)
        namespace = {'__module__': parent.__module__}
    else:
        child, parent = classes
        name = child.__name__
        bases = (child, parent)
        namespace = {
            '__module__': child.__module__,
            '__qualname__': child.__qualname__,
            '__doc__': child.__doc__,
        }

    namespace['superclass'] = parent
    return type(name, bases, namespace)


class Observable:
    """
    Mixin giving every instance its own event hub.

    The hub is created on first use and owned by the instance, so the
    instance is the default scope of its callbacks.
    """

    _event_hub_token_factory: Optional[TokenFactory] = None

    @property
    def event_hub(self) -> EventHub:
        hub = vars(self).get('_event_hub')
        if hub is None:
            hub = EventHub(owner=self, token_factory=self._event_hub_token_factory)
            vars(self)['_event_hub'] = hub
        return hub

    @property
    def listeners(self):
        return self.event_hub.listeners

    def publish(self, event: str, args: Any = None) -> None:
        self.event_hub.publish(event, args)

    def subscribe(self, event: str, callback, scope: Any = None) -> str:
        return self.event_hub.subscribe(event, callback, scope)

    def unsubscribe(self, event: str, token: Optional[str] = None) -> None:
        self.event_hub.unsubscribe(event, token)

    def unsubscribe_all(self, event: Optional[str] = None) -> None:
        self.event_hub.unsubscribe_all(event)


def make_observable(target: Any, token_factory: Optional[TokenFactory] = None) -> Any:
    """
    Give ``target`` an event hub and mix in the hub's methods.

    A class gets the ``Observable`` methods, so each of its instances owns a
    separate hub. Any other object gets a hub of its own right away.
    """
    if isinstance(target, type):
        mixin(target, Observable, 'event_hub', 'listeners', *OBSERVABLE_METHODS)
        target._event_hub_token_factory = staticmethod(token_factory) if token_factory else None
        logger.debug(f"Made class {target.__name__} observable")
        return target

    hub = EventHub(owner=target, token_factory=token_factory)
    target.event_hub = hub
    mixin(target, hub, *OBSERVABLE_METHODS)
    logger.debug(f"Made {type(target).__name__} observable")
    return target
