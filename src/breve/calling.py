"""
Callback invocation with an optional scope.

Callbacks always receive a single argument value. A callback that declares
two required positional parameters also receives the scope as its first
argument; one that declares no positional parameters is called bare.
"""

import inspect
from enum import Enum
from typing import Any, Callable, Optional


class CallMode(str, Enum):
    """How a callback is invoked"""
    BARE = "bare"          # callback()
    ARGS = "args"          # callback(args)
    SCOPED = "scoped"      # callback(scope, args)


_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def call_mode(func: Callable[..., Any]) -> CallMode:
    """Work out how ``func`` wants to be called from its signature"""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures
        return CallMode.ARGS

    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    var_positional = any(
        p.kind is inspect.Parameter.VAR_POSITIONAL for p in signature.parameters.values()
    )

    if len(required) >= 2:
        return CallMode.SCOPED
    if not positional and not var_positional:
        return CallMode.BARE
    return CallMode.ARGS


def invoke(func: Callable[..., Any], scope: Any, args: Any, mode: Optional[CallMode] = None) -> Any:
    """Call ``func`` with ``args`` as a single value, binding ``scope`` when asked for"""
    if mode is None:
        mode = call_mode(func)
    if mode is CallMode.SCOPED:
        return func(scope, args)
    if mode is CallMode.BARE:
        return func()
    return func(args)
