"""
Breve Exceptions

Custom exception classes raised by the library.
"""

from typing import Optional


class BreveError(Exception):
    """Base exception for breve errors"""
    pass


class ArityError(BreveError, TypeError):
    """Raised when a helper is called with the wrong number of arguments"""
    def __init__(self, function: str, expected: str, received: int):
        self.function = function
        self.expected = expected
        self.received = received
        super().__init__(f"{function}() expects {expected}, got {received}")


class ConfigError(BreveError, ValueError):
    """Raised when configuration cannot be loaded or is invalid"""
    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)
