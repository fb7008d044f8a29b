"""Opaque token generation"""

import uuid as _uuid


def uuid(*args) -> str:
    """
    Return a random 36 character hyphenated token.

    Positional arguments are accepted and ignored so call sites can label
    what the token is for, e.g. ``uuid('event')``.
    """
    return str(_uuid.uuid4())
