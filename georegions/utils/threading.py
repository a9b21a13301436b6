"""Utilities for threading."""

import threading
from functools import wraps

_closure_lock = threading.RLock()


def with_lock(func):
    """Wrap a function with the package-wide re-entrant lock.

    The lock is re-entrant so that locked functions may call each other.
    """

    @wraps(func)
    def wrapped(*args, **kwargs):
        with _closure_lock:
            return func(*args, **kwargs)

    return wrapped
