"""Feature flags module."""

import functools
from typing import Any, Callable

from georegions.settings.base import settings


def flag(name: str, default: Any = None) -> Callable:
    """Feature flag decorator.

    Feature flags are the boolean attributes of `settings.feature`. The wrapped function only runs
    when the named flag is enabled, otherwise `default` is returned.

    Args:
        name: The name of the feature flag.
        default: The value to return if the feature flag is disabled.

    Returns:
        function: The wrapped function.

    Example:
        @flag("eager_closure")
        def warm(region):
            region.children

    """

    def wrapper(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapped(*args, **kwargs):
            if settings.feature.model_dump().get(name.lower(), False):
                return func(*args, **kwargs)
            return default

        return wrapped

    return wrapper
