"""Pytest fixtures and plugins."""

import functools

import pytest

from georegions.settings.base import settings

# region cache_call
# Cache the call to the function or method.

# This provides a way to assert that a function or method was called with the correct arguments
# without using a mock or a spy.

# This is useful when you are patching a function and replacing it with a wrapped version.

# The cache is GLOBAL and will persist between test cases, use `clear_calls` to reset it.

# Usage:
# ```python
# @cache_call
# def my_function():
#     pass

# my_function()
# assert_called(my_function)
# ```

CACHE = {}


def cache_call(func):
    """Cache the call to the function or method.

    Usage:
    ```python
    @cache_call
    def my_function():
        pass

    my_function()
    assert my_function in CACHE
    ```

    """

    @functools.wraps(func)
    def wrapped(*args, **kwargs):

        if func.__qualname__ not in CACHE:
            CACHE[func.__qualname__] = []

        CACHE[func.__qualname__].append((args, kwargs))

        return func(*args, **kwargs)

    return wrapped


def clear_calls(func):
    """Forget the recorded calls of the function or method."""
    CACHE.pop(func.__qualname__, None)


def assert_called(func):
    """Assert that the function or method was called."""
    assert func.__qualname__ in CACHE


def assert_not_called(func):
    """Assert that the function or method was never called."""
    assert func.__qualname__ not in CACHE


def assert_called_n_times(func, n):
    """Assert that a function has been called exactly n times.

    Args:
    ----
        func (callable): The function to check.
        n (int): The expected number of times the function should have been called.

    Raises:
    ------
        AssertionError: If the function has not been called exactly n times.

    """
    assert len(CACHE.get(func.__qualname__, [])) == n


# endregion


@pytest.fixture
def eager_closure(monkeypatch):
    """Enable the eager closure feature flag for the duration of a test."""
    monkeypatch.setattr(settings.feature, "eager_closure", True)
    yield
