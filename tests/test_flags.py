"""Test suite for the flag decorator."""

import pytest

from georegions.flags import flag


class TestFlag:
    """Test suite for the flag decorator."""

    scenarios = [
        pytest.param("test_flag", {"default": False}, False, id="unknown flag, return default"),
        pytest.param("test_flag", {}, None, id="unknown flag, no default"),
        pytest.param("eager_closure", {"default": "off"}, "off", id="flag off by default"),
    ]

    @pytest.mark.parametrize("flag_name, kwargs, expected", scenarios)
    def test_flag(self, flag_name, kwargs, expected):
        """Test the flag function."""

        @flag(flag_name, **kwargs)
        def test_function(arg1, arg2, kwarg1):  # pylint: disable=unused-argument
            return True

        assert test_function(1, 2, kwarg1=3) == expected

    @pytest.mark.usefixtures("eager_closure")
    def test_flag_enabled(self):
        """Test that the wrapped function runs with its arguments when the flag is enabled."""

        @flag("EAGER_CLOSURE", default=False)
        def test_function(arg1, kwarg1=None):
            return (arg1, kwarg1)

        assert test_function(1, kwarg1=2) == (1, 2)
