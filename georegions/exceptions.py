"""Module for custom exceptions used in the package."""

__all__ = [
    "RegionError",
    "InvalidCodeError",
]


class RegionError(Exception):
    """The RegionError class is the base exception for region errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

    def __str__(self):
        """Return the message."""
        return self.message


class InvalidCodeError(RegionError, TypeError):
    """A value could not be interpreted as a region or country code."""
