"""
Custom exceptions for the ordered map.
"""

from typing import Any


class OrderedMapError(Exception):
    """Base class for ordered map errors."""


class KeyNotFoundError(OrderedMapError, KeyError):
    """
    Raised by checked access when the requested key is not stored.

    Subclasses KeyError so callers can handle it like any mapping miss.
    """

    def __init__(self, key: Any):
        """
        Initialize the error.

        Args:
            key: The key that was looked up.
        """
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"key not found: {self.key!r}"
