"""
SortedContainer abstract base class for sorted key-value data structures.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class SortedContainer(ABC):
    """
    Abstract base class for sorted key-value containers.

    Keys must be totally ordered under ``<``. Enumeration is always
    materialized: keys() and values() return fresh lists in ascending key
    order.

    Implementations:
    - OrderedMap: unbalanced binary search tree
    """

    @abstractmethod
    def access(self, key: Any) -> Any:
        """
        Return the value for a key, inserting a default value if absent.

        Args:
            key: The key to look up or create.

        Returns:
            The stored value (the new default value on a miss).

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def at(self, key: Any) -> Any:
        """
        Return the value for a key without inserting.

        Args:
            key: The key to look up.

        Returns:
            The stored value.

        Raises:
            KeyNotFoundError: If the key is not stored.

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def insert(self, key: Any, value: Any) -> bool:
        """
        Insert a key-value pair only if the key is absent.

        Args:
            key: The key to insert.
            value: The value to associate with the key.

        Returns:
            True if inserted, False if the key already existed (the existing
            value is left unchanged).

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def erase(self, key: Any) -> bool:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.

        Time complexity: O(depth)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def keys(self) -> list[Any]:
        """
        Return all keys in ascending order.

        Returns:
            A new list, rebuilt from the current contents on every call.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def values(self) -> list[Any]:
        """
        Return all values, index-aligned with keys() at call time.

        Returns:
            A new list, rebuilt from the current contents on every call.

        Time complexity: O(N)
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())
