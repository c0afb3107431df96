"""
Ordered map backed by an unbalanced binary search tree.

This package provides a sorted key-value container with:
- access(key) / map[key] - get-or-insert, O(depth)
- at(key) - checked lookup, raises KeyNotFoundError on a miss
- insert(key, value) - insert-if-absent, never overwrites
- erase(key) - removal with in-order successor replacement
- keys() / values() - ascending snapshots rebuilt on every call
"""

from bstmap.models.exceptions import KeyNotFoundError, OrderedMapError
from bstmap.models.sortedcontainers import OrderedMap

__all__ = ["KeyNotFoundError", "OrderedMap", "OrderedMapError"]
