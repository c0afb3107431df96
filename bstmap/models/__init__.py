"""
Data models for the ordered map.
"""

from bstmap.models.exceptions import KeyNotFoundError, OrderedMapError
from bstmap.models.sortedcontainers import Node, OrderedMap

__all__ = [
    "KeyNotFoundError",
    "OrderedMapError",
    "Node",
    "OrderedMap",
]
