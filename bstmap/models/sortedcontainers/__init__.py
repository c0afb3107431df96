"""
Sorted container implementations.
"""

from bstmap.models.sortedcontainers.binary_search_tree import Node, OrderedMap

__all__ = ["Node", "OrderedMap"]
