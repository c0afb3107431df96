"""
Abstract base classes for the ordered map.
"""

from bstmap.interfaces.sorted_container import SortedContainer

__all__ = ["SortedContainer"]
