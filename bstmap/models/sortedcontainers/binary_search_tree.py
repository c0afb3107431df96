"""
Unbalanced binary search tree implementation of an ordered map.

Each node is owned by exactly one slot: either the map's root slot or a child
slot of its parent. Nodes carry no parent pointers; mutations work on the
link (parent, side) that points at the current node and rewrite it in place.
"""

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from bstmap.interfaces.sorted_container import SortedContainer
from bstmap.models.exceptions import KeyNotFoundError

logger = logging.getLogger(__name__)


class Side(IntEnum):
    """Child slot of a node."""

    LEFT = 0
    RIGHT = 1


@dataclass
class Node:
    """Node in the binary search tree."""

    key: Any
    value: Any
    left: "Node | None" = None
    right: "Node | None" = None

    def child(self, side: Side) -> "Node | None":
        return self.left if side == Side.LEFT else self.right

    def set_child(self, side: Side, node: "Node | None") -> None:
        if side == Side.LEFT:
            self.left = node
        else:
            self.right = node


class OrderedMap(SortedContainer):
    """
    Binary search tree implementation of SortedContainer.

    Properties maintained:
    1. Every key in a node's left subtree is less than the node's key
    2. Every key in a node's right subtree is greater than the node's key
    3. The entry count equals the number of nodes reachable from the root

    No rebalancing is done, so monotonic insertion degenerates into a chain.
    Every walk is iterative so tree height never touches the recursion limit.
    """

    def __init__(self, default_factory: Callable[[], Any] | None = None) -> None:
        """
        Initialize an empty map.

        Args:
            default_factory: Builds the value inserted by access() on a miss.
                If None, the inserted value is None.
        """
        self.default_factory = default_factory
        self._root: Node | None = None
        self._size: int = 0

    def access(self, key: Any) -> Any:
        """Return the value for key, inserting the default value if absent. O(depth)"""
        return self._find_or_create(key, self._default_value).value

    def at(self, key: Any) -> Any:
        """Return the value for key without inserting. O(depth)"""
        node = self._find_node(key)
        if node is None:
            raise KeyNotFoundError(key)
        return node.value

    def insert(self, key: Any, value: Any) -> bool:
        """Insert key only if absent; never overwrites. O(depth)"""
        parent, side, node = self._locate(key)
        if node is not None:
            return False

        self._link(parent, side, Node(key=key, value=value))
        self._size += 1
        return True

    def erase(self, key: Any) -> bool:
        """Remove a key-value pair. O(depth)"""
        return self._erase_from(None, None, key)

    def clear(self) -> None:
        released = self._size
        self._release(self._root)
        self._root = None
        self._size = 0
        logger.debug("Cleared ordered map, released %d nodes", released)

    def keys(self) -> list[Any]:
        result: list[Any] = []
        self._in_order(lambda node: result.append(node.key))
        return result

    def values(self) -> list[Any]:
        result: list[Any] = []
        self._in_order(lambda node: result.append(node.value))
        return result

    def items(self) -> list[tuple[Any, Any]]:
        result: list[tuple[Any, Any]] = []
        self._in_order(lambda node: result.append((node.key, node.value)))
        return result

    def size(self) -> int:
        return self._size

    def has(self, key: Any) -> bool:
        return self._find_node(key) is not None

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for key, or default if absent. Never inserts."""
        node = self._find_node(key)
        return node.value if node else default

    def copy(self) -> "OrderedMap":
        """
        Return a structural clone of this map.

        The clone owns new nodes with the same keys, values and shape; the
        value objects themselves are shared, as with dict.copy().
        """
        clone = type(self)(self.default_factory)
        clone._root = self._clone(self._root, lambda key, value: (key, value))
        clone._size = self._size
        logger.debug("Copied ordered map with %d entries", self._size)
        return clone

    def move(self) -> "OrderedMap":
        """
        Transfer the whole tree into a new map without visiting any node.

        This map is left empty and remains usable.
        """
        moved = type(self)(self.default_factory)
        moved._root, moved._size = self._root, self._size
        self._root, self._size = None, 0
        logger.debug("Moved ordered map with %d entries", moved._size)
        return moved

    def __copy__(self) -> "OrderedMap":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "OrderedMap":
        clone = type(self)(self.default_factory)
        memo[id(self)] = clone
        clone._root = self._clone(
            self._root,
            lambda key, value: (copy.deepcopy(key, memo), copy.deepcopy(value, memo)),
        )
        clone._size = self._size
        return clone

    def __getitem__(self, key: Any) -> Any:
        return self.access(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._find_or_create(key, lambda: value).value = value

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyNotFoundError(key)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self._size == other._size and self.items() == other.items()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{body}}})"

    def _default_value(self) -> Any:
        if self.default_factory is None:
            return None
        return self.default_factory()

    def _find_node(self, key: Any) -> Node | None:
        """Find node by key."""
        current = self._root
        while current is not None:
            if key < current.key:
                current = current.left
            elif current.key < key:
                current = current.right
            else:
                return current
        return None

    def _locate(
        self, key: Any, parent: Node | None = None, side: Side | None = None
    ) -> tuple[Node | None, Side | None, Node | None]:
        """
        Descend from the slot (parent, side) looking for key.

        A parent of None means the root slot. Returns the link that holds the
        matching node, or the empty link where key would be attached, along
        with the node found there (None for an empty link).
        """
        current = self._slot(parent, side)
        while current is not None:
            if key < current.key:
                parent, side, current = current, Side.LEFT, current.left
            elif current.key < key:
                parent, side, current = current, Side.RIGHT, current.right
            else:
                break
        return parent, side, current

    def _slot(self, parent: Node | None, side: Side | None) -> Node | None:
        if parent is None:
            return self._root
        return parent.child(side)

    def _link(self, parent: Node | None, side: Side | None, node: Node | None) -> None:
        """Point the slot (parent, side) at node, replacing whatever it held."""
        if parent is None:
            self._root = node
        else:
            parent.set_child(side, node)

    def _find_or_create(self, key: Any, make_value: Callable[[], Any]) -> Node:
        parent, side, node = self._locate(key)
        if node is None:
            node = Node(key=key, value=make_value())
            self._link(parent, side, node)
            self._size += 1
        return node

    def _erase_from(self, parent: Node | None, side: Side | None, key: Any) -> bool:
        """Erase key from the subtree held by the slot (parent, side)."""
        parent, side, node = self._locate(key, parent, side)
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            node.key = successor.key
            node.value = successor.value
            # The nested erase hits a leaf or single-child case and
            # decrements the size exactly once.
            removed = self._erase_from(node, Side.RIGHT, successor.key)
            assert removed, "in-order successor must be found in the right subtree"
            return removed

        child = node.left if node.left is not None else node.right
        self._link(parent, side, child)
        node.left = node.right = None
        self._size -= 1
        return True

    def _in_order(self, visit: Callable[[Node], None]) -> None:
        """Visit every node in ascending key order."""
        stack: list[Node] = []
        current = self._root
        while stack or current is not None:
            # Push leftmost path
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            visit(node)
            current = node.right

    @staticmethod
    def _clone(
        root: Node | None, copy_entry: Callable[[Any, Any], tuple[Any, Any]]
    ) -> Node | None:
        """Clone a subtree node by node, preserving its shape."""
        if root is None:
            return None

        clone_root = Node(*copy_entry(root.key, root.value))
        stack = [(root, clone_root)]
        while stack:
            source, target = stack.pop()
            for side in Side:
                child = source.child(side)
                if child is not None:
                    twin = Node(*copy_entry(child.key, child.value))
                    target.set_child(side, twin)
                    stack.append((child, twin))
        return clone_root

    @staticmethod
    def _release(root: Node | None) -> None:
        """Unlink every node of a subtree."""
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = node.right = None
