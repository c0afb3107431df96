"""
Structural checks shared by the ordered map tests.
"""


def collect_nodes(tree):
    """Return every node reachable from the root, in no particular order."""
    nodes = []
    stack = [tree._root] if tree._root is not None else []
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return nodes


def assert_bst(tree):
    """Check ordering and size consistency of a tree."""
    nodes = collect_nodes(tree)
    assert tree.size() == len(nodes)

    keys = tree.keys()
    assert len(keys) == tree.size()
    assert all(a < b for a, b in zip(keys, keys[1:]))

    # Every node strictly separates its subtrees
    for node in nodes:
        left_stack = [node.left] if node.left else []
        while left_stack:
            child = left_stack.pop()
            assert child.key < node.key
            left_stack.extend(c for c in (child.left, child.right) if c)
        right_stack = [node.right] if node.right else []
        while right_stack:
            child = right_stack.pop()
            assert node.key < child.key
            right_stack.extend(c for c in (child.left, child.right) if c)
