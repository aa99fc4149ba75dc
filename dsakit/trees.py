"""Binary trees: search-tree insertion, lookup and deletion, traversals and whole-tree operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node; trees compare by identity, use ``trees_equal`` for structure."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def insert(root: Node | None, value: Any) -> Node:
    """Insert ``value`` into a search tree and return its root.

    Larger values go right; equal and smaller values go left.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value > node.value:
            if node.right is None:
                node.right = new
                break
            node = node.right
        else:
            if node.left is None:
                node.left = new
                break
            node = node.left
    return root


def search(root: Node | None, key: Any) -> Node | None:
    """Return the node of a search tree that holds ``key``, or ``None``."""
    node = root
    while node is not None:
        if node.value == key:
            return node
        node = node.left if node.value > key else node.right
    return None


def find_min(root: Node | None) -> Node | None:
    """Return the leftmost node of a tree, or ``None`` for an empty tree."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete(root: Node | None, key: Any) -> Node | None:
    """Remove ``key`` from a search tree and return the new root."""
    if root is None:
        return None
    if key < root.value:
        root.left = delete(root.left, key)
    elif key > root.value:
        root.right = delete(root.right, key)
    else:
        if root.left is None:
            return root.right
        if root.right is None:
            return root.left
        successor = find_min(root.right)
        assert successor is not None
        root.value = successor.value
        root.right = delete(root.right, successor.value)
    return root


def preorder(root: Node | None) -> Iterator[Any]:
    """Yield values in node, left, right order."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.value
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def inorder(root: Node | None) -> Iterator[Any]:
    """Yield values in left, node, right order."""
    pending: list[Node] = []
    node = root
    while pending or node is not None:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        yield node.value
        node = node.right


def postorder(root: Node | None) -> Iterator[Any]:
    """Yield values in left, right, node order."""
    pending: list[tuple[Node, bool]] = [(root, False)] if root is not None else []
    while pending:
        node, expanded = pending.pop()
        if expanded:
            yield node.value
            continue
        pending.append((node, True))
        if node.right is not None:
            pending.append((node.right, False))
        if node.left is not None:
            pending.append((node.left, False))


def copy_tree(root: Node | None) -> Node | None:
    """Return a deep copy of a tree."""
    if root is None:
        return None
    return Node(root.value, copy_tree(root.left), copy_tree(root.right))


def trees_equal(first: Node | None, second: Node | None) -> bool:
    """Tell whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and trees_equal(first.left, second.left)
        and trees_equal(first.right, second.right)
    )


def merge_trees(first: Node | None, second: Node | None) -> Node | None:
    """Overlay ``second`` onto ``first``, adding values where both have a node.

    ``first`` is modified in place; subtrees only ``second`` has are shared.
    """
    if first is None:
        return second
    if second is None:
        return first
    first.value += second.value
    first.left = merge_trees(first.left, second.left)
    first.right = merge_trees(first.right, second.right)
    return first