"""Linked binary trees, their traversals and binary-search-tree operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


class DuplicateKeyError(Exception):
    """Raised when inserting a key that is already in the search tree."""


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``data`` and links to two children."""

    data: Any
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def _in_order(root: Optional[TreeNode]) -> Iterator[Any]:
    if root is not None:
        yield from _in_order(root.left)
        yield root.data
        yield from _in_order(root.right)


def _pre_order(root: Optional[TreeNode]) -> Iterator[Any]:
    if root is not None:
        yield root.data
        yield from _pre_order(root.left)
        yield from _pre_order(root.right)


def _post_order(root: Optional[TreeNode]) -> Iterator[Any]:
    if root is not None:
        yield from _post_order(root.left)
        yield from _post_order(root.right)
        yield root.data


def in_order(root: Optional[TreeNode]) -> List[Any]:
    """Return the data in left, root, right order."""
    return list(_in_order(root))


def pre_order(root: Optional[TreeNode]) -> List[Any]:
    """Return the data in root, left, right order."""
    return list(_pre_order(root))


def post_order(root: Optional[TreeNode]) -> List[Any]:
    """Return the data in left, right, root order."""
    return list(_post_order(root))


def is_bst(root: Optional[TreeNode]) -> bool:
    """Return True when the in-order traversal is strictly increasing."""
    previous: Any = None
    first = True
    for value in _in_order(root):
        if not first and value <= previous:
            return False
        previous = value
        first = False
    return True


def search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Recursively find the node holding ``key``; return None if absent."""
    if root is None:
        return None
    if root.data == key:
        return root
    if root.data < key:
        return search(root.right, key)
    return search(root.left, key)


def iterative_search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Find the node holding ``key`` without recursion; return None if absent."""
    node = root
    while node is not None:
        if key == node.data:
            return node
        node = node.right if key > node.data else node.left
    return None


def insert(root: Optional[TreeNode], key: Any) -> TreeNode:
    """Insert ``key`` as a new leaf and return the root of the tree."""
    new = TreeNode(key)
    if root is None:
        return new
    node = root
    while True:
        if key == node.data:
            raise DuplicateKeyError(f"cannot insert {key!r}, already in BST")
        if key > node.data:
            if node.right is None:
                node.right = new
                return root
            node = node.right
        else:
            if node.left is None:
                node.left = new
                return root
            node = node.left


def in_order_predecessor(root: TreeNode) -> TreeNode:
    """Return the rightmost node of ``root``'s left subtree."""
    node = root.left
    if node is None:
        raise ValueError("node has no left subtree")
    while node.right is not None:
        node = node.right
    return node


def delete(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Remove ``value`` from the search tree and return the new root.

    A node with a left subtree takes its in-order predecessor's data; a value
    that is not present leaves the tree unchanged.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    elif root.left is None:
        return root.right
    else:
        predecessor = in_order_predecessor(root)
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root