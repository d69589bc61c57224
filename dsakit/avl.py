"""A self-balancing AVL binary search tree built from linked nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; a new node is a leaf of height 1."""

    key: Any
    left: Optional["AVLNode"] = field(default=None, repr=False)
    right: Optional["AVLNode"] = field(default=None, repr=False)
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Return the height of ``node``, 0 for an empty tree."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Return left height minus right height, 0 for an empty tree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def left_rotate(x: AVLNode) -> AVLNode:
    """Rotate ``x`` down to the left and return the new subtree root."""
    y = x.right
    if y is None:
        raise ValueError("left rotation needs a right child")
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def right_rotate(y: AVLNode) -> AVLNode:
    """Rotate ``y`` down to the right and return the new subtree root."""
    x = y.left
    if x is None:
        raise ValueError("right rotation needs a left child")
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def insert(node: Optional[AVLNode], key: Any) -> AVLNode:
    """Insert ``key`` into the tree rooted at ``node`` and return the new root.

    Keys already present are ignored.
    """
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = insert(node.left, key)
    elif key > node.key:
        node.right = insert(node.right, key)

    _update_height(node)
    bf = balance_factor(node)

    if bf > 1 and key < node.left.key:
        return right_rotate(node)
    if bf < -1 and key > node.right.key:
        return left_rotate(node)
    if bf > 1 and key > node.left.key:
        node.left = left_rotate(node.left)
        return right_rotate(node)
    if bf < -1 and key < node.right.key:
        node.right = right_rotate(node.right)
        return left_rotate(node)
    return node


def _pre_order(root: Optional[AVLNode]) -> Iterator[Any]:
    if root is not None:
        yield root.key
        yield from _pre_order(root.left)
        yield from _pre_order(root.right)


def _in_order(root: Optional[AVLNode]) -> Iterator[Any]:
    if root is not None:
        yield from _in_order(root.left)
        yield root.key
        yield from _in_order(root.right)


def pre_order(root: Optional[AVLNode]) -> List[Any]:
    """Return the keys in root, left, right order."""
    return list(_pre_order(root))


def in_order(root: Optional[AVLNode]) -> List[Any]:
    """Return the keys in ascending order."""
    return list(_in_order(root))