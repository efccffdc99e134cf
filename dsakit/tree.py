"""Binary tree nodes and depth-first traversals."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node holding ``data`` and optional children."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in left, node, right order."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def preorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in node, left, right order."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[int]:
    """Yield values in left, right, node order."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data