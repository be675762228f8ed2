"""Unbalanced binary search tree operations.

Every mutator takes a subtree root and returns the root to keep using; the
caller re-attaches it, so nodes need no parent links. Values are unique:
inserting a value that is already present does nothing.

All walks use explicit loops or stacks, so a fully skewed tree (a sorted
insert sequence) of any size stays within Python's recursion limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from ..constants import TRAVERSAL_ORDERS
from ..error_handling import format_error_message

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class TreeNode:
    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class TraversalOrder(str, Enum):
    INORDER = "inorder"      # left, node, right
    PREORDER = "preorder"    # node, left, right
    POSTORDER = "postorder"  # left, right, node


def insert(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """
    Insert ``value`` keeping the BST property and return the root.
    An empty tree becomes a single node; a duplicate is dropped.
    Time: O(h) where h is height
    """
    if root is None:
        return TreeNode(value)

    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = TreeNode(value)
                break
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = TreeNode(value)
                break
            current = current.right
        else:
            logger.debug("insert skipped: %d already present", value)
            break
    return root


def delete(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """
    Remove ``value`` keeping the BST property and return the root.

    A node with at most one child is replaced by that child. A node with two
    children takes the value of its in-order successor (the minimum of its
    right subtree), and the successor is removed from the right subtree
    instead. A missing value leaves the tree untouched.
    Time: O(h) where h is height
    """
    parent, node = _find_with_parent(root, value)
    if node is None:
        logger.debug("delete skipped: %d not in tree", value)
        return root

    if node.left is not None and node.right is not None:
        # Two children: pull up the in-order successor
        successor_parent, successor = node, node.right
        while successor.left is not None:
            successor_parent, successor = successor, successor.left
        node.value = successor.value
        # The successor has no left child, so its right child takes its place
        if successor_parent is node:
            node.right = successor.right
        else:
            successor_parent.left = successor.right
        return root

    replacement = node.right if node.left is None else node.left
    if parent is None:
        return replacement
    if parent.left is node:
        parent.left = replacement
    else:
        parent.right = replacement
    return root


def search(root: Optional[TreeNode], value: int) -> Optional[TreeNode]:
    """
    Return the subtree rooted at ``value``, or None when it is absent.
    Time: O(h) where h is height
    """
    return _find_with_parent(root, value)[1]


def min_value(node: TreeNode) -> int:
    """Smallest value in the subtree, found by following left links."""
    while node.left is not None:
        node = node.left
    return node.value


def _find_with_parent(
    root: Optional[TreeNode], value: int
) -> Tuple[Optional[TreeNode], Optional[TreeNode]]:
    parent: Optional[TreeNode] = None
    current = root
    while current is not None and current.value != value:
        parent = current
        current = current.left if value < current.value else current.right
    return parent, current


class Traversal:
    """Values of a tree in a fixed order.

    Iteration is lazy and can be restarted: every ``iter()`` walks the tree
    again from the root. The tree should not be mutated mid-iteration.
    """

    def __init__(self, root: Optional[TreeNode], order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> None:
        self.root = root
        self.order = _coerce_order(order)

    def __iter__(self) -> Iterator[int]:
        if self.order is TraversalOrder.INORDER:
            return _inorder(self.root)
        if self.order is TraversalOrder.PREORDER:
            return _preorder(self.root)
        return _postorder(self.root)

    def __repr__(self) -> str:
        return f"Traversal(order={self.order.value!r})"


def traversal(root: Optional[TreeNode], order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> Traversal:
    """Lazy traversal of the tree in ``order``."""
    return Traversal(root, order)


def _coerce_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    try:
        return TraversalOrder(order)
    except ValueError:
        raise ValueError(
            format_error_message("INVALID_TRAVERSAL_ORDER", orders=", ".join(TRAVERSAL_ORDERS))
        ) from None


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: List[TreeNode] = []
    current = root
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        yield current.value
        current = current.right


def _preorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.value
        # Right is pushed first so the left subtree comes out first
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _postorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: List[TreeNode] = []
    last_visited: Optional[TreeNode] = None
    current = root
    while stack or current is not None:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        peek = stack[-1]
        if peek.right is not None and last_visited is not peek.right:
            current = peek.right
        else:
            yield peek.value
            last_visited = stack.pop()


def inorder(root: Optional[TreeNode]) -> List[int]:
    return list(Traversal(root, TraversalOrder.INORDER))


def preorder(root: Optional[TreeNode]) -> List[int]:
    return list(Traversal(root, TraversalOrder.PREORDER))


def postorder(root: Optional[TreeNode]) -> List[int]:
    return list(Traversal(root, TraversalOrder.POSTORDER))


def from_values(values: Iterable[int]) -> Optional[TreeNode]:
    """Build a tree by inserting ``values`` in order."""
    root: Optional[TreeNode] = None
    for value in values:
        root = insert(root, value)
    return root
