from . import array_ops, linked_list, tree
from .linked_list import ListNode
from .tree import TreeNode, Traversal, TraversalOrder

__all__ = [
    "array_ops",
    "linked_list",
    "tree",
    "ListNode",
    "TreeNode",
    "Traversal",
    "TraversalOrder",
]
