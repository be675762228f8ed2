"""Process-wide catalog of operations, built once at import time.

Code samples are pulled from the implementing functions with ``inspect`` so
the catalog always shows the code that actually runs.
"""

from __future__ import annotations

import inspect
import logging
import textwrap
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..constants import ALGORITHM_TYPES
from ..error_handling import AlgorithmNotFoundError, DSCatalogError, format_error_message, handle_errors
from ..structures import array_ops, linked_list, tree
from .models import Algorithm, AlgorithmType, Step

logger = logging.getLogger(__name__)

CODE_UNAVAILABLE = "# source not available"


@handle_errors("code sample extraction")
def _code_sample(*funcs: Callable) -> str:
    samples = []
    for f in funcs:
        try:
            source = inspect.getsource(f)
        except (OSError, TypeError) as e:
            # bytecode-only and frozen installs have no source files
            logger.debug("no source for %s: %s", getattr(f, "__qualname__", f), e)
            samples.append(f"{CODE_UNAVAILABLE}: {getattr(f, '__name__', f)}")
            continue
        samples.append(textwrap.dedent(source).strip())
    return "\n\n".join(samples)


def _steps(*pairs: Tuple[str, str]) -> Tuple[Step, ...]:
    return tuple(Step(title, description) for title, description in pairs)


_ENTRIES: Sequence[Algorithm] = (
    # Array
    Algorithm(
        key="array-insert",
        title="Array Insertion",
        description="Insert a new element into an array at a specific index, shifting existing elements to make space.",
        time_complexity="O(n)",
        space_complexity="O(n)",
        type="array",
        code=_code_sample(array_ops.insert_at),
        steps=_steps(
            ("Select Insert Position", "Identify the position where the new element will be inserted."),
            ("Insert Element", "Create space and insert the new element at the specified position."),
            ("Complete Operation", "The new element is now in place and the array is ready for more operations."),
        ),
    ),
    Algorithm(
        key="array-delete",
        title="Array Deletion",
        description="Remove an element from a specific index in the array, shifting remaining elements to fill the gap.",
        time_complexity="O(n)",
        space_complexity="O(n)",
        type="array",
        code=_code_sample(array_ops.delete_at),
        steps=_steps(
            ("Select Element", "Identify the element to be removed from the array."),
            ("Remove Element", "Remove the selected element and shift remaining elements."),
            ("Complete Operation", "The element has been removed and the array is reindexed."),
        ),
    ),
    Algorithm(
        key="array-search",
        title="Array Search",
        description="Search for a specific value in the array using sequential search.",
        time_complexity="O(n)",
        space_complexity="O(1)",
        type="array",
        code=_code_sample(array_ops.search),
        steps=_steps(
            ("Start Search", "Begin searching from the first element of the array."),
            ("Check Elements", "Compare each element with the target value."),
            ("Complete Search", "Element found or reached the end of the array."),
        ),
    ),
    Algorithm(
        key="array-update",
        title="Array Update",
        description="Update the value of an element at a specific index in the array.",
        time_complexity="O(1)",
        space_complexity="O(1)",
        type="array",
        code=_code_sample(array_ops.update),
        steps=_steps(
            ("Select Element", "Identify the element to be updated."),
            ("Update Value", "Replace the old value with the new value."),
            ("Complete Update", "The element has been updated successfully."),
        ),
    ),
    # Linked list
    Algorithm(
        key="linkedlist-insert",
        title="Linked List Insertion",
        description="Insert a new node into a linked list at a specific position.",
        time_complexity="O(n)",
        space_complexity="O(1)",
        type="linkedlist",
        code=_code_sample(linked_list.insert_node),
        steps=_steps(
            ("Create New Node", "Create a new node with the given value."),
            ("Find Insert Position", "Traverse the list to find the insertion point."),
            ("Update Pointers", "Update the next pointers to insert the new node."),
            ("Complete Operation", "The new node is now part of the linked list."),
        ),
    ),
    Algorithm(
        key="linkedlist-delete",
        title="Linked List Deletion",
        description="Remove a node from a linked list at a specific position.",
        time_complexity="O(n)",
        space_complexity="O(1)",
        type="linkedlist",
        code=_code_sample(linked_list.delete_node),
        steps=_steps(
            ("Find Delete Position", "Traverse to the node before the deletion point."),
            ("Update Pointers", "Update the next pointer to skip the deleted node."),
            ("Complete Operation", "The node has been removed from the linked list."),
        ),
    ),
    Algorithm(
        key="linkedlist-search",
        title="Linked List Search",
        description="Search for a value in a linked list.",
        time_complexity="O(n)",
        space_complexity="O(1)",
        type="linkedlist",
        code=_code_sample(linked_list.search_node, linked_list.iter_nodes),
        steps=_steps(
            ("Start Search", "Begin at the head of the linked list."),
            ("Traverse List", "Move through the list one node at a time."),
            ("Check Values", "Compare each node's value with the target."),
            ("Complete Search", "Return the position if found, or -1 if not found."),
        ),
    ),
    Algorithm(
        key="linkedlist-update",
        title="Linked List Update",
        description="Update the value of a node at a specific position.",
        time_complexity="O(n)",
        space_complexity="O(1)",
        type="linkedlist",
        code=_code_sample(linked_list.update_node),
        steps=_steps(
            ("Find Node", "Traverse to the node at the specified position."),
            ("Update Value", "Change the node's value to the new value."),
            ("Complete Operation", "The node's value has been updated."),
        ),
    ),
    # Tree
    Algorithm(
        key="tree-insert",
        title="Binary Tree Insertion",
        description="Insert a new node into a binary search tree while maintaining the BST property.",
        time_complexity="O(h) where h is height",
        space_complexity="O(1)",
        type="tree",
        code=_code_sample(tree.insert),
        steps=_steps(
            ("Check Empty Tree", "If tree is empty, create new root node."),
            ("Compare Values", "Compare new value with current node."),
            ("Descend", "Move into the left or right subtree until an empty slot is found."),
            ("Complete Operation", "Return the updated tree structure."),
        ),
    ),
    Algorithm(
        key="tree-delete",
        title="Binary Tree Deletion",
        description="Delete a node from a binary search tree while maintaining the BST property.",
        time_complexity="O(h) where h is height",
        space_complexity="O(1)",
        type="tree",
        code=_code_sample(tree.delete, tree._find_with_parent),
        steps=_steps(
            ("Find Node", "Locate the node to be deleted."),
            ("Handle Leaf Node", "If node has no children, simply remove it."),
            ("Handle Single Child", "If node has one child, replace with child."),
            ("Handle Two Children", "If node has two children, find inorder successor."),
            ("Complete Operation", "Return the updated tree structure."),
        ),
    ),
    Algorithm(
        key="tree-search",
        title="Binary Tree Search",
        description="Search for a value in a binary search tree.",
        time_complexity="O(h) where h is height",
        space_complexity="O(1)",
        type="tree",
        code=_code_sample(tree.search, tree._find_with_parent),
        steps=_steps(
            ("Check Root", "Check if root is empty or contains target value."),
            ("Compare Values", "Compare target with current node value."),
            ("Descend", "Continue in the left or right subtree."),
            ("Complete Search", "Return found node or None."),
        ),
    ),
    Algorithm(
        key="tree-traversal",
        title="Binary Tree Traversal",
        description="Traverse a binary tree using different methods (inorder, preorder, postorder).",
        time_complexity="O(n)",
        space_complexity="O(h) where h is height",
        type="tree",
        code=_code_sample(tree._inorder, tree._preorder, tree._postorder),
        steps=_steps(
            ("Inorder Traversal", "Visit left subtree, then root, then right subtree."),
            ("Preorder Traversal", "Visit root, then left subtree, then right subtree."),
            ("Postorder Traversal", "Visit left subtree, then right subtree, then root."),
            ("Complete Traversal", "Yield all node values in the specified order."),
        ),
    ),
)


def _build_registry(entries: Sequence[Algorithm]) -> Mapping[str, Algorithm]:
    registry: Dict[str, Algorithm] = {}
    for entry in entries:
        if entry.key in registry:
            raise DSCatalogError(f"Duplicate catalog key: {entry.key}")
        if entry.type not in ALGORITHM_TYPES:
            raise DSCatalogError(f"Unknown algorithm type for {entry.key}: {entry.type}")
        registry[entry.key] = entry
    return MappingProxyType(registry)


CATALOG: Mapping[str, Algorithm] = _build_registry(_ENTRIES)


def get_algorithm(key: str) -> Algorithm:
    try:
        return CATALOG[key]
    except KeyError:
        raise AlgorithmNotFoundError(
            format_error_message("ALGORITHM_NOT_FOUND", key=key, available=", ".join(CATALOG)),
            details={"key": key},
        ) from None


def list_algorithms(type: Optional[AlgorithmType] = None) -> List[Algorithm]:
    """Catalog entries in registration order, optionally filtered by type."""
    return [a for a in CATALOG.values() if type is None or a.type == type]


def algorithm_types() -> List[str]:
    return [t for t in ALGORITHM_TYPES if any(a.type == t for a in CATALOG.values())]
