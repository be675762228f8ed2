"""Singly linked list operations.

The caller owns the head reference. Every mutator takes the current head and
returns the head to keep using, since inserting at position 0 or deleting the
first node changes which node comes first. Invalid positions never raise:
the list comes back unchanged, or update reports False.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

from ..constants import NOT_FOUND

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class ListNode:
    value: int
    next: Optional["ListNode"] = None


def insert_node(head: Optional[ListNode], value: int, position: int) -> Optional[ListNode]:
    """Insert a new node holding ``value`` at ``position``.

    Returns the new head. When ``position`` lies past the end of the list
    the list is returned as it was, so a returned ``head`` alone does not
    tell the caller whether the insert happened.
    """
    # Insert at beginning
    if position == 0:
        return ListNode(value, head)
    if position < 0:
        logger.debug("insert_node skipped: negative position %d", position)
        return head

    # Traverse to the node before the insertion point
    current = head
    for _ in range(position - 1):
        if current is None:
            break
        current = current.next

    if current is None:
        logger.debug("insert_node skipped: position %d past end of list", position)
        return head

    current.next = ListNode(value, current.next)
    return head


def delete_node(head: Optional[ListNode], position: int) -> Optional[ListNode]:
    """Unlink the node at ``position`` and return the new head."""
    if head is None:
        return None

    # Delete first node
    if position == 0:
        return head.next
    if position < 0:
        logger.debug("delete_node skipped: negative position %d", position)
        return head

    # Traverse to node before deletion point, stopping at the last node
    current = head
    for _ in range(position - 1):
        if current.next is None:
            break
        current = current.next

    if current.next is not None:
        current.next = current.next.next
    else:
        logger.debug("delete_node skipped: position %d past end of list", position)

    return head


def search_node(head: Optional[ListNode], value: int) -> int:
    """Return the position of the first node holding ``value``, or NOT_FOUND."""
    for position, node in enumerate(iter_nodes(head)):
        if node.value == value:
            return position
    return NOT_FOUND


def update_node(head: Optional[ListNode], position: int, new_value: int) -> bool:
    """Overwrite the value of the node at ``position``.

    Returns True if the node exists, False otherwise.
    """
    if position < 0:
        return False

    current = head
    for _ in range(position):
        if current is None:
            break
        current = current.next

    if current is None:
        logger.debug("update_node skipped: no node at position %d", position)
        return False

    current.value = new_value
    return True


def iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    current = head
    while current is not None:
        yield current
        current = current.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order and return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> List[int]:
    return [node.value for node in iter_nodes(head)]


def format_list(head: Optional[ListNode]) -> str:
    """Render as ``10 -> 20 -> null``."""
    return " -> ".join([str(v) for v in to_values(head)] + ["null"])
