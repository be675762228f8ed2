"""Demo command implementations for ds-catalog CLI.

Each demo runs a fixed sequence of operations on the values configured under
``demo.<structure>`` and prints the structure after every step.
"""

from __future__ import annotations

import logging
from typing import List

import typer
from rich import print

from ..config_loader import get_default_traversal_order, get_demo_values
from ..constants import ALGORITHM_TYPES, NOT_FOUND
from ..error_handling import DSCatalogError, format_error_message
from ..structures import array_ops, linked_list, tree
from ..utils.logging import format_values, log_panel, log_state
from .shared import load_cli_config

logger = logging.getLogger(__name__)


def _describe_search(result: int) -> str:
    return "not found" if result == NOT_FOUND else str(result)


def run_array_demo(values: List[int]) -> List[int]:
    arr = list(values)
    log_state("Original array", format_values(arr))

    arr = array_ops.insert_at(arr, 2, 35)
    log_state("After insertion (index 2, 35)", format_values(arr))

    arr = array_ops.delete_at(arr, 3)
    log_state("After deletion (index 3)", format_values(arr))

    log_state("Search result for 35", _describe_search(array_ops.search(arr, 35)))

    updated = array_ops.update(arr, 2, 45)
    log_state(f"After update (index 2, 45, ok={updated})", format_values(arr))
    return arr


def run_linkedlist_demo(values: List[int]) -> List[int]:
    head = linked_list.from_values(values)
    log_state("Original list", linked_list.format_list(head))

    head = linked_list.insert_node(head, 25, 2)
    log_state("After insertion (position 2, 25)", linked_list.format_list(head))

    head = linked_list.delete_node(head, 3)
    log_state("After deletion (position 3)", linked_list.format_list(head))

    log_state("Search result for 25", _describe_search(linked_list.search_node(head, 25)))

    updated = linked_list.update_node(head, 2, 35)
    log_state(f"After update (position 2, 35, ok={updated})", linked_list.format_list(head))
    return linked_list.to_values(head)


def run_tree_demo(values: List[int], default_order: str = "inorder") -> List[int]:
    root = tree.from_values(values)
    log_state("Inserted", format_values(values))
    log_state(f"Traversal ({default_order})", format_values(list(tree.traversal(root, default_order))))
    for order in tree.TraversalOrder:
        if order.value != default_order:
            log_state(f"Traversal ({order.value})", format_values(list(tree.traversal(root, order))))

    found = tree.search(root, 40)
    log_state("Search result for 40", "not found" if found is None else f"node {found.value}")

    root = tree.delete(root, 30)
    result = tree.inorder(root)
    log_state("After deleting 30 (inorder)", format_values(result))
    return result


def demo_run(
    structure: str = typer.Option("all", "--structure", "-s", help="Which demo to run: all, array, linkedlist or tree"),
) -> None:
    """Run the demonstration scenarios and print each intermediate state."""
    if structure != "all" and structure not in ALGORITHM_TYPES:
        print(f"[red]{format_error_message('INVALID_STRUCTURE', structures=', '.join(['all'] + ALGORITHM_TYPES))}[/red]")
        raise typer.Exit(code=1)

    structures = ALGORITHM_TYPES if structure == "all" else [structure]
    try:
        config = load_cli_config()
        for name in structures:
            values = get_demo_values(config, name)
            log_panel("Demo", f"{name} operations")
            logger.info("running %s demo on %s", name, values)
            if name == "array":
                run_array_demo(values)
            elif name == "linkedlist":
                run_linkedlist_demo(values)
            else:
                run_tree_demo(values, get_default_traversal_order(config))
    except DSCatalogError as e:
        print(f"[red]Demo failed:[/red] {e}")
        raise typer.Exit(code=1)
