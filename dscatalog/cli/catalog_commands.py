"""Catalog command implementations for ds-catalog CLI."""

from __future__ import annotations

from typing import Optional

import typer
from rich import print

from ..catalog import algorithm_types, get_algorithm, list_algorithms
from ..config_loader import get_display_setting, load_config
from ..constants import ALGORITHM_TYPES
from ..error_handling import DSCatalogError, format_error_message
from ..utils.logging import render_algorithm, render_catalog_table


def catalog_list(
    type: Optional[str] = typer.Option(None, "--type", "-t", help="Only show one structure: array, linkedlist or tree"),
) -> None:
    """List the operations in the catalog."""
    if type is not None and type not in ALGORITHM_TYPES:
        print(f"[red]{format_error_message('INVALID_STRUCTURE', structures=', '.join(ALGORITHM_TYPES))}[/red]")
        raise typer.Exit(code=1)

    types = [type] if type else algorithm_types()
    for t in types:
        render_catalog_table(list_algorithms(t), title=f"{t} operations")


def catalog_show(
    key: str = typer.Argument(..., help="Catalog key, e.g. tree-delete"),
    code: Optional[bool] = typer.Option(None, "--code/--no-code", help="Show the code sample (default from config)"),
    steps: Optional[bool] = typer.Option(None, "--steps/--no-steps", help="Show the step narration (default from config)"),
) -> None:
    """Show one operation: description, complexity, code and steps."""
    try:
        algorithm = get_algorithm(key)
    except DSCatalogError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    show_code, show_steps, theme = True, True, "monokai"
    try:
        config = load_config()
        show_code = bool(get_display_setting(config, "show_code", True))
        show_steps = bool(get_display_setting(config, "show_steps", True))
        theme = str(get_display_setting(config, "code_theme", "monokai"))
    except FileNotFoundError:
        pass  # built-in display defaults
    except DSCatalogError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    render_algorithm(
        algorithm,
        show_code=show_code if code is None else code,
        show_steps=show_steps if steps is None else steps,
        code_theme=theme,
    )
