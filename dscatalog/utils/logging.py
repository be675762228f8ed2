from __future__ import annotations

from typing import Iterable, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ..catalog.models import Algorithm


console = Console()


def log_panel(title: str, body: str) -> None:
    console.print(Panel.fit(body, title=title))


def log_state(label: str, state: str) -> None:
    """One line of demo output: ``label: state``."""
    console.print(f"[bold blue]{label}:[/bold blue] {state}", highlight=False)


def render_catalog_table(algorithms: Iterable[Algorithm], title: str = "Catalog") -> None:
    table = Table(title=title, expand=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Time")
    table.add_column("Space")
    for algorithm in algorithms:
        table.add_row(algorithm.key, algorithm.title, algorithm.time_complexity, algorithm.space_complexity)
    console.print(table)


def render_algorithm(
    algorithm: Algorithm,
    *,
    show_code: bool = True,
    show_steps: bool = True,
    code_theme: str = "monokai",
) -> None:
    """Print one catalog entry: header, complexity, code and steps."""
    header = (
        f"{algorithm.description}\n\n"
        f"Time Complexity: {algorithm.time_complexity}\n"
        f"Space Complexity: {algorithm.space_complexity}"
    )
    console.print(Panel(header, title=f"[bold]{algorithm.title}[/bold]", subtitle=algorithm.key))

    if show_code:
        console.print("[bold]Code:[/bold]")
        console.print(Syntax(algorithm.code, "python", theme=code_theme, line_numbers=False))

    if show_steps:
        console.print("[bold]Steps:[/bold]")
        for step in algorithm.steps:
            console.print(f"- [bold]{step.title}[/bold]: {step.description}", highlight=False)


def format_values(values: Sequence[int]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"
