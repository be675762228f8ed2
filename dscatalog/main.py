from __future__ import annotations

from typing import List, Optional

import typer
from rich import print

from .cli.catalog_commands import catalog_list, catalog_show
from .cli.demo_commands import demo_run
from .cli.shared import setup_settings
from .error_handling import DSCatalogError


app = typer.Typer(add_completion=False, help="Browse textbook data-structure operations and run their demos.")
catalog = typer.Typer(add_completion=False, help="Browse the operation catalog.")
demo = typer.Typer(add_completion=False, help="Run demonstration scenarios.")
app.add_typer(catalog, name="catalog")
app.add_typer(demo, name="demo")

catalog.command("list")(catalog_list)
catalog.command("show")(catalog_show)
demo.command("run")(demo_run)


@app.callback()
def main(
    config_file: Optional[str] = typer.Option(None, "--config-file", help="Path to a JSON config (default: packaged dscatalog/data/default.json)"),
    config_overrides: Optional[List[str]] = typer.Option(None, "--set", help="Override a config value, e.g. --set demo.array=1,2,3"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL"),
) -> None:
    try:
        setup_settings(config_file=config_file, config_overrides=config_overrides, log_level=log_level)
    except DSCatalogError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
