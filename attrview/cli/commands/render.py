"""Render command: display strings for values stored as JSON."""

import json
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from attrview.exceptions import AttrViewException
from attrview.models import Value, parse_value, value_from_json

console = Console()


def _load(path: Path) -> List[Value]:
    text = path.read_text(encoding="utf-8")
    if text.lstrip().startswith("["):
        return [parse_value(item) for item in json.loads(text)]
    return [value_from_json(text)]


def render_values(
    path: Path = typer.Argument(..., help="JSON file with a value or a list of values"),
    plain: bool = typer.Option(False, "--plain", help="Print one rendering per line"),
):
    """Render every value in PATH."""
    try:
        values = _load(path)
    except (AttrViewException, OSError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if plain:
        for value in values:
            console.print(value.render(), markup=False, highlight=False)
        return

    table = Table("ID", "Type", "Rendered")
    for value in values:
        table.add_row(value.id, value.type, value.render())

    console.print(table)
