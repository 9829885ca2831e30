"""Date command: format timestamps the way date-like cells would."""

from enum import Enum

import typer
from rich.console import Console

from attrview.formatting.dates import (
    new_formatted_value_created,
    new_formatted_value_date,
    new_formatted_value_updated,
)
from attrview.models.enums import DateFormat

console = Console()


class DateKind(str, Enum):
    DATE = "date"
    CREATED = "created"
    UPDATED = "updated"


_BUILDERS = {
    DateKind.DATE: new_formatted_value_date,
    DateKind.CREATED: new_formatted_value_created,
    DateKind.UPDATED: new_formatted_value_updated,
}


def format_dates(
    start: int = typer.Argument(..., help="Start, milliseconds since epoch"),
    end: int = typer.Argument(0, help="End, milliseconds since epoch (0 for none)"),
    fmt: DateFormat = typer.Option(
        DateFormat.NONE, "--format", "-f", help="Date format"
    ),
    date_only: bool = typer.Option(False, "--date-only", help="Drop the time of day"),
    kind: DateKind = typer.Option(DateKind.DATE, "--kind", help="Cell kind"),
):
    """Print START (and END) rendered like a KIND cell."""
    payload = _BUILDERS[kind](start, end, fmt.value, date_only)
    console.print(payload.formatted_content, markup=False, highlight=False)
