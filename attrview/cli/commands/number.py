"""Number command: format an amount the way a number cell would."""

import typer
from rich.console import Console

from attrview.formatting.number import new_formatted_value_number
from attrview.models.enums import NumberFormat

console = Console()


def format_amount(
    amount: float = typer.Argument(..., help="Amount to format"),
    fmt: NumberFormat = typer.Option(
        NumberFormat.NONE, "--format", "-f", help="Number format"
    ),
):
    """Print AMOUNT rendered with the chosen format."""
    number = new_formatted_value_number(amount, fmt)
    console.print(number.formatted_content, markup=False, highlight=False)
