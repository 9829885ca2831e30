"""Rollup command: aggregate rendered cell strings."""

from typing import List, Optional

import typer
from rich.console import Console

from attrview.models import RollupCalc, ValueRollup
from attrview.models.enums import CalcOperator

console = Console()


def aggregate_contents(
    operator: CalcOperator = typer.Argument(..., help="Rollup operator, e.g. 'Sum'"),
    contents: Optional[List[str]] = typer.Argument(
        None, help="Rendered values of the related cells"
    ),
):
    """Print CONTENTS reduced by OPERATOR, one result per line."""
    rollup = ValueRollup(contents=contents or [])
    reduced = rollup.render_contents(RollupCalc(operator=operator))
    for line in reduced.contents:
        console.print(line, markup=False, highlight=False)
