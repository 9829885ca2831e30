#!/usr/bin/env python
"""Command line interface for attrview."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from attrview.cli.commands import date, number, render, rollup

app = typer.Typer(help="Render and aggregate attribute view cell values")

# Add commands
app.command("render")(render.render_values)
app.command("number")(number.format_amount)
app.command("date")(date.format_dates)
app.command("rollup")(rollup.aggregate_contents)


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable library debug logs"),
):
    """Render and aggregate attribute view cell values."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
