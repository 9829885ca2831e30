"""Command modules for the attrview CLI."""

from attrview.cli.commands import date, number, render, rollup

__all__ = ["date", "number", "render", "rollup"]
