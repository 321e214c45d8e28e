# Argx Token Classifier — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering of a `ParseResult`.

Used by the `python -m argx` demo to show how a command line was classified:
one table with a row per positional argument, option value and flag.
"""
from __future__ import annotations

import json

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argx.console import console as default_console
from argx.parser import ParseResult


def build_table(result: ParseResult, title: str = "argx") -> Table:
    """Build a table listing every classified token of `result`."""
    table = Table(title=title, expand=True, box=box.SIMPLE)
    table.add_column("Kind", style="bold")
    table.add_column("Key", style="bold cyan")
    table.add_column("Value", overflow="fold")

    for index, arg in enumerate(result.args):
        table.add_row("argument", escape(f"[{index}]"), escape(arg))

    for key, values in result.options.items():
        if not values:
            table.add_row("option", escape(key), "[dim]<no value>[/dim]")
        for value in values:
            table.add_row("option", escape(key), escape(value))

    for name in result.flags:
        table.add_row("flag", escape(name), "")

    table.caption = (
        f"Arguments: {result.arg_size()}  "
        f"Options: {result.option_size()}  "
        f"Flags: {result.flag_size()}"
    )
    return table


def render(
    result: ParseResult, mode: str = "table", console: Console | None = None
) -> None:
    """
    Print `result` to the console.

    Args:
        result (ParseResult): The result to print.
        mode (str): "table" for a Rich table, "json" for a JSON document.
        console (Console | None): Target console. Defaults to the argx console.

    Raises:
        ValueError: If `mode` is not supported.
    """
    console = console or default_console
    if mode == "table":
        console.print(build_table(result))
    elif mode == "json":
        console.print_json(json.dumps(result.to_dict()), highlight=False)
    else:
        raise ValueError(f"Invalid output mode: {mode}")
