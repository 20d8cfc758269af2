"""Shared utilities for the rateconv CLI."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rateconv.core.lexicon import aliases_for
from rateconv.models import RateConvError, SizeUnit, TimeUnit

# Default config search paths (ordered by proximity to current run)
CONFIG_PATHS = [
    "./rateconv.yml",
    str(Path.home() / ".config" / "rateconv" / "rateconv.yml"),
    "/etc/rateconv/rateconv.yml",
]


def find_config(config_path: Optional[str] = None) -> Optional[str]:
    """Locate the active rateconv settings file, if there is one."""
    if config_path:
        return config_path

    if env_config := os.environ.get("RATECONV_CONFIG"):
        return env_config

    for path in CONFIG_PATHS:
        if Path(path).expanduser().exists():
            return path

    return None


def handle_cli_error(
    e: Exception,
    console: Console,
    verbose: bool = False,
    exit_code: int = 1
) -> None:
    """Handle CLI errors with consistent formatting.

    Args:
        e: Exception to handle
        console: Rich console for output (stderr)
        verbose: Show exception traceback if True
        exit_code: Exit code to use
    """
    if isinstance(e, RateConvError):
        message = f"{e.kind}: {e}"
    else:
        message = str(e)
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    if verbose:
        console.print_exception()
    raise typer.Exit(exit_code)


def print_result(console: Console, message: str) -> None:
    """Print a result line verbatim (no markup, highlighting or wrapping)."""
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def show_units(console: Console) -> None:
    """Render the supported size and time units with their aliases."""
    size_table = Table(title="Size units", show_header=True, header_style="bold cyan")
    size_table.add_column("Unit", style="bold", no_wrap=True)
    size_table.add_column("Name", no_wrap=True)
    size_table.add_column("Bits", justify="right")
    size_table.add_column("Scale", no_wrap=True)
    size_table.add_column("Aliases", style="dim")

    for unit in SizeUnit:
        size_table.add_row(
            unit.label,
            unit.description,
            str(unit.bits),
            f"{'binary' if unit.is_binary else 'decimal'} {'bytes' if unit.is_byte else 'bits'}",
            escape(", ".join(aliases_for(unit))),
        )

    time_table = Table(title="Time units", show_header=True, header_style="bold cyan")
    time_table.add_column("Unit", style="bold", no_wrap=True)
    time_table.add_column("Name", no_wrap=True)
    time_table.add_column("Milliseconds", justify="right")
    time_table.add_column("Aliases", style="dim")

    for unit in TimeUnit:
        time_table.add_row(
            unit.label,
            unit.description,
            str(unit.milliseconds),
            ", ".join(aliases_for(unit)),
        )

    console.print(size_table)
    console.print(time_table)
    console.print(
        "[dim]Lower-case b is bits, upper-case B is bytes; other letters are "
        "case-insensitive. Case variants of the aliases above are accepted.[/dim]"
    )
