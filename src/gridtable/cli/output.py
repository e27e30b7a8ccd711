"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/gridtable/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from gridtable.exceptions import DependencyError
from gridtable.table import Table


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(
    args: argparse.Namespace, raise_on_missing: bool = False, stream: TextIO | None = None
) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND the result goes to stdout and stdout is a TTY
    - AND Rich library is available

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="Rich output",
                missing_packages=["rich"],
                install_command="pip install gridtable[rich]",
            )
        return False

    if getattr(args, "result", None):
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        return bool(isatty())
    return False


def print_rich_table(table: Table, title: str | None = None) -> None:
    """Display a table on the terminal with Rich.

    Parameters
    ----------
    table : Table
        Table to display
    title : str, optional
        Caption shown above the table

    """
    from rich.console import Console
    from rich.table import Table as RichTable

    rich_table = RichTable(title=title, show_lines=False)
    for header in table.headers:
        rich_table.add_column(header, style="cyan", overflow="fold")
    for row in table.rows:
        rich_table.add_row(*row)

    Console().print(rich_table)


def print_styles(styles: dict[str, str], use_rich: bool = False) -> None:
    """Print the named table styles and their glyphs."""
    if use_rich:
        from rich.console import Console
        from rich.table import Table as RichTable

        rich_table = RichTable(title="Table styles")
        rich_table.add_column("Name", style="cyan")
        rich_table.add_column("Glyphs", style="green")
        for name, glyphs in styles.items():
            rich_table.add_row(name, glyphs)
        Console().print(rich_table)
        return

    for name, glyphs in styles.items():
        print(f"{name:<10} {glyphs}")
    print("Any other single non-whitespace character is also accepted as a style.")
