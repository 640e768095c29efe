from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from familytree.cli.utils import DOMAIN_ERRORS, fail, load_family_tree, tree_stats

console = Console()


def stats_command(
    source: str = typer.Argument(..., help="Family tree file, or '-' for stdin"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing",
    ),
):
    """
    Show summary statistics for a family tree file.
    """
    try:
        tree = load_family_tree(source, verbose=verbose)
    except DOMAIN_ERRORS as exc:
        fail(exc)

    stats = tree_stats(tree)

    table = Table(title="Family Tree Statistics")
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Root", str(stats["root"]))
    table.add_row("Lines", str(stats["lines"]))
    table.add_row("People", str(stats["nodes"]))
    table.add_row("Leaves", str(stats["leaves"]))
    table.add_row("Generations", str(stats["max_depth"] + 1 if stats["root"] else 0))
    table.add_row("Duplicate names", str(stats["duplicate_names"]))

    console.print(table)
