from __future__ import annotations

import typer
from rich.console import Console

from familytree.cli.utils import DOMAIN_ERRORS, fail, load_family_tree

console = Console()


def show_command(
    source: str = typer.Argument(..., help="Family tree file, or '-' for stdin"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing",
    ),
):
    """
    Print the whole tree, indented two spaces per generation.
    """
    try:
        tree = load_family_tree(source, verbose=verbose)
    except DOMAIN_ERRORS as exc:
        fail(exc)

    console.print(str(tree), markup=False, highlight=False, end="")
