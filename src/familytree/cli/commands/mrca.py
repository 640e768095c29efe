from __future__ import annotations

import typer
from rich.console import Console

from familytree.cli.utils import DOMAIN_ERRORS, announce_ancestor, fail, load_family_tree

console = Console()


def mrca_command(
    source: str = typer.Argument(..., help="Family tree file, or '-' for stdin"),
    name1: str = typer.Argument(..., help="First person"),
    name2: str = typer.Argument(..., help="Second person"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Print load timing",
    ),
):
    """
    Report the most recent common ancestor of two people.
    """
    try:
        tree = load_family_tree(source, verbose=verbose)
        ancestor = tree.mrca(name1, name2)
    except DOMAIN_ERRORS as exc:
        fail(exc)

    if verbose:
        console.log("Query complete")

    console.print(announce_ancestor(name1, name2, ancestor), markup=False, highlight=False)
