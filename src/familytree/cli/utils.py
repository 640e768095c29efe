
from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, NoReturn, Optional, Union

import typer
from rich.console import Console

from familytree.core.exceptions import (
    TreeFormatError,
    TreeLookupError,
    TreeResourceError,
)
from familytree.loader import FamilyTree, load_tree
from familytree.loader.tree_builder import TreeNode

console = Console()
err_console = Console(stderr=True)


def load_family_tree(path: Union[Path, str], *, verbose: bool = False) -> FamilyTree:
    """
    Load a tree for a CLI command; ``-`` reads standard input.
    """
    t0 = time.perf_counter()

    tree = load_tree(str(path))

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded {tree.lines_loaded} line(s) in {elapsed:.3f}s")

    return tree


def fail(exc: Exception) -> NoReturn:
    """
    Report a domain error the way the default run does and exit with code 1.
    """
    if isinstance(exc, TreeResourceError):
        err_console.print(f"[red]IO trouble:[/red] {exc}")
    else:
        err_console.print(f"[red]Input file trouble:[/red] {exc}")
    raise typer.Exit(code=1)


def announce_ancestor(name1: str, name2: str, ancestor: Optional[TreeNode]) -> str:
    if ancestor is None:
        return f"{name1} and {name2} have no common ancestor"
    return f"Most recent common ancestor of {name1} and {name2} is {ancestor.name}"


def tree_stats(tree: FamilyTree) -> Dict[str, object]:
    """
    Summary numbers for the ``stats`` command.
    """
    seen: Dict[str, int] = {}
    leaves = 0
    max_depth = 0

    for node in tree.iter_nodes():
        seen[node.name] = seen.get(node.name, 0) + 1
        if not node.children:
            leaves += 1
            max_depth = max(max_depth, node.depth)

    return {
        "root": tree.root.name if tree.root is not None else None,
        "lines": tree.lines_loaded,
        "nodes": sum(seen.values()),
        "leaves": leaves,
        "max_depth": max_depth,
        "duplicate_names": sum(1 for count in seen.values() if count > 1),
    }


DOMAIN_ERRORS = (TreeFormatError, TreeLookupError, TreeResourceError)
