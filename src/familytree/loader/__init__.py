# src/familytree/loader/__init__.py

"""
Public interface for the family tree loader stack.

Intended usage from other parts of the project and tests:

    from familytree.loader import (
        ParsedLine,
        TreeNode,
        FamilyTree,
        tokenize_line,
        tokenize_lines,
        build_tree,
        load_tree,
        open_line_source,
    )
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO, Union

from familytree.config import get_config

from .sources import (
    FileLineSource,
    ListLineSource,
    StreamLineSource,
    open_line_source,
    resolve_input_path,
)
from .tokenizer import ParsedLine, tokenize_line, tokenize_lines
from .tree_builder import BuilderState, FamilyTree, TreeNode, build_tree


def load_tree(source: Union[str, Path, Iterable[str], TextIO]) -> FamilyTree:
    """Open ``source``, build a tree from its lines and release the source."""
    with open_line_source(source) as lines:
        return build_tree(lines, skip_blank_lines=get_config().skip_blank_lines)


__all__ = [
    "BuilderState",
    "FamilyTree",
    "FileLineSource",
    "ListLineSource",
    "ParsedLine",
    "StreamLineSource",
    "TreeNode",
    "build_tree",
    "load_tree",
    "open_line_source",
    "resolve_input_path",
    "tokenize_line",
    "tokenize_lines",
]
