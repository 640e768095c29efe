"""
familytree: build a named family tree from ``parent:child1,child2`` lines and
find most recent common ancestors.

    from familytree import load_tree

    tree = load_tree("data/hobbits.txt")
    tree.mrca("Bilbo", "Frodo")
"""

from familytree.core.exceptions import (
    FamilyTreeError,
    FormatError,
    ResourceError,
    TreeFormatError,
    TreeLookupError,
    TreeResourceError,
)
from familytree.loader import FamilyTree, TreeNode, build_tree, load_tree
from familytree.query import collect_ancestors, most_recent_common_ancestor, mrca

__version__ = "0.1.0"

__all__ = [
    "FamilyTree",
    "FamilyTreeError",
    "FormatError",
    "ResourceError",
    "TreeFormatError",
    "TreeLookupError",
    "TreeNode",
    "TreeResourceError",
    "build_tree",
    "collect_ancestors",
    "load_tree",
    "most_recent_common_ancestor",
    "mrca",
]
