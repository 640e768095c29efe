# src/familytree/query/ancestry.py

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Union

from familytree.core.exceptions import TreeLookupError

if TYPE_CHECKING:  # pragma: no cover
    from familytree.loader.tree_builder import FamilyTree, TreeNode


def collect_ancestors(node: "TreeNode") -> List["TreeNode"]:
    """Ancestor chain of ``node``: parent first, root last, empty for the root."""
    return node.collect_ancestors()


def resolve_name(root: Optional["TreeNode"], name: str) -> "TreeNode":
    """Find ``name`` from the root (first pre-order match) or raise TreeLookupError."""
    node = root.find_by_name(name) if root is not None else None
    if node is None:
        raise TreeLookupError(f"No such node with name: {name}", name=name)
    return node


def most_recent_common_ancestor(
    tree: Union["FamilyTree", "TreeNode", None], name1: str, name2: str
) -> Optional["TreeNode"]:
    """
    Return the deepest node that is an ancestor of both ``name1`` and ``name2``.

    A node is never its own ancestor: asking about one name twice yields its
    parent, and asking about a node and its parent yields the grandparent.
    The root has no ancestors of its own but is an ancestor of everyone else,
    so a query involving the root answers the root.

    Returns None when the ancestor chains share nothing.

    Raises:
        TreeLookupError: either name is not in the tree.
    """
    # Accept either a FamilyTree or its root node.
    root = getattr(tree, "root", tree)

    node1 = resolve_name(root, name1)
    node2 = resolve_name(root, name2)

    ancestors_of_1 = node1.collect_ancestors()
    ancestors_of_2 = node2.collect_ancestors()

    # Chain 1 is ordered nearest first, so the first shared node is the deepest.
    for candidate in ancestors_of_1:
        if any(candidate is other for other in ancestors_of_2):
            return candidate

    if node1 is root or node2 is root:
        return root

    return None
