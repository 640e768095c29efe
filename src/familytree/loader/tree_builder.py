# src/familytree/loader/tree_builder.py

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Union

from familytree.core.exceptions import TreeLookupError
from familytree.logging import get_logger
from familytree.query.ancestry import most_recent_common_ancestor

from .tokenizer import ParsedLine, tokenize_line, tokenize_lines

log = get_logger(__name__)

INDENT = "  "


@dataclass(eq=False)
class TreeNode:
    """
    One named person in the family hierarchy.

    Attributes:
        name: Identifier as it appeared in the input. Not unique by construction.
        children: Owned child nodes, in the order they were added.

    The parent link is a weak reference, so a subtree never keeps its
    ancestors alive and parent/child links never form a reference cycle.
    Equality is identity: two nodes with the same name are different people.
    """

    name: str
    children: List["TreeNode"] = field(default_factory=list)
    _parent: Optional["weakref.ref[TreeNode]"] = field(
        default=None, init=False, repr=False
    )

    # ---------- Structure ----------

    @property
    def parent(self) -> Optional["TreeNode"]:
        return self._parent() if self._parent is not None else None

    @property
    def data(self) -> str:
        return self.name

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def depth(self) -> int:
        """Number of parent hops up to the root (the root has depth 0)."""
        return len(self.collect_ancestors())

    def add_child(self, child: "TreeNode") -> None:
        self.children.append(child)
        child._parent = weakref.ref(self)

    # ---------- Traversal ----------

    def iter_subtree(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            # Reversed so the leftmost child is popped first.
            stack.extend(reversed(node.children))

    def find_by_name(self, target_name: str) -> Optional["TreeNode"]:
        """
        Return the first node named ``target_name`` in a pre-order walk of
        this subtree, or None.

        Names may repeat; the first pre-order match is the one returned.
        """
        for node in self.iter_subtree():
            if node.name == target_name:
                return node
        return None

    def find_all_by_name(self, target_name: str) -> List["TreeNode"]:
        """Return every node named ``target_name``, in pre-order."""
        return [n for n in self.iter_subtree() if n.name == target_name]

    def collect_ancestors(self) -> List["TreeNode"]:
        """
        Return this node's parent, grandparent, ... up to the root.
        Ordered nearest first; empty for the root.
        """
        ancestors: List[TreeNode] = []
        curr = self.parent
        while curr is not None:
            ancestors.append(curr)
            curr = curr.parent
        return ancestors

    # ---------- Display ----------

    def render(self, indent: str = "") -> str:
        """Indented text of this subtree, two spaces per level, one line per node."""
        lines = []
        stack = [(self, indent)]
        while stack:
            node, prefix = stack.pop()
            lines.append(prefix + node.name + "\n")
            stack.extend((child, prefix + INDENT) for child in reversed(node.children))
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<TreeNode {self.name!r} children={len(self.children)}>"


class BuilderState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class FamilyTree:
    """
    A single-rooted family tree built one ``parent:children`` line at a time.

    The first successfully parsed line creates the root; every later line
    must name a parent that is already in the tree.
    """

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None
        self.lines_loaded = 0

    @property
    def state(self) -> BuilderState:
        return BuilderState.EMPTY if self.root is None else BuilderState.POPULATED

    # ------------------------------------------------------------------ #
    # Building
    # ------------------------------------------------------------------ #

    def add_line(self, line: Union[str, ParsedLine], lineno: int = 0) -> TreeNode:
        """
        Fold one relationship line into the tree and return the parent node.

        Raises:
            TreeFormatError: the line has no ':' separator.
            TreeLookupError: the tree is populated and the parent is unknown.
                Nothing is attached in that case.
        """
        parsed = line if isinstance(line, ParsedLine) else tokenize_line(line, lineno)

        if self.root is None:
            parent_node = self.root = TreeNode(parsed.parent)
            log.debug(f"Root established: {parsed.parent!r}")
        else:
            parent_node = self.root.find_by_name(parsed.parent)
            if parent_node is None:
                raise TreeLookupError(
                    f"No such parent: {parsed.parent!r} (line {parsed.lineno})",
                    name=parsed.parent,
                )

        check_duplicates = log.isEnabledFor(logging.DEBUG)
        for child_name in parsed.children:
            if check_duplicates and self.root.find_by_name(child_name) is not None:
                log.debug(f"Duplicate name {child_name!r}; lookups return the first match")
            parent_node.add_child(TreeNode(child_name))

        self.lines_loaded += 1
        return parent_node

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def find_by_name(self, name: str) -> Optional[TreeNode]:
        if self.root is None:
            return None
        return self.root.find_by_name(name)

    def iter_nodes(self) -> Iterator[TreeNode]:
        if self.root is not None:
            yield from self.root.iter_subtree()

    def mrca(self, name1: str, name2: str) -> Optional[TreeNode]:
        return most_recent_common_ancestor(self.root, name1, name2)

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def __str__(self) -> str:
        body = self.root.render() if self.root is not None else ""
        return "Family Tree:\n\n" + body

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        root = self.root.name if self.root is not None else None
        return f"<FamilyTree root={root!r} lines={self.lines_loaded}>"


def build_tree(
    lines: Iterable[str], *, skip_blank_lines: bool = False, tree: Optional[FamilyTree] = None
) -> FamilyTree:
    """
    Build a FamilyTree from raw text lines.

        lines -> ParsedLine stream -> FamilyTree

    The first failing line raises and stops the load; whatever was built
    from earlier lines stays in ``tree`` when the caller passed one in.
    """
    tree = tree if tree is not None else FamilyTree()
    for parsed in tokenize_lines(lines, skip_blank_lines=skip_blank_lines):
        tree.add_line(parsed)
    log.debug(f"Tree built from {tree.lines_loaded} line(s)")
    return tree
