from __future__ import annotations

from typing import Optional, Tuple

from familytree.core.context import LoadContext
from familytree.core.exceptions import FamilyTreeError, ParseExecutionError
from familytree.loader import FamilyTree, build_tree, open_line_source
from familytree.loader.tree_builder import TreeNode


class Pipeline:
    """
    Orchestrates load -> query for one run.
    No tree logic lives here.
    """

    def __init__(self, context: LoadContext):
        self.ctx = context
        self.log = context.logger
        self.tree: Optional[FamilyTree] = None

    def load(self) -> FamilyTree:
        """
        Build the tree from the context's source.

        On failure ``self.tree`` keeps whatever the lines before the bad
        one produced.
        """
        self.log.info("Load starting")
        self.tree = FamilyTree()

        try:
            with open_line_source(self.ctx.source) as lines:
                build_tree(
                    lines,
                    skip_blank_lines=self.ctx.config.skip_blank_lines,
                    tree=self.tree,
                )
        except FamilyTreeError as exc:
            self.ctx.errors.append(str(exc))
            self.log.error(f"Load failed after {self.tree.lines_loaded} line(s): {exc}")
            raise
        except Exception as exc:
            self.log.exception("Load execution failed")
            raise ParseExecutionError(str(exc)) from exc
        finally:
            self.ctx.stats["lines"] = self.tree.lines_loaded
            self.ctx.stats["nodes"] = len(self.tree)

        self.log.info(
            f"Load complete: {self.ctx.stats['lines']} line(s), {self.ctx.stats['nodes']} node(s)"
        )
        return self.tree

    def query(self, name1: str, name2: str) -> Optional[TreeNode]:
        if self.tree is None:
            self.load()

        try:
            ancestor = self.tree.mrca(name1, name2)
        except FamilyTreeError as exc:
            self.ctx.errors.append(str(exc))
            self.log.error(f"Query failed: {exc}")
            raise

        self.log.debug(
            f"mrca({name1!r}, {name2!r}) -> {ancestor.name if ancestor else None!r}"
        )
        return ancestor

    def run(self) -> Tuple[FamilyTree, Optional[TreeNode]]:
        tree = self.load()
        name1, name2 = self.ctx.pair or self.ctx.config.default_pair
        return tree, self.query(name1, name2)
