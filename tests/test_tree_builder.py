# tests/test_tree_builder.py

from __future__ import annotations

import pytest

from familytree.core.exceptions import TreeFormatError, TreeLookupError
from familytree.loader import BuilderState, FamilyTree, TreeNode, build_tree
from familytree.utils import read_mock_lines


def test_add_child_sets_parent_back_reference() -> None:
    parent = TreeNode("A")
    child = TreeNode("B")
    parent.add_child(child)

    assert parent.children == [child]
    assert child.parent is parent
    assert parent.parent is None
    assert parent.is_root and not child.is_root


def test_add_child_allows_duplicates_and_keeps_order() -> None:
    parent = TreeNode("A")
    first, second = TreeNode("B"), TreeNode("B")
    parent.add_child(first)
    parent.add_child(second)

    assert parent.children[0] is first
    assert parent.children[1] is second


def test_nodes_compare_by_identity() -> None:
    assert TreeNode("A") != TreeNode("A")


def test_first_line_creates_root(simple_tree: FamilyTree) -> None:
    root = simple_tree.root
    assert root is not None
    assert root.name == "A"
    assert [c.name for c in root.children] == ["B", "C"]
    assert [c.name for c in root.children[0].children] == ["D", "E"]
    assert [c.name for c in root.children[1].children] == ["F"]


def test_every_ingested_name_is_found(simple_tree: FamilyTree) -> None:
    for name in "ABCDEF":
        node = simple_tree.find_by_name(name)
        assert node is not None
        assert node.name == name


def test_find_by_name_missing_returns_none(simple_tree: FamilyTree) -> None:
    assert simple_tree.find_by_name("Z") is None
    assert FamilyTree().find_by_name("A") is None


def test_find_by_name_returns_first_preorder_match() -> None:
    tree = build_tree(["A:B,C", "B:X", "C:X"])
    match = tree.find_by_name("X")

    assert match is not None
    assert match.parent.name == "B"
    assert [n.parent.name for n in tree.root.find_all_by_name("X")] == ["B", "C"]


def test_find_by_name_searches_subtree_only(simple_tree: FamilyTree) -> None:
    c = simple_tree.find_by_name("C")
    assert c.find_by_name("F") is c.children[0]
    assert c.find_by_name("D") is None
    assert c.find_by_name("C") is c


def test_tree_has_one_root_and_is_acyclic(simple_tree: FamilyTree) -> None:
    nodes = list(simple_tree.iter_nodes())
    roots = [n for n in nodes if n.parent is None]
    assert roots == [simple_tree.root]

    for node in nodes:
        descendants = list(node.iter_subtree())[1:]
        assert all(d is not node for d in descendants)


def test_collect_ancestors_of_root_is_empty(simple_tree: FamilyTree) -> None:
    assert simple_tree.root.collect_ancestors() == []


def test_collect_ancestors_orders_nearest_first(simple_tree: FamilyTree) -> None:
    d = simple_tree.find_by_name("D")
    ancestors = d.collect_ancestors()

    assert [a.name for a in ancestors] == ["B", "A"]
    assert ancestors[-1] is simple_tree.root
    assert len(ancestors) == d.depth == 2


def test_render_indents_two_spaces_per_level(simple_tree: FamilyTree) -> None:
    assert simple_tree.root.render() == "A\n  B\n    D\n    E\n  C\n    F\n"
    assert str(simple_tree) == "Family Tree:\n\n" + simple_tree.root.render()


def test_builder_state_transitions_once() -> None:
    tree = FamilyTree()
    assert tree.state is BuilderState.EMPTY

    tree.add_line("X:Y")
    assert tree.state is BuilderState.POPULATED

    with pytest.raises(TreeLookupError):
        tree.add_line("Nobody:Z")
    assert tree.state is BuilderState.POPULATED
    assert tree.root.name == "X"


def test_unknown_parent_raises_before_any_mutation() -> None:
    tree = FamilyTree()
    tree.add_line("A:B,C")

    with pytest.raises(TreeLookupError) as info:
        tree.add_line("Z:Q")

    assert info.value.name == "Z"
    assert isinstance(info.value, LookupError)
    assert tree.find_by_name("Q") is None
    assert len(tree) == 3


def test_later_line_can_extend_any_existing_node() -> None:
    tree = build_tree(["A:B", "A:C", "C:D"])
    assert [c.name for c in tree.root.children] == ["B", "C"]
    assert tree.find_by_name("D").parent.name == "C"


def test_malformed_line_halts_load_and_keeps_earlier_lines() -> None:
    tree = FamilyTree()
    with pytest.raises(TreeFormatError):
        build_tree(read_mock_lines("no_colon.txt"), tree=tree)

    assert tree.lines_loaded == 2
    assert tree.find_by_name("D") is not None
    assert tree.find_by_name("G") is None


def test_build_tree_from_mock_file() -> None:
    tree = build_tree(read_mock_lines("hobbits.txt"))
    assert tree.root.name == "Balbo"
    assert tree.find_by_name("Frodo").depth == 4


def test_deep_chain_loads_queries_and_renders() -> None:
    generations = 2000
    tree = build_tree([f"N{i}:N{i + 1}" for i in range(generations)])

    last = tree.find_by_name(f"N{generations}")
    assert last is not None
    assert last.depth == generations
    assert tree.mrca(f"N{generations}", f"N{generations - 1}").name == f"N{generations - 2}"

    rendered = tree.root.render().splitlines()
    assert len(rendered) == generations + 1
    assert rendered[-1] == "  " * generations + f"N{generations}"


def test_iter_subtree_is_preorder() -> None:
    tree = build_tree(["A:B,C", "B:D,E", "C:F", "E:G"])
    assert [n.name for n in tree.iter_nodes()] == ["A", "B", "D", "E", "G", "C", "F"]
