# tests/test_pipeline.py

from __future__ import annotations

import pytest

from familytree.config import get_config
from familytree.core.context import LoadContext
from familytree.core.exceptions import TreeFormatError, TreeLookupError, TreeResourceError
from familytree.core.pipeline import Pipeline
from familytree.logging import get_logger
from familytree.utils import mock_file_path


def make_context(source, pair=None) -> LoadContext:
    return LoadContext(
        config=get_config(),
        logger=get_logger("familytree.tests"),
        source=source,
        pair=pair,
    )


def test_pipeline_run_uses_default_pair() -> None:
    ctx = make_context(str(mock_file_path("hobbits.txt")))
    tree, ancestor = Pipeline(ctx).run()

    assert get_config().default_pair == ("Bilbo", "Frodo")
    assert tree.root.name == "Balbo"
    assert ancestor.name == "Balbo"
    assert ctx.stats == {"lines": 8, "nodes": len(tree)}


def test_pipeline_run_with_explicit_pair() -> None:
    ctx = make_context(["A:B,C", "B:D,E", "C:F"], pair=("D", "E"))
    _, ancestor = Pipeline(ctx).run()
    assert ancestor.name == "B"


def test_pipeline_load_failure_keeps_partial_tree() -> None:
    ctx = make_context(str(mock_file_path("unknown_parent.txt")))
    pipeline = Pipeline(ctx)

    with pytest.raises(TreeLookupError):
        pipeline.load()

    assert pipeline.tree.find_by_name("C") is not None
    assert pipeline.tree.find_by_name("F") is None
    assert ctx.stats["lines"] == 1
    assert ctx.errors and "No such parent" in ctx.errors[0]


def test_pipeline_format_error_propagates_unchanged() -> None:
    ctx = make_context(["X:Y", "NoColonHere", "Y:Z"])
    with pytest.raises(TreeFormatError):
        Pipeline(ctx).load()


def test_pipeline_missing_file_is_resource_error(tmp_path) -> None:
    ctx = make_context(str(tmp_path / "missing.txt"))
    with pytest.raises(TreeResourceError):
        Pipeline(ctx).load()


def test_pipeline_query_unknown_name() -> None:
    ctx = make_context(["X:Y"])
    pipeline = Pipeline(ctx)

    with pytest.raises(TreeLookupError):
        pipeline.query("Y", "Z")
    assert ctx.errors == ["No such node with name: Z"]
