"""
Main entry for the familytree project.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration
- reporting the rendered tree and the MRCA result

No parsing or tree logic lives here.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from familytree.config import get_config
from familytree.logging import get_logger, set_debug

from familytree.core.context import LoadContext
from familytree.core.exceptions import TreeFormatError, TreeLookupError, TreeResourceError
from familytree.core.pipeline import Pipeline
from familytree.cli.utils import announce_ancestor

log = get_logger("familytree.main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load a family tree file and report a most recent common ancestor"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to the family tree text file ('-' for stdin)",
    )
    parser.add_argument(
        "--pair",
        nargs=2,
        metavar=("NAME1", "NAME2"),
        default=None,
        help="Names to query (defaults to query.default_pair in config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Default run
# ---------------------------------------------------------
def run(input_path: str, pair: Optional[List[str]], debug_flag: bool) -> None:
    """
    Load the tree, print it, then print the MRCA of the pair.
    """

    cfg = get_config()
    cfg.debug = cfg.debug or bool(debug_flag)
    set_debug(cfg.debug)

    log.info(f"Loading family tree: {input_path}")

    ctx = LoadContext(
        config=cfg,
        logger=log,
        source=input_path,
        pair=tuple(pair) if pair else None,
        debug=cfg.debug,
    )

    pipeline = Pipeline(ctx)
    tree = pipeline.load()
    print("Tree:\n" + str(tree) + "\n**************\n")

    name1, name2 = ctx.pair or cfg.default_pair
    ancestor = pipeline.query(name1, name2)
    print(announce_ancestor(name1, name2, ancestor))


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            pair=args.pair,
            debug_flag=args.debug,
        )
    except TreeResourceError as exc:
        print(f"IO trouble: {exc}")
        return 1
    except (TreeFormatError, TreeLookupError) as exc:
        print(f"Input file trouble: {exc}")
        return 1
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
