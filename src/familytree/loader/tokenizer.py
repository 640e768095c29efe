# src/familytree/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from familytree.core.exceptions import TreeFormatError

SEPARATOR = ":"
CHILD_DELIMITER = ","


@dataclass(frozen=True)
class ParsedLine:
    """
    A single ``parent:child1,child2,...`` relationship line.

    Attributes:
        lineno: 1-based line number in the original source (0 if unknown).
        parent: Text before the first ':'.
        children: Child name tokens, verbatim and in input order.
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    parent: str
    children: Tuple[str, ...]
    raw: str


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> ParsedLine:
    """
    Parse a single relationship line into a ParsedLine.

    Only the first ':' separates the parent from the child list, so child
    tokens may themselves contain ':'. The child list is split on ',' with
    no trimming; empty tokens are kept as empty names.

    Examples:
        "A:B,C"        -> parent "A", children ("B", "C")
        "A: B"         -> parent "A", children (" B",)
        "A:"           -> parent "A", children ("",)
    """
    raw = _strip_eol(line)

    parent, sep, rest = raw.partition(SEPARATOR)
    if not sep:
        raise TreeFormatError(
            f"Line {lineno}: invalid (no colon) -> {raw!r}",
            lineno=lineno,
            line=raw,
        )

    return ParsedLine(
        lineno=lineno,
        parent=parent,
        children=tuple(rest.split(CHILD_DELIMITER)),
        raw=raw,
    )


def tokenize_lines(
    lines: Iterable[str], *, skip_blank_lines: bool = False
) -> Iterator[ParsedLine]:
    """
    Yield a ParsedLine for every line of the given iterable, numbering from 1.

    Parsing is lazy: a malformed line raises only when it is reached, after
    every earlier line has been yielded.
    """
    for lineno, raw_line in enumerate(lines, start=1):
        stripped = _strip_eol(raw_line)

        if skip_blank_lines and not stripped.strip():
            continue

        yield tokenize_line(stripped, lineno=lineno)
