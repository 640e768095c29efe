"""
Line sources

Resolve and open the places relationship lines come from: a file on disk,
a text stream such as stdin, or an in-memory list. Every source is a
context manager, so file handles are released when the load ends, whether
it succeeded or not.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO, Union

from familytree.config import get_config
from familytree.core.exceptions import TreeResourceError
from familytree.logging import get_logger

log = get_logger(__name__)

STDIN_MARKER = "-"


def resolve_input_path(path: Union[str, Path, None], data_dir: Optional[str] = None) -> str | None:
    """
    Convert a user-provided path into an absolute validated file path.

    A relative path that does not exist as given is retried under the
    configured data directory.

    Returns:
        Absolute path string, or None if no input path was provided.
    """
    if path is None:
        log.debug("No input path provided to resolve_input_path().")
        return None

    abs_path = os.path.abspath(path)
    log.debug(f"Resolving input file: {abs_path}")

    if not os.path.exists(abs_path) and not os.path.isabs(path):
        data_dir = data_dir if data_dir is not None else get_config().data_dir
        candidate = os.path.abspath(os.path.join(data_dir, path))
        if os.path.exists(candidate):
            log.debug(f"Found input under data dir: {candidate}")
            abs_path = candidate

    if not os.path.exists(abs_path):
        log.error(f"Input file does not exist: {abs_path}")
        raise TreeResourceError(f"Input file not found: {abs_path}")

    if not os.path.isfile(abs_path):
        log.error(f"Input path is not a file: {abs_path}")
        raise TreeResourceError(f"Input path is not a file: {abs_path}")

    log.debug(f"Validated input file: {abs_path}")
    return abs_path


class FileLineSource:
    """Lines of a text file, open only inside the ``with`` block."""

    def __init__(self, path: Union[str, Path], encoding: Optional[str] = None):
        self.path = resolve_input_path(path)
        self.encoding = encoding or get_config().encoding
        self._handle: Optional[TextIO] = None

    def __enter__(self) -> Iterator[str]:
        try:
            self._handle = open(self.path, "r", encoding=self.encoding)
        except OSError as exc:
            raise TreeResourceError(f"Cannot open {self.path}: {exc}") from exc
        log.info(f"Reading family tree file: {self.path}")
        return self._read()

    def _read(self) -> Iterator[str]:
        try:
            yield from self._handle
        except (OSError, UnicodeDecodeError) as exc:
            raise TreeResourceError(f"Cannot read {self.path}: {exc}") from exc

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


class StreamLineSource:
    """Lines of an already-open text stream. The stream is not closed."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin

    def __enter__(self) -> Iterator[str]:
        return self._read()

    def _read(self) -> Iterator[str]:
        try:
            yield from self.stream
        except (OSError, UnicodeDecodeError) as exc:
            raise TreeResourceError(f"Cannot read input stream: {exc}") from exc

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


class ListLineSource:
    """In-memory lines, mostly for tests and embedding."""

    def __init__(self, lines: Iterable[str]):
        self.lines: List[str] = list(lines)

    def __enter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __exit__(self, exc_type, exc, tb) -> None:
        return None


LineSource = Union[FileLineSource, StreamLineSource, ListLineSource]


def open_line_source(source: Union[str, Path, Iterable[str], TextIO]) -> LineSource:
    """
    Pick a line source for ``source``:

        "-"                 -> standard input
        str / Path          -> file on disk
        text stream         -> that stream
        any other iterable  -> in-memory list
    """
    if isinstance(source, (str, Path)):
        if str(source) == STDIN_MARKER:
            return StreamLineSource()
        return FileLineSource(source)
    if hasattr(source, "readline"):
        return StreamLineSource(source)  # type: ignore[arg-type]
    return ListLineSource(source)
