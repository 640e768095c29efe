from __future__ import annotations

from typing import Optional


class FamilyTreeError(Exception):
    """Base exception for everything raised by the familytree core."""


class TreeFormatError(FamilyTreeError, ValueError):
    """Raised when an input line lacks the ``parent:children`` separator."""

    def __init__(self, message: str, *, lineno: int = 0, line: Optional[str] = None):
        super().__init__(message)
        self.lineno = lineno
        self.line = line


class TreeLookupError(FamilyTreeError, LookupError):
    """Raised when a parent (during load) or a queried name is not in the tree."""

    def __init__(self, message: str, *, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class TreeResourceError(FamilyTreeError, OSError):
    """Raised when the input source cannot be located, opened or read."""


# Short names used throughout the docs and CLI messages.
FormatError = TreeFormatError
ResourceError = TreeResourceError


class PipelineError(FamilyTreeError):
    """Base exception for pipeline failures."""


class ParseExecutionError(PipelineError):
    """Raised when the pipeline fails for a reason outside the tree domain."""
