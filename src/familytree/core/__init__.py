"""
Orchestration layer: shared context, pipeline and error types.
"""

from familytree.core.exceptions import (
    FamilyTreeError,
    FormatError,
    ParseExecutionError,
    PipelineError,
    ResourceError,
    TreeFormatError,
    TreeLookupError,
    TreeResourceError,
)

__all__ = [
    "FamilyTreeError",
    "FormatError",
    "ParseExecutionError",
    "PipelineError",
    "ResourceError",
    "TreeFormatError",
    "TreeLookupError",
    "TreeResourceError",
]
