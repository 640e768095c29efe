"""
Ancestor query engine: ancestor chains and most-recent-common-ancestor lookups.
"""

from .ancestry import collect_ancestors, most_recent_common_ancestor, resolve_name

mrca = most_recent_common_ancestor

__all__ = [
    "collect_ancestors",
    "most_recent_common_ancestor",
    "mrca",
    "resolve_name",
]
