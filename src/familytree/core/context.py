from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple, Union


@dataclass
class LoadContext:
    """
    Shared pipeline context.
    Carries the line source spec, the query pair and collected stats
    between the surfaces and the pipeline.
    """

    config: Any
    logger: Any

    # Path, "-" for stdin, or an in-memory iterable of lines.
    source: Optional[Union[str, Iterable[str]]] = None
    pair: Optional[Tuple[str, str]] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: list = field(default_factory=list)

    debug: bool = False
