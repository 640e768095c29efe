import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def simple_tree():
    """A -> {B, C}, B -> {D, E}, C -> {F}."""
    from familytree.loader import build_tree

    return build_tree(["A:B,C", "B:D,E", "C:F"])
