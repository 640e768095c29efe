# src/familytree/utils/pathing.py

from __future__ import annotations

from pathlib import Path
from typing import Union

# <project_root>/src/familytree/utils/pathing.py -> parents[3] is the project root
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


def project_root() -> Path:
    """Directory holding src/, tests/, config/ and mock_files/."""
    return _PROJECT_ROOT


def mock_file_path(filename: Union[str, Path]) -> Path:
    """
    Return the absolute path to a sample tree under mock_files/.

    Examples:
        mock_file_path("hobbits.txt")
        mock_file_path("no_colon.txt")
    """
    return project_root() / "mock_files" / Path(filename)


def read_mock_lines(filename: Union[str, Path]) -> list[str]:
    """Lines of a sample tree file with line endings removed."""
    return mock_file_path(filename).read_text(encoding="utf-8").splitlines()
