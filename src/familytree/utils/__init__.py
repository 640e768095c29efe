# src/familytree/utils/__init__.py

from .pathing import (
    mock_file_path,
    project_root,
    read_mock_lines,
)

__all__ = [
    "mock_file_path",
    "project_root",
    "read_mock_lines",
]
