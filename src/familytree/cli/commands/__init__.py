"""
CLI command modules for familytree.

Each command module defines a single Typer-compatible command function.
"""

from familytree.cli.commands.mrca import mrca_command
from familytree.cli.commands.show import show_command
from familytree.cli.commands.stats import stats_command

__all__ = [
    "mrca_command",
    "show_command",
    "stats_command",
]
