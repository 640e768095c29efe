"""
CLI package for familytree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from familytree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
