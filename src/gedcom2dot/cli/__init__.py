"""
CLI package for gedcom2dot.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom2dot.cli.app import app, main

__all__ = [
    "app",
    "main",
]
