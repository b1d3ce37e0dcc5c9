"""
CLI command modules for gedcom2dot.

Each command module defines a single Typer-compatible command function.
"""

from gedcom2dot.cli.commands.dot import dot_command
from gedcom2dot.cli.commands.stats import stats_command

__all__ = [
    "dot_command",
    "stats_command",
]
