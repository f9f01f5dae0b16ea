"""
CLI command modules for gedcom_relation.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_relation.cli.commands.convert import convert_command
from gedcom_relation.cli.commands.stats import stats_command

__all__ = [
    "convert_command",
    "stats_command",
]
