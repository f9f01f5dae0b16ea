from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from gedcom_relation.cli.utils import console, enable_verbose, fail, load_gedcom
from gedcom_relation.core.pipeline import INPUT_ERRORS


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    enable_verbose(verbose)

    try:
        parser = load_gedcom(gedcom, verbose=verbose)
    except INPUT_ERRORS as exc:
        fail(exc)

    counts = parser.document.counts()

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Lines", str(len(parser.lines)))
    table.add_row("Records", str(len(parser.tree.records)))
    table.add_row("Persons", str(counts["persons"]))
    table.add_row("Families", str(counts["families"]))
    table.add_row("Child rows", str(counts["children"]))

    console.print(table)
