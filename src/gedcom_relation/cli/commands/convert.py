from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_relation.cli.utils import batch_targets, console, enable_verbose, fail, run_pipeline
from gedcom_relation.core import ParseExecutionError
from gedcom_relation.core.pipeline import PRETTY_INDENT
from gedcom_relation.exporter import serialize_document


def convert_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to this file (or directory, in batch mode) instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress logging",
    ),
):
    """
    Convert GEDCOM to relational JSON (stdout by default).

    When GEDCOM is a directory, every .ged file inside it is converted to a
    .json file next to it, or into --out.
    """
    enable_verbose(verbose)

    if gedcom.is_dir():
        _convert_directory(gedcom, out, pretty=pretty, verbose=verbose)
        return

    try:
        document, _ = run_pipeline(gedcom, out, pretty=pretty, verbose=verbose)
    except ParseExecutionError as exc:
        fail(exc)

    if out is None:
        indent = PRETTY_INDENT if pretty else None
        typer.echo(serialize_document(document, indent=indent))
    elif verbose:
        console.log(f"Wrote {out}")


def _convert_directory(directory: Path, out: Optional[Path], *, pretty: bool, verbose: bool) -> None:
    targets = batch_targets(directory, out)
    if not targets:
        console.print(f"[yellow]No .ged files found in {directory}[/yellow]")
        return

    for src, dest in targets:
        try:
            run_pipeline(src, dest, pretty=pretty, verbose=verbose)
        except ParseExecutionError as exc:
            fail(exc)
        if verbose:
            console.log(f"{src.name} -> {dest}")

    console.print(f"Converted {len(targets)} file(s)")
