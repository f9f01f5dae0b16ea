from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import typer
from rich.console import Console

from gedcom_relation.config import get_config
from gedcom_relation.core import ParseContext, ParseExecutionError
from gedcom_relation.core.pipeline import Pipeline
from gedcom_relation.loader import GedcomSyntaxError
from gedcom_relation.logging import get_logger, set_console_level
from gedcom_relation.parser_core import GEDCOMParser
from gedcom_relation.registry import RelationDocument
from gedcom_relation.utils import json_output_path

console = Console()
err_console = Console(stderr=True)

GEDCOM_SUFFIX = ".ged"


def enable_verbose(verbose: bool) -> None:
    if verbose:
        set_console_level(logging.INFO)


def load_gedcom(path: Path, *, verbose: bool = False) -> GEDCOMParser:
    """
    Parse and map one GEDCOM file without writing anything.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    parser = GEDCOMParser()
    parser.run(path)

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return parser


def run_pipeline(
    input_path: Path,
    output_path: Optional[Path],
    *,
    pretty: bool,
    verbose: bool,
) -> Tuple[RelationDocument, ParseContext]:
    """Convert one file through the Pipeline; writes only when output_path is set."""
    ctx = ParseContext(
        config=get_config(),
        logger=get_logger("gedcom_relation.cli"),
        input_path=str(input_path),
        output_path=str(output_path) if output_path else None,
        pretty=pretty,
    )
    document = Pipeline(ctx).run()
    return document, ctx


def iter_gedcom_files(directory: Path) -> Iterator[Path]:
    """Every *.ged file directly inside ``directory`` (suffix case-insensitive), sorted."""
    for path in sorted(directory.iterdir()):
        if path.is_file() and path.suffix.lower() == GEDCOM_SUFFIX:
            yield path


def batch_targets(directory: Path, out_dir: Optional[Path]) -> List[Tuple[Path, Path]]:
    """Pair each GEDCOM file in ``directory`` with its .json destination."""
    return [(src, json_output_path(src, out_dir)) for src in iter_gedcom_files(directory)]


def fail(exc: BaseException) -> None:
    """Print a red error and stop with exit code 1."""
    cause = exc.__cause__ if isinstance(exc, ParseExecutionError) and exc.__cause__ else exc
    if isinstance(cause, GedcomSyntaxError):
        err_console.print(f"[bold red]Invalid GEDCOM:[/bold red] [red]{cause}[/red]")
    else:
        err_console.print(f"[bold red]Error:[/bold red] [red]{cause}[/red]")
    raise typer.Exit(code=1)
