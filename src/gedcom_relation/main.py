"""
Script entry for gedcom-relation (``python run.py -i tree.ged -o tree.json``).

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

The richer interface lives in ``gedcom_relation.cli``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from gedcom_relation.config import get_config
from gedcom_relation.core import ParseContext, ParseExecutionError
from gedcom_relation.core.pipeline import Pipeline
from gedcom_relation.logging import get_logger

log = get_logger(__name__)


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a GEDCOM 5.5.1 file to relational JSON"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to GEDCOM input file",
    )
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        help="Path to write the JSON output to",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the JSON output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path: str, pretty: bool = False) -> None:
    """
    Prepare context and execute the conversion pipeline.
    """
    cfg = get_config()

    ctx = ParseContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        pretty=pretty,
    )

    Pipeline(ctx).run()

    log.info("Wrote %s (%s)", output_path, ctx.stats)


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        run(input_path=args.input, output_path=args.output, pretty=args.pretty)
    except ParseExecutionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
