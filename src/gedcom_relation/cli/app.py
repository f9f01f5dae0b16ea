
from __future__ import annotations

import typer

from gedcom_relation.cli.commands.convert import convert_command
from gedcom_relation.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-relation",
    help="Convert GEDCOM 5.5.1 files to relational JSON",
    add_completion=False,
)

app.command("convert")(convert_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
