from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from gedcom2dot.cli.utils import build_context, reported_errors
from gedcom2dot.core.pipeline import Pipeline

console = Console()


def stats_command(
    gedcom: Optional[Path] = typer.Argument(None, help="GEDCOM file to inspect"),
    root: Optional[str] = typer.Option(None, "--root", "-r", metavar="Fxxx|Ixxx"),
    children: bool = typer.Option(False, "--children", "-c"),
    blood: bool = typer.Option(False, "--blood", "-b"),
    config: Optional[Path] = typer.Option(None, "--config"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
):
    """
    Show how many people and families a GEDCOM file holds and how many survive pruning.
    """
    with reported_errors():
        ctx = build_context(
            gedcom,
            root=root,
            children=children,
            blood=blood,
            config_path=config,
            verbose=verbose,
        )
        pipeline = Pipeline(ctx)
        store = pipeline.load_store()
        pipeline.mark(store)

    counts = store.counts()

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Found", justify="right")
    table.add_column("Kept", justify="right")

    table.add_row("People", str(counts["people"]), str(counts["marked_people"]))
    table.add_row("Families", str(counts["families"]), str(counts["marked_families"]))

    console.print(table)
