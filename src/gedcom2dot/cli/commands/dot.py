from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom2dot.cli.utils import build_context, reported_errors, write_dot
from gedcom2dot.core.pipeline import Pipeline


def dot_command(
    gedcom: Optional[Path] = typer.Argument(
        None,
        help="GEDCOM file to convert",
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        metavar="Fxxx|Ixxx",
        help="Root family or individual; prunes away unrelated people",
    ),
    children: bool = typer.Option(
        False,
        "--children",
        "-c",
        help="Show children in every related family if root is set",
    ),
    blood: bool = typer.Option(
        False,
        "--blood",
        "-b",
        help="Show only blood relatives of root",
    ),
    initials: bool = typer.Option(
        False,
        "--initials",
        "-i",
        help="Reserved; currently has no effect",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        "-o",
        help="Write DOT to file instead of stdout",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Alternative YAML config file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
):
    """
    Convert a GEDCOM file into a Graphviz DOT file (stdout by default).
    """
    with reported_errors():
        ctx = build_context(
            gedcom,
            root=root,
            children=children,
            blood=blood,
            initials=initials,
            config_path=config,
            verbose=verbose,
        )
        result = Pipeline(ctx).run()

    write_dot(result.dot, out=out)
