from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gedcom2dot.config import get_config
from gedcom2dot.core.context import RunContext
from gedcom2dot.core.exceptions import Gedcom2DotError
from gedcom2dot.logging import configure_logging, get_logger
from gedcom2dot.marking import InclusionPolicy, parse_root

err_console = Console(stderr=True)


def build_context(
    gedcom: Optional[Path],
    *,
    root: Optional[str],
    children: bool,
    blood: bool,
    initials: bool = False,
    config_path: Optional[Path] = None,
    verbose: bool = False,
) -> RunContext:
    """
    Validate options and prepare the run context.

    Option errors surface here, before any input is read.
    """
    cfg = get_config(config_path)
    configure_logging(verbose=verbose)
    log = get_logger("gedcom2dot.cli")

    parsed_root = parse_root(root)
    policy = InclusionPolicy.from_flags(children=children, blood=blood)

    return RunContext(
        config=cfg,
        logger=log,
        input_path=str(gedcom) if gedcom is not None else None,
        root=parsed_root,
        policy=policy,
        use_initials=initials,
    )


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn conversion errors into a stderr message and the error's exit code."""
    try:
        yield
    except Gedcom2DotError as exc:
        err_console.print(f"[bold red]error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=exc.exit_code) from exc


def write_dot(text: str, *, out: Optional[Path]) -> None:
    """
    Write DOT to a file, or to stdout when ``out`` is None.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    else:
        typer.echo(text, nl=False)
