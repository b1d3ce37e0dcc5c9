from __future__ import annotations

import typer

from gedcom2dot.cli.commands.dot import dot_command
from gedcom2dot.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom2dot",
    help="Convert a GEDCOM file into a Graphviz DOT file, with pruning options",
    add_completion=False,
)

app.command("dot")(dot_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
