from __future__ import annotations

import typer

from familytree.cli.commands.mrca import mrca_command
from familytree.cli.commands.show import show_command
from familytree.cli.commands.stats import stats_command

app = typer.Typer(
    name="familytree",
    help="Family tree loader and common-ancestor finder",
    add_completion=False,
)

app.command("show")(show_command)
app.command("mrca")(mrca_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
