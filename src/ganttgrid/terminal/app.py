# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from ganttgrid.terminal import configuration
from ganttgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from ganttgrid.terminal.render import geometry, milestones, render
from ganttgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="ganttgrid - Project timelines in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.command(name="render, r")(render)
app.command(name="geometry, geo")(geometry)
app.command(name="milestones, m")(milestones)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log clamping and dropped entities",
        ),
    ] = False,
) -> None:
    """
    ganttgrid - Project timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


def run() -> None:
    app()
