# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tableview.logging_config import configure_logging, level_from_name
from tableview.terminal import configuration, view
from tableview.terminal.custom_typer import TableViewTyperGroup
from tableview.terminal.page import pages
from tableview.terminal.records import records
from tableview.view import state as view_state

app = typer.Typer(
    cls=TableViewTyperGroup,
    help="tableview - Saved views over tabular data in the CLI",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(view.app, name="view, v")
app.command(name="records, r")(records)
app.command(name="pages, p")(pages)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_wrap: Annotated[
        bool,
        typer.Option("--no-wrap", help="Truncate long cells instead of wrapping"),
    ] = False,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Override log_level from the config"),
    ] = None,
) -> None:
    """
    tableview - Saved views over tabular data in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if no_wrap:
        view_state.set_no_wrap(True)
    if log_level is not None:
        try:
            configure_logging(level_from_name(log_level))
        except ValueError as e:
            raise typer.BadParameter(str(e))


def run() -> None:
    app()
