# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from tableview import configuration
from tableview.logging_config import level_from_name
from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.template.page import get_page_names
from tableview.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("show, sh")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header", "✓ Enabled" if config["show_header"] else "✗ Disabled"
    )
    table.add_row("default_page", config["default_page"])
    table.add_row("page_size", str(config["page_size"]))
    table.add_row(
        "strict_catalog", "✓ Enabled" if config["strict_catalog"] else "✗ Disabled"
    )
    table.add_row("log_level", config.get("log_level", "WARNING"))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above every report",
        ),
    ] = None,
    default_page: Annotated[
        Optional[str],
        typer.Option("--default-page", help="Page used when --page is not given"),
    ] = None,
    page_size: Annotated[
        Optional[int],
        typer.Option("--page-size", help="Records fetched per page"),
    ] = None,
    strict_catalog: Annotated[
        Optional[bool],
        typer.Option(
            "--strict-catalog/--no-strict-catalog",
            help="Fail on an invalid view catalog instead of correcting it",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files (None = user data directory)",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to None (use the user data directory)",
        ),
    ] = False,
) -> None:
    """Update configuration settings."""
    if default_page is not None and default_page not in get_page_names():
        raise typer.BadParameter(
            f"Unknown page '{default_page}', expected one of: {', '.join(get_page_names())}"
        )
    if log_level is not None:
        try:
            level_from_name(log_level)
        except ValueError as e:
            raise typer.BadParameter(str(e))

    try:
        CONFIGURATION_REPO.update_config(
            show_header=show_header,
            default_page=default_page,
            page_size=page_size,
            strict_catalog=strict_catalog,
            log_level=log_level,
            data_path=data_path,
            remove_data_path=remove_data_path,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    show()
