# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import typer

from tableview.errors import TableViewError
from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.template.page import get_page_names

logger = logging.getLogger(__name__)

PAGE_HELP = "Resource page (defaults to default_page from the config)"


def resolve_page(page: Optional[str]) -> str:
    if page is None:
        page = CONFIGURATION_REPO.get_config()["default_page"]
    if page not in get_page_names():
        raise typer.BadParameter(
            f"Unknown page '{page}', expected one of: {', '.join(get_page_names())}"
        )
    return page


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn a failed operation into an error message and exit code 1."""
    try:
        yield
    except (TableViewError, ValueError, IndexError) as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except KeyError as e:
        typer.echo(f"Error: no such entry {e}", err=True)
        raise typer.Exit(1)
