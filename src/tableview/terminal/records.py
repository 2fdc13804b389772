# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from tableview.model.record import RecordQuery
from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.repository.record import RECORD_REPO
from tableview.service.catalog import get_selected_view, select_view
from tableview.service.record import fetch_view_records, get_view_columns
from tableview.service.session import load_catalog
from tableview.terminal.common import PAGE_HELP, exit_on_error, resolve_page
from tableview.terminal.parse import parse_datetime
from tableview.view.views.records import records_view


def records(
    page: Annotated[Optional[str], typer.Option("--page", "-p", help=PAGE_HELP)] = None,
    index: Annotated[
        Optional[int],
        typer.Option("--index", "-i", help="View index (defaults to the selected view)"),
    ] = None,
    from_date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--from",
            "-f",
            parser=parse_datetime,
            help="Only records on or after this date (YYYY-MM-DD, today, yesterday, tomorrow, or day offset like -7)",
        ),
    ] = None,
    to_date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--to",
            "-t",
            parser=parse_datetime,
            help="Only records on or before this date, the whole day included",
        ),
    ] = None,
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", help="Page size (defaults to page_size from the config)"),
    ] = None,
    offset: Annotated[int, typer.Option("--offset", "-o", help="Records to skip")] = 0,
) -> None:
    """Show a page's records through a saved view."""
    page = resolve_page(page)
    if limit is None:
        limit = CONFIGURATION_REPO.get_config()["page_size"]
    if limit < 1 or offset < 0:
        raise typer.BadParameter("--limit must be positive and --offset not negative")

    query: RecordQuery = {
        "from_date": from_date,
        "to_date": to_date,
        "limit": limit,
        "offset": offset,
    }
    with exit_on_error():
        catalog = load_catalog(page)
        if index is not None:
            catalog = select_view(catalog, index)
        view = get_selected_view(catalog)
        rows, total = fetch_view_records(RECORD_REPO, view, query)

    records_view(page, view["title"], get_view_columns(view), rows, total)
