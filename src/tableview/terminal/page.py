# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table

from tableview.query.comparator import func_names
from tableview.query.filter_type import category_for_value_type
from tableview.template.page import get_page_template
from tableview.terminal.common import PAGE_HELP, resolve_page
from tableview.view.views.header import header


def pages(
    page: Annotated[Optional[str], typer.Argument(help=PAGE_HELP)] = None,
) -> None:
    """List the columns of a page and how each can be used."""
    page = resolve_page(page)
    page_template = get_page_template(page)
    header(page, "columns")

    table = Table(box=box.SIMPLE)
    table.add_column("key", style="cyan")
    table.add_column("heading")
    table.add_column("type")
    table.add_column("default")
    table.add_column("sortable")
    table.add_column("filters")

    for column in page_template["all_columns"]:
        filters = ""
        if column["key"] in page_template["filterable_columns"]:
            filters = ", ".join(func_names(category_for_value_type(column["valueType"])))
        table.add_row(
            column["key"],
            column["heading"],
            column["valueType"] + (" (locked)" if column.get("locked", False) else ""),
            "✓" if column["key"] in page_template["default_columns"] else "",
            "✓" if column["key"] in page_template["sortable_columns"] else "",
            filters,
        )

    console = Console()
    console.print(table)

    filter_template = page_template["filter_template"]
    sort_template = page_template["sort_template"]
    console.print(
        f" new filter rows: {filter_template['key']} {filter_template['funcName']} "
        f"{filter_template['parameter']}"
    )
    console.print(f" new sort rows: {sort_template['key']}:{sort_template['direction']}")
    if page_template["date_key"] is not None:
        console.print(f" --from/--to apply to: {page_template['date_key']}")
