# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from tableview.color import SELECTED_COLOR, UNSAVED_COLOR
from tableview.model.catalog import ViewCatalog
from tableview.model.view import SortBy, View
from tableview.query.codec import deserialize_or_none
from tableview.view.views.filter import filter_view
from tableview.view.views.header import header


def format_sort_by(sort_by: list[SortBy]) -> str:
    return ", ".join(f"{sort['key']}:{sort['direction']}" for sort in sort_by)


def catalog_view(catalog: ViewCatalog) -> None:
    order_note = "" if catalog["order_saved"] else " (order not saved)"
    header(catalog["page"], f"views{order_note}")

    views_table = Table(box=box.SIMPLE)
    views_table.add_column("index")
    views_table.add_column("id")
    views_table.add_column("title")
    views_table.add_column("saved")
    views_table.add_column("columns")
    views_table.add_column("sort")
    views_table.add_column("group")

    for index, view in enumerate(catalog["views"]):
        title = view["title"]
        if index == catalog["selected_index"]:
            title = f"[{SELECTED_COLOR}]* {title}[/{SELECTED_COLOR}]"
        saved = "✓" if view["saved"] else f"[{UNSAVED_COLOR}]✗[/{UNSAVED_COLOR}]"
        views_table.add_row(
            str(index),
            str(view["id"]) if view["id"] is not None else "new",
            title,
            saved,
            str(len(view["columns"])),
            format_sort_by(view["sort_by"]),
            view["group_by"] or "",
        )

    console = Console()
    console.print(views_table)


def single_view_view(page: str, view: View) -> None:
    header(page, "view")

    view_table = Table(box=box.SIMPLE)
    view_table.add_column("property")
    view_table.add_column("value")

    view_table.add_row("id", str(view["id"]) if view["id"] is not None else "new")
    view_table.add_row("title", view["title"])
    view_table.add_row("saved", "✓" if view["saved"] else "✗")
    view_table.add_row("columns", ", ".join(view["columns"]))
    view_table.add_row("sort", format_sort_by(view["sort_by"]))
    view_table.add_row("group", view["group_by"] or "")

    console = Console()
    console.print(view_table)
    filter_view(deserialize_or_none(view["filter"]))
