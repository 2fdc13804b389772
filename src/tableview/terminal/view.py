# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tableview.service.catalog import (
    add_view,
    get_selected_view,
    reorder_views,
    select_view,
    update_columns,
    update_group_by,
    update_sort_by,
    update_title,
)
from tableview.service.session import VIEW_SYNC, load_catalog, save_catalog
from tableview.terminal import view_filter
from tableview.terminal.common import PAGE_HELP, exit_on_error, resolve_page
from tableview.terminal.custom_typer import AlphabeticalGroup
from tableview.terminal.parse import parse_index_list, parse_key_list, parse_sort
from tableview.view.views.catalog import catalog_view, single_view_view

app = typer.Typer(
    cls=AlphabeticalGroup, no_args_is_help=True, help="Saved table views"
)
app.add_typer(view_filter.app, name="filter, f")

PageOption = Annotated[
    Optional[str], typer.Option("--page", "-p", help=PAGE_HELP)
]
IndexOption = Annotated[
    Optional[int],
    typer.Option("--index", "-i", help="View index (defaults to the selected view)"),
]


@app.command("list, ls")
def list_views(page: PageOption = None) -> None:
    """List the views of a page; * marks the selected view."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
    catalog_view(catalog)


@app.command("fetch, fe")
def fetch(page: PageOption = None) -> None:
    """Reload the views of a page from the view store.

    Unsaved edits and unsaved new views are kept.
    """
    page = resolve_page(page)
    with exit_on_error():
        catalog = save_catalog(load_catalog(page, refresh=True))
    catalog_view(catalog)


@app.command("show, sh")
def show(page: PageOption = None, index: IndexOption = None) -> None:
    """Show a view's columns, sort, grouping and filter tree."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        if index is not None:
            catalog = select_view(catalog, index)
        view = get_selected_view(catalog)
    single_view_view(page, view)


@app.command("select, sl")
def select(index: int, page: PageOption = None) -> None:
    page = resolve_page(page)
    with exit_on_error():
        catalog = save_catalog(select_view(load_catalog(page), index))
    catalog_view(catalog)


@app.command("add, a")
def add(
    page: PageOption = None,
    title: Annotated[
        Optional[str], typer.Option("--title", "-t", help="Title of the new view")
    ] = None,
    copy: Annotated[
        bool, typer.Option("--copy", "-c", help="Start from the selected view")
    ] = False,
) -> None:
    """Add a new, unsaved view and select it."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        template = None
        if copy:
            template = get_selected_view(catalog)
            template["title"] = f"{template['title']} (copy)"
            template["saved"] = False
        catalog = add_view(catalog, template)
        if title is not None:
            catalog = update_title(catalog, title)
        catalog = save_catalog(catalog)
    catalog_view(catalog)


@app.command("rename, rn")
def rename(title: str, page: PageOption = None) -> None:
    """Rename the selected view."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = save_catalog(update_title(load_catalog(page), title))
    catalog_view(catalog)


@app.command("columns, co")
def columns(
    keys: Annotated[
        Optional[str],
        typer.Argument(help="Comma-separated column keys, in display order"),
    ] = None,
    add: Annotated[
        Optional[list[str]], typer.Option("--add", "-a", help="Append a column")
    ] = None,
    remove: Annotated[
        Optional[list[str]], typer.Option("--remove", "-r", help="Remove a column")
    ] = None,
    page: PageOption = None,
) -> None:
    """Set the columns shown by the selected view."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        new_columns = (
            parse_key_list(keys)
            if keys is not None
            else get_selected_view(catalog)["columns"]
        )
        new_columns += [key for key in add or [] if key not in new_columns]
        new_columns = [key for key in new_columns if key not in (remove or [])]
        catalog = save_catalog(update_columns(catalog, new_columns))
    single_view_view(page, get_selected_view(catalog))


@app.command("sort, so")
def sort(
    sorts: Annotated[
        Optional[list[str]],
        typer.Argument(help="Sort instructions as key or key:desc, most significant first"),
    ] = None,
    clear: Annotated[
        bool, typer.Option("--clear", help="Remove all sort instructions")
    ] = False,
    page: PageOption = None,
) -> None:
    """Set the sort instructions of the selected view."""
    page = resolve_page(page)
    if not sorts and not clear:
        raise typer.BadParameter("Provide sort instructions or --clear")
    sort_by = [] if clear else [parse_sort(sort_param) for sort_param in sorts or []]
    with exit_on_error():
        catalog = save_catalog(update_sort_by(load_catalog(page), sort_by))
    single_view_view(page, get_selected_view(catalog))


@app.command("group, g")
def group(
    key: Annotated[Optional[str], typer.Argument(help="Column key to group by")] = None,
    clear: Annotated[bool, typer.Option("--clear", help="Remove grouping")] = False,
    page: PageOption = None,
) -> None:
    """Group the selected view's records by a column."""
    page = resolve_page(page)
    if key is None and not clear:
        raise typer.BadParameter("Provide a column key or --clear")
    with exit_on_error():
        catalog = save_catalog(
            update_group_by(load_catalog(page), None if clear else key)
        )
    single_view_view(page, get_selected_view(catalog))


@app.command("save, s")
def save(page: PageOption = None, index: IndexOption = None) -> None:
    """Persist a view to the view store, creating it if it is new."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        catalog = save_catalog(VIEW_SYNC.save_view(catalog, index))
    catalog_view(catalog)


@app.command("delete, d")
def delete(page: PageOption = None, index: IndexOption = None) -> None:
    """Delete a view; an unsaved view is only dropped locally."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        if index is None:
            index = catalog["selected_index"]
        if not 0 <= index < len(catalog["views"]):
            raise IndexError(f"No view at index {index}")
        catalog = save_catalog(VIEW_SYNC.delete_view(catalog, index))
    catalog_view(catalog)


@app.command("order, o")
def order(
    new_order: Annotated[
        Optional[str],
        typer.Argument(help="Current indexes in their new order, e.g. 2,0,1"),
    ] = None,
    save: Annotated[
        bool, typer.Option("--save", "-s", help="Persist the view order")
    ] = False,
    page: PageOption = None,
) -> None:
    """Reorder the views of a page."""
    page = resolve_page(page)
    if new_order is None and not save:
        raise typer.BadParameter("Provide a new order or --save")
    with exit_on_error():
        catalog = load_catalog(page)
        if new_order is not None:
            catalog = reorder_views(catalog, parse_index_list(new_order))
        if save:
            catalog = VIEW_SYNC.save_order(catalog)
        catalog = save_catalog(catalog)
    catalog_view(catalog)
