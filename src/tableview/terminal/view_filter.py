# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from tableview.model.catalog import ViewCatalog
from tableview.query.codec import deserialize_or_none, serialize
from tableview.query.comparator import func_names
from tableview.query.filter import (
    AndClause,
    Clause,
    FilterClause,
    OrClause,
    find_clause,
    find_parent,
)
from tableview.query.filter_type import FilterType, category_for_value_type
from tableview.service.catalog import get_selected_view, update_filter
from tableview.service.session import load_catalog, save_catalog
from tableview.template.page import get_column, get_page_template
from tableview.terminal.common import PAGE_HELP, exit_on_error, resolve_page
from tableview.terminal.custom_typer import AlphabeticalGroup
from tableview.terminal.parse import parse_parameter
from tableview.view.views.filter import filter_view

app = typer.Typer(
    cls=AlphabeticalGroup,
    no_args_is_help=True,
    help="Edit the filter tree of the selected view",
)

PageOption = Annotated[
    Optional[str], typer.Option("--page", "-p", help=PAGE_HELP)
]
GroupOption = Annotated[
    Optional[str],
    typer.Option(
        "--group", "-g", help="Id (or id prefix) of the and/or group to add to"
    ),
]


def get_root(catalog: ViewCatalog) -> AndClause | OrClause:
    """The selected view's filter tree, always rooted at an and/or group."""
    root: Optional[Clause] = deserialize_or_none(get_selected_view(catalog)["filter"])
    if root is None:
        return AndClause()
    if isinstance(root, FilterClause):
        return AndClause(children=[root])
    return root


def resolve_clause_id(root: Clause, id_prefix: str) -> str:
    matches = [clause_id for clause_id in _clause_ids(root) if clause_id.startswith(id_prefix)]
    if not matches:
        raise ValueError(f"No filter clause with id '{id_prefix}'")
    if len(matches) > 1:
        raise ValueError(f"Filter clause id '{id_prefix}' is ambiguous")
    return matches[0]


def _clause_ids(clause: Clause) -> list[str]:
    ids = [clause.id]
    if isinstance(clause, (AndClause, OrClause)):
        for child in clause.children:
            ids += _clause_ids(child)
    return ids


def _get_group(root: AndClause | OrClause, group: Optional[str]) -> AndClause | OrClause:
    if group is None:
        return root
    target = find_clause(root, resolve_clause_id(root, group))
    if not isinstance(target, (AndClause, OrClause)):
        raise ValueError(f"Filter clause '{group}' is not an and/or group")
    return target


def _save_root(catalog: ViewCatalog, root: Clause) -> ViewCatalog:
    return save_catalog(update_filter(catalog, serialize(root)))


@app.command("show, sh")
def show(page: PageOption = None) -> None:
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
    filter_view(deserialize_or_none(get_selected_view(catalog)["filter"]))


@app.command("add, a")
def add(
    key: Annotated[str, typer.Argument(help="Column key to compare")],
    func_name: Annotated[
        str, typer.Argument(help="Comparator, e.g. eq, neq, gt, like, includes")
    ],
    parameter: Annotated[
        str,
        typer.Argument(
            help="Value to compare with (dates: YYYY-MM-DD, today, yesterday, tomorrow or last:N)"
        ),
    ],
    group: GroupOption = None,
    page: PageOption = None,
) -> None:
    """Add a comparison to the filter of the selected view."""
    page = resolve_page(page)
    column = get_column(page, key)
    if column is None or key not in get_page_template(page)["filterable_columns"]:
        raise typer.BadParameter(f"Column '{key}' cannot be filtered on page '{page}'")
    category = category_for_value_type(column["valueType"])
    if func_name not in func_names(category):
        raise typer.BadParameter(
            f"Unknown comparator '{func_name}' for {category} columns, "
            f"expected one of: {', '.join(func_names(category))}"
        )
    value = parse_parameter(category, parameter)

    with exit_on_error():
        catalog = load_catalog(page)
        root = get_root(catalog)
        _get_group(root, group).add_child(
            FilterClause(key=key, category=category, func_name=func_name, parameter=value)
        )
        catalog = _save_root(catalog, root)
    filter_view(root)


@app.command("template, t")
def template(group: GroupOption = None, page: PageOption = None) -> None:
    """Add the page's default comparison to the filter of the selected view."""
    page = resolve_page(page)
    filter_template = get_page_template(page)["filter_template"]
    with exit_on_error():
        catalog = load_catalog(page)
        root = get_root(catalog)
        _get_group(root, group).add_child(
            FilterClause(
                key=filter_template["key"],
                category=filter_template["category"],
                func_name=filter_template["funcName"],
                parameter=filter_template["parameter"],
            )
        )
        catalog = _save_root(catalog, root)
    filter_view(root)


@app.command("group, g")
def add_group(
    filter_type: Annotated[FilterType, typer.Argument(help="and / or")],
    group: GroupOption = None,
    page: PageOption = None,
) -> None:
    """Add an empty and/or group to the filter of the selected view."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        root = get_root(catalog)
        new_group = AndClause() if filter_type == FilterType.AND else OrClause()
        _get_group(root, group).add_child(new_group)
        catalog = _save_root(catalog, root)
    filter_view(root)


@app.command("remove, rm")
def remove(
    clause_id: Annotated[str, typer.Argument(help="Id (or id prefix) of the clause")],
    page: PageOption = None,
) -> None:
    """Remove a clause, with everything under it, from the filter."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = load_catalog(page)
        root = get_root(catalog)
        full_id = resolve_clause_id(root, clause_id)
        parent = find_parent(root, full_id)
        if parent is None:
            raise ValueError("The root group cannot be removed, use clear instead")
        parent.remove_child(full_id)
        catalog = _save_root(catalog, root)
    filter_view(root)


@app.command("clear, c")
def clear(page: PageOption = None) -> None:
    """Remove every clause from the filter of the selected view."""
    page = resolve_page(page)
    with exit_on_error():
        catalog = _save_root(load_catalog(page), AndClause())
    filter_view(deserialize_or_none(get_selected_view(catalog)["filter"]))
