# SPDX-License-Identifier: MIT

"""Transitions for a page's view catalog.

Every function takes a catalog and returns a new one; the argument is never
modified, so a caller can always fall back to the catalog it started from.
Local edits flag the selected view as unsaved; nothing here talks to the
backend.
"""

import logging
from copy import deepcopy
from typing import Optional

from tableview.errors import InvalidCatalogStateError
from tableview.model.catalog import ViewCatalog
from tableview.model.filter import FilterDocument
from tableview.model.view import SortBy, View, ViewResponse
from tableview.service.document import view_from_response
from tableview.template.page import get_page_template
from tableview.template.view import get_view_template

logger = logging.getLogger(__name__)


def get_selected_view(catalog: ViewCatalog) -> View:
    return deepcopy(catalog["views"][catalog["selected_index"]])


def select_view(catalog: ViewCatalog, index: int) -> ViewCatalog:
    if not 0 <= index < len(catalog["views"]):
        raise IndexError(f"No view at index {index}")
    new_catalog = deepcopy(catalog)
    new_catalog["selected_index"] = index
    return new_catalog


def update_filter(
    catalog: ViewCatalog, filter: Optional[FilterDocument]
) -> ViewCatalog:
    new_catalog, view = _edit_selected(catalog)
    view["filter"] = deepcopy(filter)
    return new_catalog


def update_columns(catalog: ViewCatalog, columns: list[str]) -> ViewCatalog:
    page_template = get_page_template(catalog["page"])
    known_keys = [column["key"] for column in page_template["all_columns"]]

    unknown = [key for key in columns if key not in known_keys]
    if unknown:
        raise ValueError(f"Unknown columns: {', '.join(unknown)}")
    locked = [
        column["key"]
        for column in page_template["all_columns"]
        if column.get("locked", False) and column["key"] not in columns
    ]
    if locked:
        raise ValueError(f"Locked columns cannot be removed: {', '.join(locked)}")

    new_catalog, view = _edit_selected(catalog)
    view["columns"] = list(dict.fromkeys(columns))
    return new_catalog


def update_sort_by(catalog: ViewCatalog, sort_by: list[SortBy]) -> ViewCatalog:
    sortable = get_page_template(catalog["page"])["sortable_columns"]
    for sort in sort_by:
        if sort["key"] not in sortable:
            raise ValueError(f"Column '{sort['key']}' is not sortable")
        if sort["direction"] not in ("asc", "desc"):
            raise ValueError(f"Invalid sort direction '{sort['direction']}'")

    new_catalog, view = _edit_selected(catalog)
    view["sort_by"] = deepcopy(sort_by)
    return new_catalog


def update_group_by(catalog: ViewCatalog, group_by: Optional[str]) -> ViewCatalog:
    if group_by is not None:
        known_keys = [
            column["key"]
            for column in get_page_template(catalog["page"])["all_columns"]
        ]
        if group_by not in known_keys:
            raise ValueError(f"Unknown column '{group_by}'")

    new_catalog, view = _edit_selected(catalog)
    view["group_by"] = group_by
    return new_catalog


def update_title(catalog: ViewCatalog, title: str) -> ViewCatalog:
    if title.strip() == "":
        raise ValueError("View title cannot be empty")
    new_catalog, view = _edit_selected(catalog)
    view["title"] = title
    return new_catalog


def add_view(catalog: ViewCatalog, view: Optional[View] = None) -> ViewCatalog:
    """Append a new unpersisted view and select it."""
    new_catalog = deepcopy(catalog)
    if view is None:
        view = get_view_template(catalog["page"])
    new_view = deepcopy(view)
    new_view["id"] = None
    new_view["page"] = catalog["page"]
    new_catalog["views"].append(new_view)
    new_catalog["selected_index"] = len(new_catalog["views"]) - 1
    return new_catalog


def reorder_views(catalog: ViewCatalog, new_order: list[int]) -> ViewCatalog:
    """Rearrange views; new_order lists the current indexes in their new order.

    The selected view stays selected at its new position, and the order is
    flagged as needing a save.
    """
    if sorted(new_order) != list(range(len(catalog["views"]))):
        raise ValueError(
            f"New order must be a permutation of 0..{len(catalog['views']) - 1}"
        )
    new_catalog = deepcopy(catalog)
    new_catalog["views"] = [deepcopy(catalog["views"][index]) for index in new_order]
    new_catalog["selected_index"] = new_order.index(catalog["selected_index"])
    if new_order != list(range(len(new_order))):
        new_catalog["order_saved"] = False
    return new_catalog


def remove_view(catalog: ViewCatalog, index: int) -> ViewCatalog:
    """Drop a view locally; the selection resets to the first view.

    Removing the last view leaves the page's default view in its place.
    """
    if not 0 <= index < len(catalog["views"]):
        raise IndexError(f"No view at index {index}")
    new_catalog = deepcopy(catalog)
    del new_catalog["views"][index]
    if not new_catalog["views"]:
        new_catalog["views"] = [
            get_view_template(catalog["page"], title="Default View")
        ]
    new_catalog["selected_index"] = 0
    return new_catalog


def load_views(catalog: ViewCatalog, responses: list[ViewResponse]) -> ViewCatalog:
    """Replace the catalog's views with those listed by the backend.

    Unsaved local views are kept after the persisted ones. The selection
    follows the previously selected view when it is still present.
    """
    new_catalog = deepcopy(catalog)
    page = catalog["page"]
    loaded = [view_from_response(response, page) for response in responses]
    unsaved_new = [
        view
        for view in catalog["views"]
        if view["id"] is None and not _is_pristine(view)
    ]
    dirty = {
        view["id"]: view
        for view in catalog["views"]
        if view["id"] is not None and not view["saved"]
    }

    views: list[View] = []
    for view in loaded:
        # Keep local edits of views that are still dirty
        views.append(deepcopy(dirty.get(view["id"], view)))
    views += deepcopy(unsaved_new)
    if not views:
        views = [get_view_template(page, title="Default View")]

    selected = catalog["views"][catalog["selected_index"]] if catalog["views"] else None
    new_catalog["views"] = views
    new_catalog["selected_index"] = _index_of(views, selected)
    new_catalog["order_saved"] = True
    new_catalog["status"] = "idle"
    return new_catalog


def set_status(catalog: ViewCatalog, status: str) -> ViewCatalog:
    new_catalog = deepcopy(catalog)
    new_catalog["status"] = status  # type: ignore[typeddict-item]
    return new_catalog


def check_catalog(catalog: ViewCatalog, strict: bool = False) -> ViewCatalog:
    """Enforce a non-empty catalog with an in-range selection.

    In strict mode a violation raises InvalidCatalogStateError; otherwise it
    is logged and corrected.
    """
    views = catalog["views"]
    selected_index = catalog["selected_index"]
    if views and 0 <= selected_index < len(views):
        return catalog

    message = (
        f"Catalog for page '{catalog['page']}' is invalid: "
        f"{len(views)} views, selected index {selected_index}"
    )
    if strict:
        raise InvalidCatalogStateError(message)
    logger.warning("%s, correcting", message)

    new_catalog = deepcopy(catalog)
    if not new_catalog["views"]:
        new_catalog["views"] = [
            get_view_template(catalog["page"], title="Default View")
        ]
    new_catalog["selected_index"] = min(
        max(selected_index, 0), len(new_catalog["views"]) - 1
    )
    return new_catalog


def _edit_selected(catalog: ViewCatalog) -> tuple[ViewCatalog, View]:
    new_catalog = deepcopy(catalog)
    view = new_catalog["views"][new_catalog["selected_index"]]
    view["saved"] = False
    return new_catalog, view


def _is_pristine(view: View) -> bool:
    return view["id"] is None and view["saved"]


def _index_of(views: list[View], selected: Optional[View]) -> int:
    if selected is None:
        return 0
    for index, view in enumerate(views):
        if selected["id"] is not None and view["id"] == selected["id"]:
            return index
        if selected["id"] is None and view == selected:
            return index
    return 0
