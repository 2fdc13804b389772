# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy

from tableview.model.column import ColumnMetaData
from tableview.model.view import View, ViewDocument, ViewRequest, ViewResponse
from tableview.template.page import get_page_template

logger = logging.getLogger(__name__)


def view_to_document(view: View, view_order: int) -> ViewDocument:
    """Build the persisted document for a view.

    Columns are resolved against the page's current column catalog so the
    stored metadata always reflects the latest headings and types.
    """
    catalog = {
        column["key"]: column
        for column in get_page_template(view["page"])["all_columns"]
    }
    columns: list[ColumnMetaData] = [
        deepcopy(catalog[key]) for key in view["columns"] if key in catalog
    ]
    return {
        "page": view["page"],
        "title": view["title"],
        "columns": columns,
        "filter": deepcopy(view["filter"]),
        "sortBy": deepcopy(view["sort_by"]),
        "groupBy": view["group_by"],
        "view_order": view_order,
    }


def view_to_request(view: View, view_order: int) -> ViewRequest:
    return {"id": view["id"], "view": view_to_document(view, view_order)}


def view_from_response(response: ViewResponse, page: str) -> View:
    document = response["view"]
    known_keys = {column["key"] for column in get_page_template(page)["all_columns"]}

    columns: list[str] = []
    for column in document.get("columns") or []:
        key = column["key"] if isinstance(column, dict) else column
        if key in known_keys:
            columns.append(key)
        else:
            logger.warning(
                "Dropping unknown column '%s' from view %s", key, response["id"]
            )

    return {
        "id": response["id"],
        "page": document.get("page") or page,
        "title": document["title"],
        "saved": True,
        "columns": columns,
        "filter": deepcopy(document.get("filter")),
        "sort_by": deepcopy(document.get("sortBy") or []),
        "group_by": document.get("groupBy"),
    }
