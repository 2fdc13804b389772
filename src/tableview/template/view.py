# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from tableview.model.view import View
from tableview.query.codec import serialize
from tableview.query.filter import AndClause
from tableview.template.page import get_page_template


def get_view_template(page: str, title: Optional[str] = None) -> View:
    """A blank, not yet persisted view for a page."""
    page_template = get_page_template(page)
    return {
        "id": None,
        "page": page,
        "title": title if title is not None else page_template["default_title"],
        "saved": True,
        "columns": list(page_template["default_columns"]),
        "filter": serialize(AndClause()),
        "sort_by": deepcopy(page_template["default_sort"]),
        "group_by": None,
    }
