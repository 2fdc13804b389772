# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from tableview.model.column import ColumnMetaData
from tableview.model.filter import FilterTemplate
from tableview.model.view import SortBy


class PageTemplate(TypedDict):
    """Static description of one tabular resource page."""

    page: str
    default_title: str
    all_columns: list[ColumnMetaData]
    default_columns: list[str]
    sortable_columns: list[str]
    filterable_columns: list[str]
    filter_template: FilterTemplate
    sort_template: SortBy
    default_sort: list[SortBy]
    # Record field used for --from/--to range queries
    date_key: Optional[str]
