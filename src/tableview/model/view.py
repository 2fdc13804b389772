# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

from tableview.model.column import ColumnMetaData
from tableview.model.filter import FilterDocument

ViewId: TypeAlias = int

SortDirection = Literal["asc", "desc"]


class SortBy(TypedDict):
    key: str
    direction: SortDirection


class View(TypedDict):
    id: Optional[ViewId]
    page: str
    title: str
    saved: bool
    columns: list[str]
    filter: Optional[FilterDocument]
    sort_by: list[SortBy]
    group_by: Optional[str]


class ViewDocument(TypedDict):
    """Persisted form of a view, as exchanged with the backend."""

    page: str
    title: str
    columns: list[ColumnMetaData]
    filter: Optional[FilterDocument]
    sortBy: list[SortBy]
    groupBy: Optional[str]
    view_order: int


class ViewRequest(TypedDict):
    id: Optional[ViewId]
    view: ViewDocument


class ViewResponse(TypedDict):
    id: ViewId
    view: ViewDocument


class ViewOrder(TypedDict):
    id: ViewId
    view_order: int
