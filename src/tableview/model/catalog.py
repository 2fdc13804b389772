# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from tableview.model.view import View

CatalogStatus = Literal["idle", "loading", "failed"]


class ViewCatalog(TypedDict):
    page: str
    views: list[View]
    selected_index: int
    # False while a reorder has not been persisted, independent of view.saved
    order_saved: bool
    status: CatalogStatus
