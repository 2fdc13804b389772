# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, TypedDict

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tableview import configuration
from tableview.errors import BackendRequestFailure
from tableview.model.view import (
    ViewDocument,
    ViewId,
    ViewOrder,
    ViewRequest,
    ViewResponse,
)


class StoredViews(TypedDict):
    next_id: int
    views: list[ViewResponse]


class ViewRepository:
    """File-backed view store answering the list/create/update/delete/reorder
    requests of ViewSync."""

    def __init__(self) -> None:
        self._data: Optional[StoredViews] = None
        self.is_dirty = False

    @property
    def data(self) -> StoredViews:
        if self._data is None:
            self.__load_data()
        if self._data is None:
            raise ValueError()
        return self._data

    def __load_data(self) -> None:
        if not configuration.DATA_VIEWS_PATH.is_file():
            self._data = {"next_id": 1, "views": []}
            return
        try:
            raw = load(configuration.DATA_VIEWS_PATH.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise BackendRequestFailure("load views", str(e)) from e
        if raw is None:
            raw = {}
        self._data = {
            "next_id": raw.get("next_id", 1),
            "views": raw.get("views") or [],
        }

    def __save_data(self, data: StoredViews) -> None:
        configuration.DATA_VIEWS_PATH.write_text(dump(data, Dumper=Dumper))

    def flush(self) -> bool:
        if self._data is not None and self.is_dirty:
            self.__save_data(self._data)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._data = None
        self.is_dirty = False

    def list_views(self, page: str) -> list[ViewResponse]:
        views = [view for view in self.data["views"] if view["view"]["page"] == page]
        views.sort(key=lambda view: (view["view"]["view_order"], view["id"]))
        return deepcopy(views)

    def create_view(self, request: ViewRequest) -> ViewResponse:
        if request["id"] is not None:
            raise BackendRequestFailure(
                "create view", "a new view must not carry an id", request["id"]
            )
        self.__validate_document(request["view"], "create view", None)

        self.is_dirty = True
        view_id = self.data["next_id"]
        self.data["next_id"] = view_id + 1
        response: ViewResponse = {"id": view_id, "view": deepcopy(request["view"])}
        self.data["views"].append(response)
        return deepcopy(response)

    def update_view(self, request: ViewRequest) -> ViewResponse:
        view_id = request["id"]
        if view_id is None:
            raise BackendRequestFailure("update view", "missing view id")
        self.__validate_document(request["view"], "update view", view_id)

        stored = self.__find(view_id, "update view")
        self.is_dirty = True
        stored["view"] = deepcopy(request["view"])
        return deepcopy(stored)

    def delete_view(self, view_id: ViewId) -> None:
        self.__find(view_id, "delete view")
        self.is_dirty = True
        self.data["views"] = [
            view for view in self.data["views"] if view["id"] != view_id
        ]

    def reorder_views(self, order: list[ViewOrder]) -> None:
        # Validate every entry first so a bad id leaves the stored order intact
        stored = [self.__find(entry["id"], "reorder views") for entry in order]
        self.is_dirty = True
        for view, entry in zip(stored, order):
            view["view"]["view_order"] = entry["view_order"]

    def __find(self, view_id: ViewId, operation: str) -> ViewResponse:
        for view in self.data["views"]:
            if view["id"] == view_id:
                return view
        raise BackendRequestFailure(operation, f"view {view_id} not found", view_id)

    def __validate_document(
        self, document: Any, operation: str, view_id: Optional[ViewId]
    ) -> None:
        required = ViewDocument.__required_keys__
        if not isinstance(document, dict) or not required <= document.keys():
            raise BackendRequestFailure(operation, "incomplete view document", view_id)


VIEW_REPO = ViewRepository()
