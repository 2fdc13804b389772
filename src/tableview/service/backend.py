# SPDX-License-Identifier: MIT

from typing import Protocol

from tableview.model.record import RecordPage, RecordQuery
from tableview.model.view import ViewId, ViewOrder, ViewRequest, ViewResponse


class ViewBackend(Protocol):
    """Where saved views are persisted.

    Implementations raise BackendRequestFailure for every failed request.
    """

    def list_views(self, page: str) -> list[ViewResponse]: ...

    def create_view(self, request: ViewRequest) -> ViewResponse: ...

    def update_view(self, request: ViewRequest) -> ViewResponse: ...

    def delete_view(self, view_id: ViewId) -> None: ...

    def reorder_views(self, order: list[ViewOrder]) -> None: ...


class RecordSource(Protocol):
    def fetch_records(self, page: str, query: RecordQuery) -> RecordPage: ...
