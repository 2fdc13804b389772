# SPDX-License-Identifier: MIT

"""Shared fixtures: a temporary data directory and an in-memory view backend."""

import logging
from copy import deepcopy
from typing import Optional

import pytest

from tableview import configuration
from tableview.errors import BackendRequestFailure
from tableview.initialize import initialize
from tableview.logging_config import LOGGER_NAME
from tableview.model.view import ViewId, ViewOrder, ViewRequest, ViewResponse
from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.repository.record import RECORD_REPO
from tableview.repository.session import SESSION_REPO
from tableview.repository.view import VIEW_REPO
from tableview.view import state as view_state


def _reset_repositories() -> None:
    CONFIGURATION_REPO.reset()
    VIEW_REPO.reset()
    SESSION_REPO.reset()
    RECORD_REPO.reset()


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    config_path = tmp_path / "config"
    data_path = tmp_path / "data"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_VIEWS_PATH", data_path / "views.yaml")
    monkeypatch.setattr(configuration, "DATA_SESSION_PATH", data_path / "session.yaml")
    monkeypatch.setattr(configuration, "DATA_RECORDS_DIR", data_path / "records")
    _reset_repositories()

    initialize()
    # initialize() installs a stream handler; hand records back to pytest
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)

    yield data_path

    _reset_repositories()
    view_state.set_show_header(True)
    view_state.set_no_wrap(False)


class FakeBackend:
    """In-memory ViewBackend; operations named in fail raise BackendRequestFailure."""

    def __init__(self, views: Optional[list[ViewResponse]] = None) -> None:
        self.views: list[ViewResponse] = deepcopy(views or [])
        self.next_id = max([view["id"] for view in self.views], default=0) + 1
        self.fail: set[str] = set()
        self.calls: list[str] = []

    def __check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail:
            raise BackendRequestFailure(operation, "injected failure")

    def list_views(self, page: str) -> list[ViewResponse]:
        self.__check("list_views")
        return deepcopy(
            sorted(
                (view for view in self.views if view["view"]["page"] == page),
                key=lambda view: view["view"]["view_order"],
            )
        )

    def create_view(self, request: ViewRequest) -> ViewResponse:
        self.__check("create_view")
        response: ViewResponse = {"id": self.next_id, "view": deepcopy(request["view"])}
        self.next_id += 1
        self.views.append(response)
        return deepcopy(response)

    def update_view(self, request: ViewRequest) -> ViewResponse:
        self.__check("update_view")
        for view in self.views:
            if view["id"] == request["id"]:
                view["view"] = deepcopy(request["view"])
                return deepcopy(view)
        raise BackendRequestFailure("update_view", "not found", request["id"])

    def delete_view(self, view_id: ViewId) -> None:
        self.__check("delete_view")
        self.views = [view for view in self.views if view["id"] != view_id]

    def reorder_views(self, order: list[ViewOrder]) -> None:
        self.__check("reorder_views")
        positions = {entry["id"]: entry["view_order"] for entry in order}
        for view in self.views:
            if view["id"] in positions:
                view["view"]["view_order"] = positions[view["id"]]


def make_response(view_id: int, title: str, view_order: int = 0, page: str = "channels") -> ViewResponse:
    return {
        "id": view_id,
        "view": {
            "page": page,
            "title": title,
            "columns": [
                {"heading": "Peer Alias", "type": "AliasCell", "key": "peerAlias", "valueType": "string", "locked": True},
                {"heading": "Capacity", "type": "NumericCell", "key": "capacity", "valueType": "number"},
            ],
            "filter": None,
            "sortBy": [],
            "groupBy": None,
            "view_order": view_order,
        },
    }


@pytest.fixture
def backend():
    return FakeBackend(
        [
            make_response(1, "Big channels", 0),
            make_response(2, "Inactive", 1),
        ]
    )
