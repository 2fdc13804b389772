# SPDX-License-Identifier: MIT

"""Persisting a catalog's views through a ViewBackend.

Each operation takes the current catalog and returns the reconciled one.
When the backend request fails, BackendRequestFailure propagates and the
catalog passed in is left exactly as it was.
"""

import logging
from contextlib import contextmanager
from copy import deepcopy
from typing import Iterator, Optional

from tableview.errors import BackendRequestFailure, ViewBusyError
from tableview.model.catalog import ViewCatalog
from tableview.model.view import ViewOrder
from tableview.service.backend import ViewBackend
from tableview.service.catalog import load_views, remove_view
from tableview.service.document import view_from_response, view_to_request

logger = logging.getLogger(__name__)


class ViewSync:
    def __init__(self, backend: ViewBackend) -> None:
        self.backend = backend
        self._in_flight: set[str] = set()

    @contextmanager
    def __mutation(self, key: str) -> Iterator[None]:
        # A second mutation for the same view would let a stale response win
        if key in self._in_flight:
            raise ViewBusyError(f"A request for {key} is already in progress")
        self._in_flight.add(key)
        try:
            yield
        finally:
            self._in_flight.discard(key)

    def is_busy(self, catalog: ViewCatalog, index: Optional[int] = None) -> bool:
        if index is None:
            index = catalog["selected_index"]
        return self.__view_key(catalog, index) in self._in_flight

    def fetch_views(self, catalog: ViewCatalog) -> ViewCatalog:
        page = catalog["page"]
        try:
            responses = self.backend.list_views(page)
        except BackendRequestFailure:
            logger.warning("Fetching views for page '%s' failed", page)
            raise
        logger.debug("Fetched %d views for page '%s'", len(responses), page)
        return load_views(catalog, responses)

    def save_view(
        self, catalog: ViewCatalog, index: Optional[int] = None
    ) -> ViewCatalog:
        if index is None:
            index = catalog["selected_index"]
        if catalog["views"][index]["id"] is None:
            return self.create_view(catalog, index)
        return self.update_view(catalog, index)

    def create_view(self, catalog: ViewCatalog, index: int) -> ViewCatalog:
        view = catalog["views"][index]
        if view["id"] is not None:
            raise ValueError(f"View '{view['title']}' is already saved")

        with self.__mutation(self.__view_key(catalog, index)):
            try:
                response = self.backend.create_view(view_to_request(view, index))
            except BackendRequestFailure:
                logger.warning("Creating view '%s' failed", view["title"])
                raise

        new_catalog = deepcopy(catalog)
        new_catalog["views"][index] = view_from_response(response, catalog["page"])
        new_catalog["selected_index"] = index
        logger.debug("Created view %s '%s'", response["id"], view["title"])
        return new_catalog

    def update_view(self, catalog: ViewCatalog, index: int) -> ViewCatalog:
        view = catalog["views"][index]
        if view["id"] is None:
            raise ValueError(f"View '{view['title']}' has not been created yet")

        with self.__mutation(self.__view_key(catalog, index)):
            try:
                self.backend.update_view(view_to_request(view, index))
            except BackendRequestFailure:
                logger.warning("Updating view %s failed", view["id"])
                raise

        new_catalog = deepcopy(catalog)
        new_catalog["views"][index]["saved"] = True
        logger.debug("Updated view %s", view["id"])
        return new_catalog

    def delete_view(self, catalog: ViewCatalog, index: int) -> ViewCatalog:
        view = catalog["views"][index]
        if view["id"] is None:
            return remove_view(catalog, index)

        with self.__mutation(self.__view_key(catalog, index)):
            try:
                self.backend.delete_view(view["id"])
            except BackendRequestFailure:
                logger.warning("Deleting view %s failed", view["id"])
                raise

        logger.debug("Deleted view %s", view["id"])
        return remove_view(catalog, index)

    def save_order(self, catalog: ViewCatalog) -> ViewCatalog:
        order: list[ViewOrder] = [
            {"id": view["id"], "view_order": index}
            for index, view in enumerate(catalog["views"])
            if view["id"] is not None
        ]

        with self.__mutation(f"{catalog['page']}:order"):
            try:
                self.backend.reorder_views(order)
            except BackendRequestFailure:
                logger.warning("Saving view order for '%s' failed", catalog["page"])
                raise

        new_catalog = deepcopy(catalog)
        new_catalog["order_saved"] = True
        return new_catalog

    def __view_key(self, catalog: ViewCatalog, index: int) -> str:
        view_id = catalog["views"][index]["id"]
        if view_id is None:
            return f"{catalog['page']}:new:{index}"
        return f"{catalog['page']}:{view_id}"
