# SPDX-License-Identifier: MIT

from typing import Any, Optional


class TableViewError(Exception):
    """Base class for all tableview errors."""


class MalformedFilterError(TableViewError):
    """A stored or transmitted filter document cannot be decoded."""

    def __init__(self, message: str, document: Any = None) -> None:
        super().__init__(message)
        self.document = document


class UnknownComparatorError(TableViewError):
    def __init__(self, category: str, func_name: str) -> None:
        super().__init__(f"No comparator '{func_name}' for category '{category}'")
        self.category = category
        self.func_name = func_name


class BackendRequestFailure(TableViewError):
    """A create/update/delete/reorder/fetch request to the backend failed.

    Local catalog state is never modified when this is raised; the caller may
    retry the operation or report it.
    """

    def __init__(self, operation: str, message: str, view_id: Optional[int] = None) -> None:
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.view_id = view_id


class InvalidCatalogStateError(TableViewError):
    """The catalog is empty or its selected index is out of range."""


class ViewBusyError(TableViewError):
    """A mutation for the same view is already in flight."""
