# SPDX-License-Identifier: MIT

"""The working catalog of a page, carried between command invocations."""

import logging

from tableview.errors import BackendRequestFailure
from tableview.model.catalog import ViewCatalog
from tableview.repository.configuration import CONFIGURATION_REPO
from tableview.repository.session import SESSION_REPO
from tableview.repository.view import VIEW_REPO
from tableview.service.catalog import check_catalog, set_status
from tableview.service.view_sync import ViewSync
from tableview.template.catalog import get_catalog_template

logger = logging.getLogger(__name__)

VIEW_SYNC = ViewSync(VIEW_REPO)


def load_catalog(page: str, refresh: bool = False) -> ViewCatalog:
    """Return the page's catalog, fetching it from the view store the first
    time the page is used, after a failed fetch, or when refresh is requested.

    A failed fetch records the failed status in the session and re-raises.
    """
    catalog = SESSION_REPO.get_catalog(page)
    if catalog is None:
        catalog = get_catalog_template(page)
        refresh = True
    elif catalog["status"] == "failed":
        refresh = True

    if refresh:
        catalog = set_status(catalog, "loading")
        try:
            catalog = VIEW_SYNC.fetch_views(catalog)
        except BackendRequestFailure:
            save_catalog(set_status(catalog, "failed"))
            raise

    return check_catalog(catalog, strict=_is_strict())


def save_catalog(catalog: ViewCatalog) -> ViewCatalog:
    catalog = check_catalog(catalog, strict=_is_strict())
    SESSION_REPO.save_catalog(catalog)
    return catalog


def _is_strict() -> bool:
    return CONFIGURATION_REPO.get_config()["strict_catalog"]
