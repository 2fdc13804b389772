# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from tableview import configuration
from tableview.model.catalog import ViewCatalog

logger = logging.getLogger(__name__)


class SessionRepository:
    """Local working copy of each page's catalog between invocations.

    Holds the selection, unsaved edits and unsaved order that have not been
    pushed to the view store yet.
    """

    def __init__(self) -> None:
        self._catalogs: Optional[dict[str, ViewCatalog]] = None
        self.is_dirty = False

    @property
    def catalogs(self) -> dict[str, ViewCatalog]:
        if self._catalogs is None:
            self.__load_data()
        if self._catalogs is None:
            raise ValueError()
        return self._catalogs

    def __load_data(self) -> None:
        self._catalogs = {}
        if not configuration.DATA_SESSION_PATH.is_file():
            return
        try:
            raw = load(configuration.DATA_SESSION_PATH.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            logger.warning("Discarding unreadable session file: %s", e)
            return
        if isinstance(raw, dict):
            self._catalogs = raw.get("catalogs") or {}
        elif raw is not None:
            logger.warning("Discarding session file without a catalogs mapping")

    def __save_data(self, catalogs: dict[str, ViewCatalog]) -> None:
        configuration.DATA_SESSION_PATH.write_text(
            dump({"catalogs": catalogs}, Dumper=Dumper)
        )

    def flush(self) -> bool:
        if self._catalogs is not None and self.is_dirty:
            self.__save_data(self._catalogs)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._catalogs = None
        self.is_dirty = False

    def get_catalog(self, page: str) -> Optional[ViewCatalog]:
        catalog = self.catalogs.get(page)
        if catalog is None:
            return None
        return deepcopy(catalog)

    def save_catalog(self, catalog: ViewCatalog) -> None:
        self.is_dirty = True
        self.catalogs[catalog["page"]] = deepcopy(catalog)


SESSION_REPO = SessionRepository()
