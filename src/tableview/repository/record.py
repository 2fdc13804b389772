# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from tableview import configuration
from tableview.errors import BackendRequestFailure
from tableview.model.record import Record, RecordPage, RecordQuery
from tableview.template.page import get_page_template
from tableview.time import to_utc_instant


class RecordRepository:
    """Read-only record source; one YAML file per page under records/."""

    def __init__(self) -> None:
        self._records: dict[str, list[Record]] = {}

    def __records_path(self, page: str) -> Path:
        return configuration.DATA_RECORDS_DIR / f"{page}.yaml"

    def __load_data(self, page: str) -> list[Record]:
        path = self.__records_path(page)
        if not path.is_file():
            return []
        try:
            raw: Any = load(path.read_text(), Loader=Loader)
        except (OSError, YAMLError) as e:
            raise BackendRequestFailure("fetch records", str(e)) from e
        if raw is None:
            return []
        if isinstance(raw, dict):
            raw = raw.get("records") or []
        if not isinstance(raw, list):
            raise BackendRequestFailure(
                "fetch records", f"{path.name} does not hold a list of records"
            )
        return [record for record in raw if isinstance(record, dict)]

    def reset(self) -> None:
        self._records = {}

    def get_all_records(self, page: str) -> list[Record]:
        if page not in self._records:
            self._records[page] = self.__load_data(page)
        return deepcopy(self._records[page])

    def fetch_records(self, page: str, query: RecordQuery) -> RecordPage:
        records = self.get_all_records(page)

        date_key = get_page_template(page)["date_key"]
        if date_key is not None:
            records = [
                record
                for record in records
                if _in_range(record.get(date_key), query["from_date"], query["to_date"])
            ]

        total = len(records)
        start = query["offset"]
        end = None if query["limit"] is None else start + query["limit"]
        return {"records": records[start:end], "total": total}


def _in_range(value: Any, from_date: Optional[Any], to_date: Optional[Any]) -> bool:
    if from_date is None and to_date is None:
        return True
    instant = to_utc_instant(value)
    if instant is None:
        return False
    if from_date is not None and instant < from_date:
        return False
    # The to date is inclusive: everything before the start of the next day
    if to_date is not None and instant >= to_date.start_of("day").add(days=1):
        return False
    return True


RECORD_REPO = RecordRepository()
