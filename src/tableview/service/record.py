# SPDX-License-Identifier: MIT

import logging

from tableview.errors import BackendRequestFailure
from tableview.model.column import ColumnMetaData
from tableview.model.record import Record, RecordQuery
from tableview.model.view import View
from tableview.query.pipeline import transform
from tableview.service.backend import RecordSource
from tableview.template.page import get_column

logger = logging.getLogger(__name__)


def get_view_columns(view: View) -> list[ColumnMetaData]:
    columns: list[ColumnMetaData] = []
    for key in view["columns"]:
        column = get_column(view["page"], key)
        if column is not None:
            columns.append(column)
    return columns


def fetch_view_records(
    source: RecordSource, view: View, query: RecordQuery
) -> tuple[list[Record], int]:
    """Run every record in the query's date range through the view's group,
    filter and sort, then cut the requested window from the result.

    Returns the window and the number of rows the view produced in total.
    """
    full_range: RecordQuery = {
        "from_date": query["from_date"],
        "to_date": query["to_date"],
        "limit": None,
        "offset": 0,
    }
    try:
        page = source.fetch_records(view["page"], full_range)
    except BackendRequestFailure:
        logger.warning("Fetching records for page '%s' failed", view["page"])
        raise
    records = transform(page["records"], view)
    logger.debug(
        "View '%s' kept %d of %d fetched records",
        view["title"],
        len(records),
        len(page["records"]),
    )
    start = query["offset"]
    end = None if query["limit"] is None else start + query["limit"]
    return records[start:end], len(records)
