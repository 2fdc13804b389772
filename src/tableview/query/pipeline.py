# SPDX-License-Identifier: MIT

from typing import Any

from tableview.model.view import View
from tableview.query.codec import deserialize_or_none
from tableview.query.filter import filter_records
from tableview.query.group import group_records
from tableview.query.sort import sort_records


def transform(records: list[dict[str, Any]], view: View) -> list[dict[str, Any]]:
    """Apply a view to a record set: group, then filter, then sort.

    Grouping happens first so that a filter on an aggregated column filters
    whole groups by their totals. Neither the records nor the view are
    modified.
    """
    grouped = group_records(records, view["group_by"])
    clause = deserialize_or_none(view["filter"])
    filtered = filter_records(clause, grouped)
    return sort_records(filtered, view["sort_by"] or [])
