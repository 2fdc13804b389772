# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any

from tableview.model.view import SortBy
from tableview.query.comparator import as_number


def sort_records(
    records: list[dict[str, Any]], sort_by: list[SortBy]
) -> list[dict[str, Any]]:
    """Stable multi-key sort; the first entry of sort_by is the primary key.

    Records missing a sort key (or holding None) go after all others for that
    key regardless of direction. In a column mixing types, numbers sort before
    other values. Ties on every key keep their input order.
    """
    sorted_records = deepcopy(records)

    # Sorting by the least significant key first relies on sort stability
    for sort_instruction in reversed(sort_by):
        column = sort_instruction["key"]
        descending = sort_instruction["direction"] == "desc"

        none_records = [
            record for record in sorted_records if record.get(column) is None
        ]
        value_records = [
            record for record in sorted_records if record.get(column) is not None
        ]
        try:
            value_records = sorted(
                value_records, key=lambda record: record[column], reverse=descending
            )
        except TypeError:
            value_records = _sort_mixed(value_records, column, descending)
        sorted_records = value_records + none_records

    return sorted_records


def _sort_mixed(
    records: list[dict[str, Any]], column: str, descending: bool
) -> list[dict[str, Any]]:
    """Numbers in numeric order, followed by everything else as text."""
    number_records = [
        record for record in records if as_number(record[column]) is not None
    ]
    other_records = [record for record in records if as_number(record[column]) is None]
    number_records.sort(key=lambda record: record[column], reverse=descending)
    other_records.sort(key=lambda record: str(record[column]), reverse=descending)
    return number_records + other_records
