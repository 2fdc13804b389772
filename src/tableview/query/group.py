# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from tableview.query.comparator import as_number


def group_records(
    records: list[dict[str, Any]], group_by: Optional[str]
) -> list[dict[str, Any]]:
    """Collapse records sharing the same group_by value into one row each.

    Numeric fields are summed across the group; every other field keeps the
    first member's value. Groups appear in the order their first member
    appears. Records without the group key are passed through unchanged.
    """
    if not group_by:
        return deepcopy(records)

    grouped: list[dict[str, Any]] = []
    groups: dict[Any, dict[str, Any]] = {}

    for record in records:
        if record.get(group_by) is None:
            grouped.append(deepcopy(record))
            continue

        group_value = _group_key(record[group_by])
        summed = groups.get(group_value)
        if summed is None:
            summed = deepcopy(record)
            groups[group_value] = summed
            grouped.append(summed)
            continue

        for key, value in record.items():
            if key == group_by or as_number(value) is None:
                continue
            current = summed.get(key)
            # A member without a number contributes nothing to the sum
            if as_number(current) is None:
                summed[key] = value
            else:
                summed[key] = current + value

    return grouped


def _group_key(value: Any) -> Any:
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value
