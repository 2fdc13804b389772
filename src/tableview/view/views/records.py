# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from tableview.model.column import ColumnMetaData
from tableview.model.record import Record
from tableview.time import datetime_to_display_local_datetime_str, to_utc_instant
from tableview.view.state import get_no_wrap
from tableview.view.views.header import header


def format_value(value: Any, value_type: str) -> str:
    if value is None:
        return ""
    if value_type == "boolean" or isinstance(value, bool):
        return "✓" if value else "✗"
    if value_type == "date" or isinstance(value, datetime.date):
        instant = to_utc_instant(value)
        if instant is not None:
            return datetime_to_display_local_datetime_str(instant)
        return str(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(member) for member in value)
    return str(value)


def format_cell(record: Record, column: ColumnMetaData) -> str:
    value = format_value(record.get(column["key"]), column["valueType"])
    key2 = column.get("key2")
    if key2 is not None:
        value = f"{value} / {format_value(record.get(key2), column['valueType'])}"
    suffix = column.get("suffix")
    if suffix is not None and value != "":
        value = f"{value} {suffix}"
    return value


def records_view(
    page: str,
    view_title: str,
    columns: list[ColumnMetaData],
    records: list[Record],
    total: Optional[int] = None,
) -> None:
    shown = f"{len(records)}" if total is None else f"{len(records)} of {total}"
    header(page, f"{view_title} ({shown})")

    records_table = Table(box=box.SIMPLE)
    no_wrap = get_no_wrap()
    for column in columns:
        justify = "right" if column["valueType"] == "number" else "left"
        if no_wrap:
            records_table.add_column(
                column["heading"],
                justify=justify,
                no_wrap=True,
                overflow="ellipsis",
                width=column.get("width"),
            )
        else:
            records_table.add_column(
                column["heading"], justify=justify, width=column.get("width")
            )

    for record in records:
        records_table.add_row(*[format_cell(record, column) for column in columns])

    console = Console()
    console.print(records_table)
