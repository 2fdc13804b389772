# SPDX-License-Identifier: MIT

import pytest

from tableview.errors import BackendRequestFailure
from tableview.query.codec import serialize
from tableview.query.filter import AndClause, FilterClause
from tableview.service.record import fetch_view_records, get_view_columns
from tableview.template.page import get_column
from tableview.template.view import get_view_template
from tableview.view.views.filter import clause_label, format_parameter
from tableview.view.views.records import format_cell, format_value


class StaticSource:
    def __init__(self, records, fail=False):
        self.records = records
        self.fail = fail
        self.queries = []

    def fetch_records(self, page, query):
        self.queries.append((page, query))
        if self.fail:
            raise BackendRequestFailure("fetch records", "offline")
        return {"records": self.records, "total": len(self.records)}


def test_numeric_double_cell():
    column = get_column("channels", "feeRateMilliMsat")
    record = {"feeRateMilliMsat": 100, "remoteFeeRateMilliMsat": 2500}
    assert format_cell(record, column) == "100 / 2,500 ppm"


def test_format_value():
    assert format_value(None, "number") == ""
    assert format_value(True, "boolean") == "✓"
    assert format_value(1234.5, "number") == "1,234.50"
    assert format_value(["OPEN", "SETTLED"], "array") == "OPEN, SETTLED"
    assert format_value("not a date", "date") == "not a date"


def test_filter_labels():
    leaf = FilterClause(key="creationDate", category="date", func_name="gte", parameter={"last_days": 7})
    assert format_parameter(leaf.parameter) == "last 7 days"
    assert "creationDate" in clause_label(leaf)
    assert leaf.id[:8] in clause_label(leaf)
    assert "all of" in clause_label(AndClause())


def test_fetch_view_records_applies_the_view():
    view = get_view_template("channels")
    view["filter"] = serialize(
        AndClause(children=[FilterClause(key="active", category="boolean", func_name="eq", parameter=True)])
    )
    source = StaticSource(
        [
            {"peerAlias": "b", "active": True},
            {"peerAlias": "c", "active": False},
            {"peerAlias": "a", "active": True},
        ]
    )
    query = {"from_date": None, "to_date": None, "limit": 10, "offset": 0}

    rows, total = fetch_view_records(source, view, query)

    assert [row["peerAlias"] for row in rows] == ["a", "b"]
    assert total == 2
    assert source.queries == [
        ("channels", {"from_date": None, "to_date": None, "limit": None, "offset": 0})
    ]


def test_groups_are_summed_before_the_window_is_cut():
    view = get_view_template("channels")
    view["group_by"] = "peerAlias"
    view["sort_by"] = []
    records = [{"peerAlias": f"p{n}", "capacity": n} for n in range(5)]
    records.append({"peerAlias": "p0", "capacity": 100})
    source = StaticSource(records)

    rows, total = fetch_view_records(
        source, view, {"from_date": None, "to_date": None, "limit": 2, "offset": 0}
    )
    assert rows == [{"peerAlias": "p0", "capacity": 100}, {"peerAlias": "p1", "capacity": 1}]
    assert total == 5

    rows, total = fetch_view_records(
        source, view, {"from_date": None, "to_date": None, "limit": 2, "offset": 4}
    )
    assert rows == [{"peerAlias": "p4", "capacity": 4}]
    assert total == 5


def test_fetch_view_records_failure_propagates():
    with pytest.raises(BackendRequestFailure):
        fetch_view_records(
            StaticSource([], fail=True),
            get_view_template("channels"),
            {"from_date": None, "to_date": None, "limit": None, "offset": 0},
        )


def test_view_columns_follow_the_view():
    view = get_view_template("invoices")
    view["columns"] = ["memo", "value"]
    assert [column["heading"] for column in get_view_columns(view)] == ["memo", "Invoice Amount"]
