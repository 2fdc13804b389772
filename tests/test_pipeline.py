# SPDX-License-Identifier: MIT

from copy import deepcopy

from tableview.query.codec import serialize
from tableview.query.filter import AndClause, FilterClause
from tableview.query.group import group_records
from tableview.query.pipeline import transform
from tableview.query.sort import sort_records
from tableview.template.view import get_view_template

RECORDS = [
    {"g": "A", "x": 1},
    {"g": "A", "x": 2},
    {"g": "B", "x": 5},
]


def x_gte(value):
    return serialize(
        AndClause(
            children=[FilterClause(key="x", category="number", func_name="gte", parameter=value)]
        )
    )


def make_view(filter=None, sort_by=None, group_by=None):
    view = get_view_template("channels")
    view["filter"] = filter
    view["sort_by"] = sort_by or []
    view["group_by"] = group_by
    return view


class TestSort:
    def test_multi_key(self):
        records = [{"a": 1, "b": 2}, {"a": 1, "b": 1}, {"a": 0, "b": 9}]
        assert sort_records(
            records, [{"key": "a", "direction": "desc"}, {"key": "b", "direction": "asc"}]
        ) == [{"a": 1, "b": 1}, {"a": 1, "b": 2}, {"a": 0, "b": 9}]

    def test_is_stable(self):
        records = [{"a": 1, "n": 1}, {"a": 0, "n": 2}, {"a": 1, "n": 3}, {"a": 0, "n": 4}]
        assert [
            record["n"] for record in sort_records(records, [{"key": "a", "direction": "desc"}])
        ] == [1, 3, 2, 4]

    def test_missing_values_go_last(self):
        records = [{"a": None}, {"a": 2}, {}, {"a": 1}]
        ascending = sort_records(records, [{"key": "a", "direction": "asc"}])
        descending = sort_records(records, [{"key": "a", "direction": "desc"}])
        assert [record.get("a") for record in ascending] == [1, 2, None, None]
        assert [record.get("a") for record in descending] == [2, 1, None, None]

    def test_input_is_not_modified(self):
        records = [{"a": 2}, {"a": 1}]
        sort_records(records, [{"key": "a", "direction": "asc"}])
        assert records == [{"a": 2}, {"a": 1}]

    def test_mixed_types_sort_numbers_first(self):
        records = [{"a": "n/a"}, {"a": 10}, {"a": 9}, {"a": "low"}, {"a": 2.5}]
        ascending = sort_records(records, [{"key": "a", "direction": "asc"}])
        descending = sort_records(records, [{"key": "a", "direction": "desc"}])
        assert [record["a"] for record in ascending] == [2.5, 9, 10, "low", "n/a"]
        assert [record["a"] for record in descending] == [10, 9, 2.5, "n/a", "low"]


class TestGroup:
    def test_sums_numeric_fields(self):
        assert group_records(RECORDS, "g") == [{"g": "A", "x": 3}, {"g": "B", "x": 5}]

    def test_no_group_by(self):
        assert group_records(RECORDS, None) == RECORDS

    def test_records_without_the_key_pass_through(self):
        records = [{"g": "A", "x": 1}, {"x": 4}, {"g": "A", "x": 1, "label": "a"}]
        assert group_records(records, "g") == [{"g": "A", "x": 2}, {"x": 4}]

    def test_first_member_without_a_number(self):
        records = [{"g": "A", "x": None}, {"g": "A", "x": 5}, {"g": "A", "y": 2}, {"g": "A", "y": 3}]
        assert group_records(records, "g") == [{"g": "A", "x": 5, "y": 5}]


class TestTransform:
    def test_filter_applies_to_group_totals(self):
        assert transform(RECORDS, make_view(filter=x_gte(3), group_by="g")) == [
            {"g": "A", "x": 3},
            {"g": "B", "x": 5},
        ]
        assert transform(RECORDS, make_view(filter=x_gte(4), group_by="g")) == [
            {"g": "B", "x": 5}
        ]
        assert transform(RECORDS, make_view(filter=x_gte(10), group_by="g")) == []

    def test_filter_without_grouping(self):
        assert transform(RECORDS, make_view(filter=x_gte(2))) == [
            {"g": "A", "x": 2},
            {"g": "B", "x": 5},
        ]

    def test_sort_after_filter(self):
        view = make_view(
            filter=x_gte(2), sort_by=[{"key": "x", "direction": "desc"}]
        )
        assert [record["x"] for record in transform(RECORDS, view)] == [5, 2]

    def test_empty_view_keeps_records(self):
        assert transform(RECORDS, make_view()) == RECORDS

    def test_malformed_filter_is_ignored(self):
        assert transform(RECORDS, make_view(filter={"filter_type": "bogus"})) == RECORDS

    def test_records_and_view_are_not_modified(self):
        records = [{"g": "A", "x": 1}, {"g": "A", "x": 2}, {"g": "B", "x": 5}]
        view = make_view(
            filter=x_gte(3), sort_by=[{"key": "x", "direction": "desc"}], group_by="g"
        )
        records_before = deepcopy(records)
        view_before = deepcopy(view)

        result = transform(records, view)

        assert result == [{"g": "B", "x": 5}, {"g": "A", "x": 3}]
        assert records == records_before
        assert view == view_before
        result[0]["x"] = 0
        assert records == records_before
