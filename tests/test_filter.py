# SPDX-License-Identifier: MIT

import pytest

from tableview.query.filter import (
    AndClause,
    FilterClause,
    OrClause,
    evaluate,
    filter_records,
    find_clause,
    find_parent,
)

RECORDS = [
    {"alias": "alpha", "capacity": 1_000_000, "active": True},
    {"alias": "beta", "capacity": 250_000, "active": False},
    {"alias": "gamma", "capacity": 5_000_000, "active": True},
]


def big():
    return FilterClause(key="capacity", category="number", func_name="gte", parameter=1_000_000)


def inactive():
    return FilterClause(key="active", category="boolean", func_name="eq", parameter=False)


def test_empty_groups():
    assert evaluate(AndClause(), {"anything": 1}) is True
    assert evaluate(OrClause(), {"anything": 1}) is False


def test_and_or():
    assert filter_records(AndClause(children=[big(), inactive()]), RECORDS) == []
    assert [
        record["alias"]
        for record in filter_records(OrClause(children=[big(), inactive()]), RECORDS)
    ] == ["alpha", "beta", "gamma"]


def test_nested_groups():
    tree = AndClause(
        children=[
            OrClause(
                children=[
                    FilterClause(key="alias", category="string", func_name="like", parameter="alp"),
                    FilterClause(key="alias", category="string", func_name="eq", parameter="beta"),
                ]
            ),
            FilterClause(key="capacity", category="number", func_name="lt", parameter=2_000_000),
        ]
    )
    assert [record["alias"] for record in filter_records(tree, RECORDS)] == ["alpha", "beta"]


def test_no_filter_keeps_everything():
    assert filter_records(None, RECORDS) == RECORDS


def test_unknown_comparator_fails_closed():
    clause = FilterClause(key="capacity", category="number", func_name="between", parameter=[1, 2])
    assert filter_records(clause, RECORDS) == []
    assert evaluate(OrClause(children=[clause, big()]), RECORDS[0]) is True


def test_missing_field_does_not_match():
    assert evaluate(big(), {"alias": "delta"}) is False


def test_ids_do_not_affect_equality():
    assert big() == big()
    assert big().id != big().id


def test_edit_children_by_id():
    root = AndClause()
    first_id = root.add_child(big())
    second_id = root.add_child(inactive())

    replacement = FilterClause(key="alias", category="string", func_name="eq", parameter="beta")
    root.replace_child(first_id, replacement)
    assert root.children[0] is replacement
    assert replacement.id == first_id

    removed = root.remove_child(second_id)
    assert removed == inactive()
    assert [child.id for child in root.children] == [first_id]

    with pytest.raises(KeyError):
        root.remove_child("missing")


def test_find_clause_and_parent():
    leaf = big()
    inner = OrClause(children=[leaf])
    root = AndClause(children=[inactive(), inner])

    assert find_clause(root, leaf.id) is leaf
    assert find_parent(root, leaf.id) is inner
    assert find_parent(root, inner.id) is root
    assert find_parent(root, root.id) is None
    assert find_clause(root, "missing") is None
