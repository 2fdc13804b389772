# SPDX-License-Identifier: MIT

import datetime

import pytest

from tableview.errors import MalformedFilterError
from tableview.query.codec import deserialize, deserialize_or_none, serialize
from tableview.query.filter import AndClause, FilterClause, OrClause, evaluate

DOCUMENT = {
    "filter_type": "and",
    "id": "root",
    "children": [
        {
            "filter_type": "number",
            "id": "capacity",
            "key": "capacity",
            "funcName": "gte",
            "parameter": 1000000,
        },
        {
            "filter_type": "or",
            "id": "names",
            "children": [
                {
                    "filter_type": "string",
                    "id": "alias",
                    "key": "peerAlias",
                    "funcName": "like",
                    "parameter": "acinq",
                },
                {
                    "filter_type": "date",
                    "id": "opened",
                    "key": "openedAt",
                    "funcName": "gte",
                    "parameter": {"last_days": 30},
                },
            ],
        },
    ],
}


def test_document_survives_a_round_trip():
    clause = deserialize(DOCUMENT)

    assert isinstance(clause, AndClause)
    assert isinstance(clause.children[1], OrClause)
    assert clause.children[0] == FilterClause(
        key="capacity", category="number", func_name="gte", parameter=1000000
    )
    assert serialize(clause) == DOCUMENT


def test_missing_ids_are_generated():
    clause = deserialize({"filter_type": "or", "children": []})
    assert isinstance(clause, OrClause)
    assert clause.id


def test_decoding_does_not_share_parameters():
    document = {
        "filter_type": "array",
        "key": "invoiceState",
        "funcName": "includes",
        "parameter": ["OPEN"],
    }
    clause = deserialize(document)
    document["parameter"].append("SETTLED")
    assert clause.parameter == ["OPEN"]


def test_date_objects_are_written_as_iso_strings():
    clause = FilterClause(
        key="creationDate",
        category="date",
        func_name="eq",
        parameter=datetime.date(2024, 3, 1),
    )
    assert serialize(clause)["parameter"] == "2024-03-01"


def test_unknown_func_name_decodes_and_fails_closed():
    clause = deserialize(
        {"filter_type": "number", "key": "capacity", "funcName": "between", "parameter": 1}
    )
    assert isinstance(clause, FilterClause)
    assert evaluate(clause, {"capacity": 1}) is False


@pytest.mark.parametrize(
    "document",
    [
        "and",
        {"children": []},
        {"filter_type": "and"},
        {"filter_type": "xor", "children": []},
        {"filter_type": "colour", "key": "a", "funcName": "eq", "parameter": 1},
        {"filter_type": "number", "funcName": "eq", "parameter": 1},
        {"filter_type": "number", "key": "a", "parameter": 1},
        {"filter_type": "number", "key": "a", "funcName": "eq"},
        {"filter_type": "number", "key": "a", "funcName": "eq", "parameter": "1"},
        {"filter_type": "and", "id": 7, "children": []},
        {"filter_type": "and", "children": [{"filter_type": "boolean"}]},
    ],
)
def test_malformed_documents_are_rejected(document):
    with pytest.raises(MalformedFilterError):
        deserialize(document)


def test_deserialize_or_none():
    assert deserialize_or_none(None) is None
    assert deserialize_or_none({"filter_type": "nope"}) is None
    assert isinstance(deserialize_or_none({"filter_type": "and", "children": []}), AndClause)
