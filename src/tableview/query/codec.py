# SPDX-License-Identifier: MIT

import datetime
import logging
from copy import deepcopy
from typing import Any, Optional

from tableview.errors import MalformedFilterError
from tableview.model.filter import (
    CompositeDocument,
    CompositeType,
    FilterDocument,
    LeafDocument,
)
from tableview.query.comparator import has_category, is_valid_parameter
from tableview.query.filter import (
    AndClause,
    Clause,
    FilterClause,
    OrClause,
    generate_clause_id,
)
from tableview.query.filter_type import Category, FilterType

logger = logging.getLogger(__name__)


def serialize(clause: Clause) -> FilterDocument:
    match clause:
        case AndClause():
            return _serialize_composite("and", clause)
        case OrClause():
            return _serialize_composite("or", clause)
        case FilterClause():
            leaf: LeafDocument = {
                "filter_type": clause.category,
                "id": clause.id,
                "key": clause.key,
                "funcName": clause.func_name,
                "parameter": _serialize_parameter(clause.category, clause.parameter),
            }
            return leaf
    raise TypeError(f"Not a filter clause: {clause!r}")


def _serialize_composite(
    filter_type: CompositeType, clause: AndClause | OrClause
) -> CompositeDocument:
    return {
        "filter_type": filter_type,
        "id": clause.id,
        "children": [serialize(child) for child in clause.children],
    }


def _serialize_parameter(category: str, parameter: Any) -> Any:
    if category == Category.DATE and isinstance(parameter, datetime.date):
        return parameter.isoformat()
    return deepcopy(parameter)


def deserialize(document: Any) -> Clause:
    if not isinstance(document, dict):
        raise MalformedFilterError("Filter node must be a mapping", document)

    filter_type = document.get("filter_type")
    if not isinstance(filter_type, str):
        raise MalformedFilterError("Filter node has no filter_type", document)

    clause_id = document.get("id", None)
    if clause_id is None:
        clause_id = generate_clause_id()
    elif not isinstance(clause_id, str):
        raise MalformedFilterError("Filter node id must be a string", document)

    if filter_type in (FilterType.AND, FilterType.OR):
        children = document.get("children")
        if not isinstance(children, list):
            raise MalformedFilterError("Composite filter has no children list", document)
        composite: AndClause | OrClause
        if filter_type == FilterType.AND:
            composite = AndClause(id=clause_id)
        else:
            composite = OrClause(id=clause_id)
        for child in children:
            composite.add_child(deserialize(child))
        return composite

    if not has_category(filter_type):
        raise MalformedFilterError(f"Unknown filter type '{filter_type}'", document)

    key = document.get("key")
    func_name = document.get("funcName")
    if not isinstance(key, str) or key == "":
        raise MalformedFilterError("Filter leaf has no key", document)
    if not isinstance(func_name, str) or func_name == "":
        raise MalformedFilterError("Filter leaf has no funcName", document)
    if "parameter" not in document:
        raise MalformedFilterError("Filter leaf has no parameter", document)
    parameter = deepcopy(document["parameter"])
    if not is_valid_parameter(filter_type, parameter):
        raise MalformedFilterError(
            f"Invalid parameter {parameter!r} for category '{filter_type}'", document
        )

    # An unregistered funcName is accepted here and fails closed on evaluation
    return FilterClause(
        key=key,
        category=filter_type,
        func_name=func_name,
        parameter=parameter,
        id=clause_id,
    )


def deserialize_or_none(document: Optional[Any]) -> Optional[Clause]:
    if document is None:
        return None
    try:
        return deserialize(document)
    except MalformedFilterError as e:
        logger.warning("Ignoring saved filter: %s", e)
        return None
