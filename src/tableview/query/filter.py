# SPDX-License-Identifier: MIT

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from tableview.errors import UnknownComparatorError
from tableview.query.comparator import get_comparator

logger = logging.getLogger(__name__)


def generate_clause_id() -> str:
    return str(uuid.uuid4())


@dataclass
class FilterClause:
    key: str
    category: str
    func_name: str
    parameter: Any
    id: str = field(default_factory=generate_clause_id, compare=False)


@dataclass
class _CompositeClause:
    children: list["Clause"] = field(default_factory=list)
    id: str = field(default_factory=generate_clause_id, compare=False)

    def add_child(self, clause: "Clause") -> str:
        self.children.append(clause)
        return clause.id

    def remove_child(self, child_id: str) -> "Clause":
        index = self.__index_of(child_id)
        return self.children.pop(index)

    def replace_child(self, child_id: str, clause: "Clause") -> None:
        index = self.__index_of(child_id)
        # The replacement keeps the slot and the id of the child it replaces
        clause.id = child_id
        self.children[index] = clause

    def __index_of(self, child_id: str) -> int:
        for index, child in enumerate(self.children):
            if child.id == child_id:
                return index
        raise KeyError(child_id)


@dataclass
class AndClause(_CompositeClause):
    pass


@dataclass
class OrClause(_CompositeClause):
    pass


Clause = FilterClause | AndClause | OrClause


def evaluate(clause: Clause, record: dict[str, Any]) -> bool:
    match clause:
        case AndClause(children=children):
            return all(evaluate(child, record) for child in children)
        case OrClause(children=children):
            return any(evaluate(child, record) for child in children)
        case FilterClause():
            return _evaluate_leaf(clause, record)
    raise TypeError(f"Not a filter clause: {clause!r}")


def _evaluate_leaf(clause: FilterClause, record: dict[str, Any]) -> bool:
    try:
        comparator = get_comparator(clause.category, clause.func_name)
    except UnknownComparatorError as e:
        logger.debug("Clause %s does not match: %s", clause.id, e)
        return False

    try:
        return bool(comparator(record.get(clause.key), clause.parameter))
    except (TypeError, ValueError, AttributeError) as e:
        logger.debug(
            "Clause %s does not match %r: %s", clause.id, record.get(clause.key), e
        )
        return False


def filter_records(
    clause: Optional[Clause], records: Iterable[dict[str, Any]]
) -> list[dict[str, Any]]:
    if clause is None:
        return list(records)
    return [record for record in records if evaluate(clause, record)]


def find_clause(root: Clause, clause_id: str) -> Optional[Clause]:
    if root.id == clause_id:
        return root
    if isinstance(root, (AndClause, OrClause)):
        for child in root.children:
            found = find_clause(child, clause_id)
            if found is not None:
                return found
    return None


def find_parent(root: Clause, clause_id: str) -> Optional[AndClause | OrClause]:
    if isinstance(root, (AndClause, OrClause)):
        for child in root.children:
            if child.id == clause_id:
                return root
            found = find_parent(child, clause_id)
            if found is not None:
                return found
    return None
