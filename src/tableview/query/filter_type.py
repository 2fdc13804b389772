# SPDX-License-Identifier: MIT

from enum import StrEnum


class FilterType(StrEnum):
    AND = "and"
    OR = "or"


class Category(StrEnum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    DATE = "date"
    ARRAY = "array"


def category_for_value_type(value_type: str) -> str:
    """Map a column valueType to the comparator category used to filter it."""
    if value_type == "link":
        return Category.STRING
    return value_type
