# SPDX-License-Identifier: MIT

"""Comparator registry.

Maps ``(category, func_name)`` to a binary predicate
``(field_value, parameter) -> bool``. Each category also owns a parameter
validator used when filter documents are decoded. This table is the only
place that knows about categories: adding one here needs no change to the
filter tree or the codec.
"""

import math
from typing import Any, Callable, Iterable, Optional, TypeAlias

import pendulum

from tableview.errors import UnknownComparatorError
from tableview.query.filter_type import Category
from tableview.time import now_utc, to_utc_instant, today_utc

Comparator: TypeAlias = Callable[[Any, Any], bool]
ParameterValidator: TypeAlias = Callable[[Any], bool]

STRING_LIST_DELIMITER = ","

_COMPARATORS: dict[str, dict[str, Comparator]] = {}
_VALIDATORS: dict[str, ParameterValidator] = {}


def register_category(
    category: str, validate_parameter: Optional[ParameterValidator] = None
) -> None:
    _COMPARATORS.setdefault(category, {})
    _VALIDATORS[category] = validate_parameter or (lambda parameter: True)


def register_comparator(category: str, func_name: str, comparator: Comparator) -> None:
    if category not in _COMPARATORS:
        register_category(category)
    _COMPARATORS[category][func_name] = comparator


def get_comparator(category: str, func_name: str) -> Comparator:
    try:
        return _COMPARATORS[category][func_name]
    except KeyError:
        raise UnknownComparatorError(category, func_name) from None


def has_category(category: str) -> bool:
    return category in _COMPARATORS


def categories() -> list[str]:
    return list(_COMPARATORS)


def func_names(category: str) -> list[str]:
    return list(_COMPARATORS.get(category, {}))


def is_valid_parameter(category: str, parameter: Any) -> bool:
    validator = _VALIDATORS.get(category)
    if validator is None:
        return False
    return validator(parameter)


# number


def as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return value


def _number(predicate: Callable[[float, float], bool], missing: bool = False) -> Comparator:
    def compare(field_value: Any, parameter: Any) -> bool:
        field_number = as_number(field_value)
        parameter_number = as_number(parameter)
        if field_number is None or parameter_number is None:
            return missing
        return predicate(field_number, parameter_number)

    return compare


def _is_number_parameter(parameter: Any) -> bool:
    return as_number(parameter) is not None


# string


def _string_eq(field_value: Any, parameter: Any) -> bool:
    return isinstance(field_value, str) and field_value == parameter


def _string_neq(field_value: Any, parameter: Any) -> bool:
    return not _string_eq(field_value, parameter)


def _string_like(field_value: Any, parameter: Any) -> bool:
    if field_value is None or not isinstance(parameter, str):
        return False
    return parameter.lower() in str(field_value).lower()


def _string_includes(field_value: Any, parameter: Any) -> bool:
    if isinstance(field_value, str):
        members = [
            member.strip() for member in field_value.split(STRING_LIST_DELIMITER)
        ]
    elif isinstance(field_value, (list, tuple, set)):
        members = [str(member) for member in field_value]
    else:
        return False
    return parameter in members


def _is_string_parameter(parameter: Any) -> bool:
    return isinstance(parameter, str)


# boolean


def _boolean_eq(field_value: Any, parameter: Any) -> bool:
    return isinstance(field_value, bool) and field_value is parameter


def _boolean_neq(field_value: Any, parameter: Any) -> bool:
    return not _boolean_eq(field_value, parameter)


def _is_boolean_parameter(parameter: Any) -> bool:
    return isinstance(parameter, bool)


# date

RELATIVE_DATES = ("today", "yesterday", "tomorrow")


def resolve_date_parameter(parameter: Any) -> Optional[pendulum.DateTime]:
    """Resolve a date parameter to an absolute UTC bound.

    Relative parameters are resolved against the current moment on every
    call, so a saved "last 7 days" filter keeps moving with the clock.
    """
    if isinstance(parameter, dict):
        last_days = parameter.get("last_days")
        if isinstance(last_days, int) and not isinstance(last_days, bool):
            return now_utc().subtract(days=last_days)
        return None
    match parameter:
        case "today":
            return today_utc()
        case "yesterday":
            return today_utc().subtract(days=1)
        case "tomorrow":
            return today_utc().add(days=1)
    return to_utc_instant(parameter)


def _date(
    predicate: Callable[[pendulum.DateTime, pendulum.DateTime], bool],
    missing: bool = False,
) -> Comparator:
    def compare(field_value: Any, parameter: Any) -> bool:
        field_instant = to_utc_instant(field_value)
        bound = resolve_date_parameter(parameter)
        if field_instant is None or bound is None:
            return missing
        return predicate(field_instant, bound)

    return compare


def _same_day(left: pendulum.DateTime, right: pendulum.DateTime) -> bool:
    return left.date() == right.date()


def _is_date_parameter(parameter: Any) -> bool:
    if isinstance(parameter, dict):
        last_days = parameter.get("last_days")
        return (
            set(parameter) == {"last_days"}
            and isinstance(last_days, int)
            and not isinstance(last_days, bool)
            and last_days >= 0
        )
    if parameter in RELATIVE_DATES:
        return True
    return to_utc_instant(parameter) is not None


# array


def _as_set(value: Any) -> Optional[set[Any]]:
    if value is None:
        return None
    if isinstance(value, (list, tuple, set, frozenset)):
        return set(value)
    return {value}


def _parameter_members(parameter: Any) -> Iterable[Any]:
    if isinstance(parameter, (list, tuple, set)):
        return parameter
    return [parameter]


def _array_includes(field_value: Any, parameter: Any) -> bool:
    members = _as_set(field_value)
    if members is None:
        return False
    return any(member in members for member in _parameter_members(parameter))


def _array_excludes(field_value: Any, parameter: Any) -> bool:
    return not _array_includes(field_value, parameter)


def _is_array_parameter(parameter: Any) -> bool:
    if isinstance(parameter, list):
        return all(_is_scalar(member) for member in parameter)
    return _is_scalar(parameter)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float, bool))


register_category(Category.NUMBER, _is_number_parameter)
register_comparator(Category.NUMBER, "eq", _number(lambda a, b: a == b))
register_comparator(Category.NUMBER, "neq", _number(lambda a, b: a != b, missing=True))
register_comparator(Category.NUMBER, "gt", _number(lambda a, b: a > b))
register_comparator(Category.NUMBER, "gte", _number(lambda a, b: a >= b))
register_comparator(Category.NUMBER, "lt", _number(lambda a, b: a < b))
register_comparator(Category.NUMBER, "lte", _number(lambda a, b: a <= b))

register_category(Category.STRING, _is_string_parameter)
register_comparator(Category.STRING, "eq", _string_eq)
register_comparator(Category.STRING, "neq", _string_neq)
register_comparator(Category.STRING, "like", _string_like)
register_comparator(Category.STRING, "includes", _string_includes)

register_category(Category.BOOLEAN, _is_boolean_parameter)
register_comparator(Category.BOOLEAN, "eq", _boolean_eq)
register_comparator(Category.BOOLEAN, "neq", _boolean_neq)

register_category(Category.DATE, _is_date_parameter)
register_comparator(Category.DATE, "eq", _date(_same_day))
register_comparator(
    Category.DATE, "neq", _date(lambda a, b: not _same_day(a, b), missing=True)
)
register_comparator(Category.DATE, "gt", _date(lambda a, b: a > b))
register_comparator(Category.DATE, "gte", _date(lambda a, b: a >= b))
register_comparator(Category.DATE, "lt", _date(lambda a, b: a < b))
register_comparator(Category.DATE, "lte", _date(lambda a, b: a <= b))

register_category(Category.ARRAY, _is_array_parameter)
register_comparator(Category.ARRAY, "includes", _array_includes)
register_comparator(Category.ARRAY, "excludes", _array_excludes)
