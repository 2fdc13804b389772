# SPDX-License-Identifier: MIT

import datetime

import pendulum
import pytest

from tableview.errors import UnknownComparatorError
from tableview.query.comparator import (
    categories,
    func_names,
    get_comparator,
    has_category,
    is_valid_parameter,
    register_comparator,
    resolve_date_parameter,
)


def compare(category, func_name, field_value, parameter):
    return get_comparator(category, func_name)(field_value, parameter)


class TestNumber:
    @pytest.mark.parametrize(
        "func_name, value, parameter, expected",
        [
            ("eq", 5, 5, True),
            ("eq", 5.0, 5, True),
            ("neq", 5, 4, True),
            ("gt", 5, 5, False),
            ("gte", 5, 5, True),
            ("lt", 2, 3, True),
            ("lte", 4, 3, False),
        ],
    )
    def test_comparisons(self, func_name, value, parameter, expected):
        assert compare("number", func_name, value, parameter) is expected

    def test_missing_value_only_matches_neq(self):
        for func_name in ("eq", "gt", "gte", "lt", "lte"):
            assert compare("number", func_name, None, 1) is False
        assert compare("number", "neq", None, 1) is True

    def test_nan_and_booleans_are_not_numbers(self):
        assert compare("number", "gte", float("nan"), 0) is False
        assert compare("number", "eq", True, 1) is False

    def test_parameter_validation(self):
        assert is_valid_parameter("number", 3.5)
        assert not is_valid_parameter("number", "3")
        assert not is_valid_parameter("number", False)


class TestString:
    def test_eq_is_exact(self):
        assert compare("string", "eq", "Alice", "Alice")
        assert not compare("string", "eq", "alice", "Alice")
        assert compare("string", "neq", "alice", "Alice")

    def test_like_is_case_insensitive_substring(self):
        assert compare("string", "like", "ACINQ node", "acinq")
        assert not compare("string", "like", "bitrefill", "acinq")
        assert not compare("string", "like", None, "acinq")

    def test_includes_matches_members(self):
        assert compare("string", "includes", "open, settled", "settled")
        assert not compare("string", "includes", "unsettled", "settled")
        assert compare("string", "includes", ["open", "settled"], "open")


class TestBoolean:
    def test_eq(self):
        assert compare("boolean", "eq", True, True)
        assert not compare("boolean", "eq", 1, True)
        assert compare("boolean", "neq", False, True)

    def test_parameter_validation(self):
        assert is_valid_parameter("boolean", False)
        assert not is_valid_parameter("boolean", "false")


class TestDate:
    def test_eq_compares_calendar_day(self):
        assert compare("date", "eq", "2024-03-01T18:30:00Z", "2024-03-01")
        assert not compare("date", "eq", "2024-03-02T00:00:01Z", "2024-03-01")

    def test_ordering_compares_instants(self):
        assert compare("date", "gt", "2024-03-01T00:00:01Z", "2024-03-01")
        assert compare("date", "lte", datetime.date(2024, 2, 28), "2024-03-01")
        assert not compare("date", "lt", "not a date", "2024-03-01")

    def test_last_days_moves_with_the_clock(self):
        recent = pendulum.now("UTC").subtract(days=3)
        old = pendulum.now("UTC").subtract(days=10)
        assert compare("date", "gte", recent, {"last_days": 7})
        assert not compare("date", "gte", old, {"last_days": 7})

    def test_relative_names(self):
        today = pendulum.now("UTC").start_of("day")
        assert resolve_date_parameter("today") == today
        assert resolve_date_parameter("yesterday") == today.subtract(days=1)
        assert resolve_date_parameter("tomorrow") == today.add(days=1)

    def test_parameter_validation(self):
        assert is_valid_parameter("date", "2024-03-01")
        assert is_valid_parameter("date", {"last_days": 30})
        assert not is_valid_parameter("date", {"last_days": -1})
        assert not is_valid_parameter("date", {"last_days": 3, "other": 1})
        assert not is_valid_parameter("date", "someday")


class TestArray:
    def test_includes_any_member(self):
        assert compare("array", "includes", ["OPEN", "SETTLED"], ["SETTLED", "CANCELED"])
        assert compare("array", "includes", "SETTLED", "SETTLED")
        assert not compare("array", "includes", None, "SETTLED")

    def test_excludes(self):
        assert compare("array", "excludes", "OPEN", ["SETTLED"])
        assert not compare("array", "excludes", ["OPEN"], "OPEN")


def test_unknown_comparator_raises():
    with pytest.raises(UnknownComparatorError):
        get_comparator("number", "between")
    with pytest.raises(UnknownComparatorError):
        get_comparator("color", "eq")


def test_registering_a_category():
    register_comparator("length", "eq", lambda value, parameter: len(value) == parameter)

    assert has_category("length")
    assert "length" in categories()
    assert func_names("length") == ["eq"]
    assert compare("length", "eq", "abc", 3)
