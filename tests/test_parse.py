# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from tableview.terminal.parse import (
    parse_datetime,
    parse_index_list,
    parse_key_list,
    parse_parameter,
    parse_sort,
)


class TestParseParameter:
    def test_numbers(self):
        assert parse_parameter("number", "42") == 42
        assert parse_parameter("number", "-2.5") == -2.5
        with pytest.raises(typer.BadParameter):
            parse_parameter("number", "lots")

    def test_booleans(self):
        assert parse_parameter("boolean", "yes") is True
        assert parse_parameter("boolean", "False") is False
        with pytest.raises(typer.BadParameter):
            parse_parameter("boolean", "maybe")

    def test_dates(self):
        assert parse_parameter("date", "last:7") == {"last_days": 7}
        assert parse_parameter("date", "today") == "today"
        assert parse_parameter("date", "2024-03-01") == "2024-03-01"
        with pytest.raises(typer.BadParameter):
            parse_parameter("date", "next week")

    def test_arrays_and_strings(self):
        assert parse_parameter("array", "OPEN, SETTLED") == ["OPEN", "SETTLED"]
        assert parse_parameter("string", "acinq") == "acinq"


def test_parse_sort():
    assert parse_sort("capacity:desc") == {"key": "capacity", "direction": "desc"}
    assert parse_sort("peerAlias") == {"key": "peerAlias", "direction": "asc"}
    with pytest.raises(typer.BadParameter):
        parse_sort("capacity:sideways")
    with pytest.raises(typer.BadParameter):
        parse_sort(":asc")


def test_parse_index_list():
    assert parse_index_list("2, 0,1") == [2, 0, 1]
    with pytest.raises(typer.BadParameter):
        parse_index_list("1,x")
    with pytest.raises(typer.BadParameter):
        parse_index_list(" , ")


def test_parse_key_list():
    assert parse_key_list("peerAlias, capacity,") == ["peerAlias", "capacity"]


def test_parse_datetime():
    assert parse_datetime(None) is None
    assert parse_datetime("2024-03-01") == pendulum.datetime(2024, 3, 1, tz="UTC")
    assert parse_datetime("today") == pendulum.today().start_of("day").in_tz("UTC")
    assert parse_datetime("-1") == pendulum.today().add(days=-1).start_of("day").in_tz("UTC")
    with pytest.raises(typer.BadParameter):
        parse_datetime("someday")
