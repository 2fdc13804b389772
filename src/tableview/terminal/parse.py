# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import pendulum
import typer

from tableview.model.view import SortBy
from tableview.query.comparator import is_valid_parameter
from tableview.query.filter_type import Category
from tableview.time import datetime_from_str_utc


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{datetime}': {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        return pendulum.today().add(days=days_offset).start_of("day").in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now().in_tz("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today().start_of("day").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday().start_of("day").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow().start_of("day").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def parse_parameter(category: str, raw: str) -> Any:
    """
    Parse the command line form of a filter parameter for a category.

    number: 10, -2.5
    boolean: true/false, yes/no, 1/0
    date: YYYY-MM-DD, today, yesterday, tomorrow, or last:N for the last N days
    array: a comma-separated list of members
    string: taken as given

    Raises:
        typer.BadParameter: If the value does not fit the category
    """
    parameter: Any
    match category:
        case Category.NUMBER:
            try:
                parameter = int(raw)
            except ValueError:
                try:
                    parameter = float(raw)
                except ValueError:
                    raise typer.BadParameter(f"'{raw}' is not a number")
        case Category.BOOLEAN:
            lowered = raw.strip().lower()
            if lowered in ("true", "yes", "1"):
                parameter = True
            elif lowered in ("false", "no", "0"):
                parameter = False
            else:
                raise typer.BadParameter(f"'{raw}' is not a boolean")
        case Category.DATE:
            last_match = re.match(r"^last:(\d+)$", raw.strip())
            if last_match:
                parameter = {"last_days": int(last_match.group(1))}
            else:
                parameter = raw.strip()
        case Category.ARRAY:
            parameter = [member.strip() for member in raw.split(",") if member.strip()]
        case _:
            parameter = raw

    if not is_valid_parameter(category, parameter):
        raise typer.BadParameter(f"Invalid {category} parameter '{raw}'")
    return parameter


def parse_sort(sort_param: str) -> SortBy:
    """
    Parse a sort instruction in key or key:direction form.

    Raises:
        typer.BadParameter: If the direction is not asc or desc
    """
    key, _, direction = sort_param.partition(":")
    key = key.strip()
    direction = direction.strip().lower() or "asc"
    if key == "":
        raise typer.BadParameter(f"Missing sort key in '{sort_param}'")
    if direction not in ("asc", "desc"):
        raise typer.BadParameter(
            f"Sort direction must be asc or desc, got '{direction}'"
        )
    return {"key": key, "direction": direction}  # type: ignore[typeddict-item]


def parse_index_list(index_param: str) -> list[int]:
    """
    Parse a comma-separated list of view indexes, e.g. "2,0,1".

    Raises:
        typer.BadParameter: If any index is not a non-negative integer
    """
    indexes: list[int] = []
    for index_str in (s.strip() for s in index_param.split(",")):
        if not index_str:
            continue
        if not index_str.isdigit():
            raise typer.BadParameter(f"Invalid index: '{index_str}'")
        indexes.append(int(index_str))
    if not indexes:
        raise typer.BadParameter("No indexes provided")
    return indexes


def parse_key_list(key_param: str) -> list[str]:
    return [key.strip() for key in key_param.split(",") if key.strip()]
