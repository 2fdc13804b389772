# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_utc() -> pendulum.DateTime:
    return now_utc().start_of("day")


def datetime_from_str_utc(datetime: str) -> pendulum.DateTime:
    pendulum_date_time = cast(pendulum.DateTime, pendulum.parse(datetime))
    return pendulum_date_time.in_tz("UTC")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")


def to_utc_instant(value: Any) -> Optional[pendulum.DateTime]:
    """Normalize a record or parameter value to a UTC instant.

    Accepts pendulum/stdlib datetimes, dates (midnight UTC) and ISO 8601
    strings. Anything else, including unparseable strings, yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None:
            return pendulum.instance(value, tz="UTC")
        return pendulum.instance(value).in_tz("UTC")
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="UTC")
    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value, tz="UTC")
        except ValueError:
            return None
        if isinstance(parsed, pendulum.DateTime):
            return parsed.in_tz("UTC")
        if isinstance(parsed, pendulum.Date):
            return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
    return None
