# SPDX-License-Identifier: MIT

from typing import Any, Optional, TypeAlias, TypedDict

import pendulum

Record: TypeAlias = dict[str, Any]


class RecordQuery(TypedDict):
    from_date: Optional[pendulum.DateTime]
    to_date: Optional[pendulum.DateTime]
    limit: Optional[int]
    offset: int


class RecordPage(TypedDict):
    records: list[Record]
    total: Optional[int]
