# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, TypedDict

ValueType = Literal["string", "number", "boolean", "date", "array", "link"]


class ColumnMetaData(TypedDict):
    key: str
    heading: str
    type: str
    valueType: ValueType
    locked: NotRequired[bool]
    width: NotRequired[int]
    key2: NotRequired[str]
    suffix: NotRequired[str]
