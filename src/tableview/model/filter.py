# SPDX-License-Identifier: MIT

from typing import Any, Literal, NotRequired, TypedDict

CompositeType = Literal["and", "or"]


class FilterTemplate(TypedDict):
    key: str
    category: str
    funcName: str
    parameter: Any


class CompositeDocument(TypedDict):
    filter_type: CompositeType
    id: NotRequired[str]
    children: list["FilterDocument"]


class LeafDocument(TypedDict):
    # filter_type holds the leaf's category, e.g. "number" or "date"
    filter_type: str
    id: NotRequired[str]
    key: str
    funcName: str
    parameter: Any


FilterDocument = CompositeDocument | LeafDocument
