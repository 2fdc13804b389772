# SPDX-License-Identifier: MIT

from typing import Callable, Optional

from tableview.model.column import ColumnMetaData
from tableview.model.page import PageTemplate
from tableview.template.channels import get_channels_template
from tableview.template.forwards import get_forwards_template
from tableview.template.invoices import get_invoices_template

_PAGE_TEMPLATES: dict[str, Callable[[], PageTemplate]] = {
    "channels": get_channels_template,
    "forwards": get_forwards_template,
    "invoices": get_invoices_template,
}


def get_page_names() -> list[str]:
    return list(_PAGE_TEMPLATES)


def get_page_template(page: str) -> PageTemplate:
    if page not in _PAGE_TEMPLATES:
        raise ValueError(
            f"Unknown page '{page}', expected one of: {', '.join(_PAGE_TEMPLATES)}"
        )
    return _PAGE_TEMPLATES[page]()


def get_column(page: str, key: str) -> Optional[ColumnMetaData]:
    for column in get_page_template(page)["all_columns"]:
        if column["key"] == key:
            return column
    return None
