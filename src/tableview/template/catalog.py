# SPDX-License-Identifier: MIT

from tableview.model.catalog import ViewCatalog
from tableview.template.view import get_view_template


def get_catalog_template(page: str) -> ViewCatalog:
    return {
        "page": page,
        "views": [get_view_template(page, title="Default View")],
        "selected_index": 0,
        "order_saved": True,
        "status": "idle",
    }
