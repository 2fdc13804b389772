# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from tableview.color import HEADER_COLOR, PAGE_COLOR, SUB_HEADER_COLOR
from tableview.view.state import get_show_header


def header(page: str, sub_header: Optional[str] = None) -> None:
    """Print the application header with the page being worked on.

    Args:
        page: The name of the resource page
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[{SUB_HEADER_COLOR}]{sub_header}[/{SUB_HEADER_COLOR}]"

    print(Padding(f"[{HEADER_COLOR}]tableview[/{HEADER_COLOR}]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[{PAGE_COLOR}]{page}[/{PAGE_COLOR}]", (0, 1)))
