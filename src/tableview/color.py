# SPDX-License-Identifier: MIT

# Color constants for rendering
HEADER_COLOR = "dark_orange"
PAGE_COLOR = "plum1"
SUB_HEADER_COLOR = "sandy_brown"
UNSAVED_COLOR = "yellow"
SELECTED_COLOR = "bold green"
CLAUSE_ID_COLOR = "bright_black"
