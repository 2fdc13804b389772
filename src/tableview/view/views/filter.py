# SPDX-License-Identifier: MIT

from typing import Any, Optional

from rich.console import Console
from rich.tree import Tree

from tableview.color import CLAUSE_ID_COLOR
from tableview.query.filter import AndClause, Clause, FilterClause, OrClause


def format_parameter(parameter: Any) -> str:
    if isinstance(parameter, dict) and "last_days" in parameter:
        return f"last {parameter['last_days']} days"
    if isinstance(parameter, list):
        return ", ".join(str(member) for member in parameter)
    return str(parameter)


def clause_label(clause: Clause) -> str:
    clause_id = f"[{CLAUSE_ID_COLOR}]{clause.id[:8]}[/{CLAUSE_ID_COLOR}]"
    match clause:
        case AndClause():
            return f"[bold]all of[/bold] {clause_id}"
        case OrClause():
            return f"[bold]any of[/bold] {clause_id}"
        case FilterClause():
            return (
                f"{clause.key} [italic]{clause.func_name}[/italic] "
                f"{format_parameter(clause.parameter)} ({clause.category}) {clause_id}"
            )
    raise TypeError(f"Not a filter clause: {clause!r}")


def build_filter_tree(clause: Clause, tree: Optional[Tree] = None) -> Tree:
    node = Tree(clause_label(clause)) if tree is None else tree.add(clause_label(clause))
    if isinstance(clause, (AndClause, OrClause)):
        for child in clause.children:
            build_filter_tree(child, node)
    return node


def filter_view(clause: Optional[Clause]) -> None:
    console = Console()
    if clause is None:
        console.print(" no filter")
        return
    console.print(build_filter_tree(clause))
