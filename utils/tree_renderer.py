# utils/tree_renderer.py
# This file is part of Clausify - A Propositional CNF and DIMACS Toolkit
#
# Plain-text renderings of formula trees for console display

from typing import List

from parser.ast_nodes import Expr


def render_ascii(root: Expr) -> str:
    """Render a tree in directory-listing style.

    Example:
        >>> print(render_ascii(parse_infix("(p+(~q))")))
        +
        |-- p
        `-- ~
            `-- q
    """
    lines = [root.value]
    _render_children(root, "", lines)
    return "\n".join(lines)


def _render_children(node: Expr, prefix: str, lines: List[str]) -> None:
    children = node.children
    for index, child in enumerate(children):
        last = index == len(children) - 1
        lines.append(f"{prefix}{'`-- ' if last else '|-- '}{child.value}")
        _render_children(child, prefix + ("    " if last else "|   "), lines)


def render_rooted(root: Expr, indent: str = "    ") -> str:
    """Render a tree one node per line in preorder, indented by depth."""
    lines: List[str] = []

    def walk(node: Expr, level: int) -> None:
        lines.append(f"{indent * level}{node.value}")
        for child in node.children:
            walk(child, level + 1)

    walk(root, 0)
    return "\n".join(lines)
