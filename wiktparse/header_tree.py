"""Build and print a tree of wikitext section headers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from .headers import count_level_left, trim_header

ROOT_VALUE = "ROOT"


@dataclass
class Node:
    """A header with the plain lines under it and its sub-headers."""

    value: str = ""
    lines: list[str] = field(default_factory=list)
    children: list["Node"] = field(default_factory=list)


def parse_indented_tree(stream: Iterable[str]) -> Node:
    """Read lines and nest them under headers by their ``=`` level."""
    root = Node(ROOT_VALUE)
    stack: list[tuple[int, Node]] = [(-1, root)]
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if not line:
            continue
        indent = count_level_left(line)
        if indent < 2:
            stack[-1][1].lines.append(line)
            continue
        node = Node(trim_header(line))
        while stack[-1][0] >= indent:
            stack.pop()
        stack[-1][1].children.append(node)
        stack.append((indent, node))
    return root


def print_tree(node: Node, out: TextIO, prefix: str = "", is_last: bool = True) -> None:
    """Write the tree with box-drawing branches and line counts."""
    is_root = node.value == ROOT_VALUE
    if not is_root:
        out.write(prefix)
        out.write("└── " if is_last else "├── ")
        out.write(f"{node.value}({len(node.lines)})\n")
    child_prefix = prefix if is_root else prefix + ("    " if is_last else "│   ")
    for position, child in enumerate(node.children, start=1):
        print_tree(child, out, child_prefix, position == len(node.children))