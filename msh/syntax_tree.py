"""Syntax tree produced by the command-line parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator


class NodeType(enum.Enum):
    """Kinds of node in a parsed command line."""

    PIPE = enum.auto()
    ARG = enum.auto()
    GRT = enum.auto()
    LSR = enum.auto()
    APPEND = enum.auto()
    HEREDOC = enum.auto()


@dataclass
class Node:
    """A node of the syntax tree.

    For a command, ``left`` leads to the next argument and ``right`` to the
    first redirection. For a redirection, ``left`` holds its target and
    ``right`` the next redirection. For a pipe, ``left`` is the command on
    the left and ``right`` the rest of the pipeline.
    """

    type: NodeType
    value: str | None = None
    left: Node | None = None
    right: Node | None = None

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants, node before left before right."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)