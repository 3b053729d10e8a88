"""Grammar-independent search for the node enclosing a line range."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class Point(Protocol):
    """A 0-indexed (row, column) position, as exposed by tree-sitter."""

    @property
    def row(self) -> int: ...

    @property
    def column(self) -> int: ...


class SyntaxNode(Protocol):
    """The subset of a concrete syntax node the locator relies on."""

    @property
    def type(self) -> str: ...

    @property
    def start_point(self) -> Point: ...

    @property
    def end_point(self) -> Point: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...


def contains_range(node: SyntaxNode, line_start: int, line_end: int) -> bool:
    """Check whether a node's rows cover the 1-indexed inclusive line range."""
    return node.start_point.row + 1 <= line_start and line_end <= node.end_point.row + 1


def node_size(node: SyntaxNode) -> int:
    """Number of row transitions a node spans; a single-line node has size 0."""
    return node.end_point.row - node.start_point.row


def find_enclosing_node(root: SyntaxNode | None, line_start: int, line_end: int) -> SyntaxNode | None:
    """Find the largest node whose span contains a 1-indexed inclusive line range.

    Every node is visited once, depth-first, parents before children and
    siblings left to right. The candidate is replaced only when a containing
    node is strictly larger than the current one, so on ties the node seen
    first wins, and nodes spanning a single line never qualify.

    Args:
        root: Root of the syntax tree, or None for an absent tree.
        line_start: First line of the range (1-indexed).
        line_end: Last line of the range (1-indexed, inclusive).

    Returns:
        The winning node, or None when no node contains the range.

    Raises:
        ValueError: If line_start is greater than line_end.
    """
    if line_start > line_end:
        msg = f"Invalid line range: start {line_start} is after end {line_end}"
        raise ValueError(msg)

    if root is None:
        return None

    best: SyntaxNode | None = None
    largest_size = 0
    stack: list[SyntaxNode] = [root]

    while stack:
        node = stack.pop()
        if contains_range(node, line_start, line_end):
            size = node_size(node)
            if size > largest_size:
                largest_size = size
                best = node
        # Reversed so the leftmost child is popped first
        stack.extend(reversed(node.children))

    return best
