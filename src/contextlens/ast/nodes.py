"""Normalized, grammar-independent results returned by the adapters."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from contextlens.ast.locator import SyntaxNode


@dataclass(frozen=True)
class Position:
    """A point in source text: 1-indexed line, 0-indexed column."""

    line: int
    column: int


@dataclass(frozen=True)
class EnclosingContext:
    """The syntax node that encloses a requested line range.

    ``category`` is the grammar's raw node type (e.g. ``function_definition``);
    labels are not normalized across languages.
    """

    category: str
    start: Position
    end: Position

    @classmethod
    def from_node(cls, node: SyntaxNode) -> EnclosingContext:
        """Convert a syntax node, shifting its 0-indexed rows to 1-indexed lines."""
        return cls(
            category=node.type,
            start=Position(line=node.start_point.row + 1, column=node.start_point.column),
            end=Position(line=node.end_point.row + 1, column=node.end_point.column),
        )

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ValidityResult:
    """Outcome of a syntax check. ``error`` is empty exactly when ``valid``."""

    valid: bool
    error: str = ""

    def __post_init__(self) -> None:
        if self.valid == bool(self.error):
            msg = "error must be empty exactly when valid is True"
            raise ValueError(msg)

    @classmethod
    def ok(cls) -> ValidityResult:
        return cls(valid=True)

    @classmethod
    def failure(cls, error: str) -> ValidityResult:
        return cls(valid=False, error=error)
