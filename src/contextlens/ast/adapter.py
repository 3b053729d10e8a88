"""Grammar adapters: per-language locate and syntax-check operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from contextlens.ast.locator import find_enclosing_node
from contextlens.ast.nodes import EnclosingContext, ValidityResult
from contextlens.ast.parser import create_parser

if TYPE_CHECKING:
    from tree_sitter import Tree

    from contextlens.ast.languages import Language

logger = logging.getLogger(__name__)


class GrammarAdapter(Protocol):
    """Operations every language adapter provides."""

    def locate_enclosing_context(self, file_text: str, line_start: int, line_end: int) -> EnclosingContext | None:
        """Return the enclosing context of a 1-indexed inclusive line range, or None."""
        ...

    def check_syntax(self, file_text: str) -> ValidityResult:
        """Report whether file_text parses without any error nodes."""
        ...


class TreeSitterAdapter:
    """Grammar adapter backed by a single tree-sitter parser.

    The parser is not reentrant: use one adapter per thread, or serialize
    calls. Every call reparses the text; no tree is kept between calls.
    """

    def __init__(self, language: Language) -> None:
        self.language = language
        self._parser = create_parser(language)

    def __repr__(self) -> str:
        return f"TreeSitterAdapter(language={self.language.value!r})"

    def _parse(self, file_text: str) -> Tree:
        # tree-sitter reads the bytes as UTF-8
        return self._parser.parse(bytes(file_text, "utf-8"))

    def locate_enclosing_context(self, file_text: str, line_start: int, line_end: int) -> EnclosingContext | None:
        """Find the enclosing context of a line range in file_text.

        Error nodes from a recovered parse are searched like any other node.
        A parse fault is logged and yields None.

        Raises:
            ValueError: If line_start is greater than line_end.
        """
        if line_start > line_end:
            msg = f"Invalid line range: start {line_start} is after end {line_end}"
            raise ValueError(msg)

        try:
            tree = self._parse(file_text)
        except Exception as e:  # noqa: BLE001
            logger.warning(
                "%s parse failure while locating lines %d-%d: %s",
                self.language.display_name,
                line_start,
                line_end,
                e,
            )
            return None

        node = find_enclosing_node(tree.root_node, line_start, line_end)
        if node is None:
            logger.debug("No %s node encloses lines %d-%d", self.language.value, line_start, line_end)
            return None
        return EnclosingContext.from_node(node)

    def check_syntax(self, file_text: str) -> ValidityResult:
        """Check that file_text parses into a tree without ERROR or MISSING nodes.

        Recovered trees count as invalid. Parse faults are reported in the
        result, never raised.
        """
        name = self.language.display_name
        try:
            tree = self._parse(file_text)
        except Exception as e:  # noqa: BLE001
            logger.warning("%s parse failure during syntax check: %s", name, e)
            return ValidityResult.failure(f"{name} parse failure: {e}")

        if tree.root_node.has_error:
            return ValidityResult.failure(f"Syntax error in {name} code")
        return ValidityResult.ok()
