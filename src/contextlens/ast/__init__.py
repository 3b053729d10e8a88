"""Enclosing-context location and syntax checking over tree-sitter grammars."""

from contextlens.ast.adapter import GrammarAdapter, TreeSitterAdapter
from contextlens.ast.languages import Language
from contextlens.ast.locator import contains_range, find_enclosing_node, node_size
from contextlens.ast.nodes import EnclosingContext, Position, ValidityResult
from contextlens.ast.parser import clear_grammar_cache, create_parser, load_grammar
from contextlens.ast.registry import (
    AdapterRegistry,
    check_syntax,
    clear_adapter_cache,
    get_adapter,
    locate_enclosing_context,
)

__all__ = [
    "AdapterRegistry",
    "EnclosingContext",
    "GrammarAdapter",
    "Language",
    "Position",
    "TreeSitterAdapter",
    "ValidityResult",
    "check_syntax",
    "clear_adapter_cache",
    "clear_grammar_cache",
    "contains_range",
    "create_parser",
    "find_enclosing_node",
    "get_adapter",
    "load_grammar",
    "locate_enclosing_context",
    "node_size",
]
