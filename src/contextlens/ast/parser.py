"""Tree-sitter grammar loading and parser construction."""

import logging

from tree_sitter import Language as TSLanguage
from tree_sitter import Parser

from contextlens.ast.languages import Language
from contextlens.exceptions import UnsupportedLanguageError

logger = logging.getLogger(__name__)

_grammar_cache: dict[Language, TSLanguage] = {}


def _load_grammar_module(language: Language) -> TSLanguage:
    """Import the grammar package for a language and wrap its language pointer.

    Raises ImportError if the grammar package is not installed.
    """
    match language:
        case Language.PYTHON:
            import tree_sitter_python  # noqa: PLC0415

            return TSLanguage(tree_sitter_python.language())
        case Language.JAVASCRIPT:
            import tree_sitter_javascript  # noqa: PLC0415

            return TSLanguage(tree_sitter_javascript.language())
        case Language.TYPESCRIPT:
            import tree_sitter_typescript  # noqa: PLC0415

            return TSLanguage(tree_sitter_typescript.language_typescript())
        case Language.TSX:
            import tree_sitter_typescript  # noqa: PLC0415

            return TSLanguage(tree_sitter_typescript.language_tsx())
        case Language.JAVA:
            import tree_sitter_java  # noqa: PLC0415

            return TSLanguage(tree_sitter_java.language())
        case Language.GO:
            import tree_sitter_go  # noqa: PLC0415

            return TSLanguage(tree_sitter_go.language())
        case _:
            raise UnsupportedLanguageError(f"No tree-sitter grammar known for {language.value}")


def load_grammar(language: Language) -> TSLanguage:
    """Return the tree-sitter grammar for a language, loading it on first use.

    Grammars are immutable and cached per language; parsers built from them
    are not (see create_parser).

    Raises UnsupportedLanguageError if the grammar package is not installed.
    """
    if language in _grammar_cache:
        return _grammar_cache[language]

    try:
        grammar = _load_grammar_module(language)
    except ImportError as e:
        msg = f"No tree-sitter grammar installed for {language.value}"
        raise UnsupportedLanguageError(msg) from e

    _grammar_cache[language] = grammar
    return grammar


def clear_grammar_cache() -> None:
    """Clear the cached tree-sitter grammars (useful for testing)."""
    _grammar_cache.clear()


def create_parser(language: Language) -> Parser:
    """Create a new tree-sitter Parser for the given language.

    A parser is not safe for concurrent parses, so every caller that may run
    on its own thread needs its own instance.

    Raises UnsupportedLanguageError if no grammar is available.
    """
    parser = Parser()
    parser.language = load_grammar(language)
    logger.debug("Created tree-sitter parser for %s", language.value)
    return parser
