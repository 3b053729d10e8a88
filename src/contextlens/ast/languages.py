"""Language tags for the grammar adapters."""

import enum

from contextlens.exceptions import UnsupportedLanguageError


class Language(enum.Enum):
    """Languages with a tree-sitter grammar adapter."""

    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    TSX = "tsx"
    JAVA = "java"
    GO = "go"

    @property
    def display_name(self) -> str:
        """Human-readable name used in diagnostics."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_tag(cls, tag: "str | Language") -> "Language":
        """Resolve a language tag (case-insensitive) to a Language.

        Raises UnsupportedLanguageError for unknown tags.
        """
        if isinstance(tag, Language):
            return tag
        try:
            return cls(tag.strip().lower())
        except ValueError:
            supported = sorted(language.value for language in cls)
            msg = f"Unsupported language '{tag}'. Supported: {supported}"
            raise UnsupportedLanguageError(msg) from None


_DISPLAY_NAMES: dict[Language, str] = {
    Language.PYTHON: "Python",
    Language.JAVASCRIPT: "JavaScript",
    Language.TYPESCRIPT: "TypeScript",
    Language.TSX: "TSX",
    Language.JAVA: "Java",
    Language.GO: "Go",
}
