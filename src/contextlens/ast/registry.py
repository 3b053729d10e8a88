"""Registry mapping language tags to grammar adapters, one adapter per thread."""

from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from contextlens.ast.adapter import GrammarAdapter, TreeSitterAdapter
from contextlens.ast.languages import Language
from contextlens.exceptions import UnsupportedLanguageError

if TYPE_CHECKING:
    from contextlens.ast.nodes import EnclosingContext, ValidityResult
    from contextlens.config import ContextLensConfig

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], GrammarAdapter]


class AdapterRegistry:
    """Resolve a language tag to a grammar adapter.

    Adapters own a parser that must not be shared across concurrent calls,
    so each thread gets its own adapter instance per language. Instances are
    created lazily and reused for later calls from the same thread.
    """

    def __init__(self, languages: Iterable[Language | str] | None = None) -> None:
        self._factories: dict[Language, AdapterFactory] = {}
        self._local = threading.local()
        selected = list(Language) if languages is None else [Language.from_tag(tag) for tag in languages]
        for language in selected:
            self.register(language, functools.partial(TreeSitterAdapter, language))

    @classmethod
    def from_config(cls, config: ContextLensConfig) -> AdapterRegistry:
        """Build a registry limited to the config's enabled languages."""
        return cls(languages=config.enabled_languages)

    def register(self, language: Language | str, factory: AdapterFactory) -> None:
        """Register (or replace) the adapter factory for a language."""
        self._factories[Language.from_tag(language)] = factory

    def supported_languages(self) -> list[Language]:
        return list(self._factories)

    def _thread_cache(self) -> dict[Language, tuple[AdapterFactory, GrammarAdapter]]:
        cache = getattr(self._local, "adapters", None)
        if cache is None:
            cache = {}
            self._local.adapters = cache
        return cache

    def get_adapter(self, language: Language | str) -> GrammarAdapter:
        """Return the calling thread's adapter for a language.

        Raises UnsupportedLanguageError if the language is unknown, not
        enabled in this registry, or its grammar is not installed.
        """
        resolved = Language.from_tag(language)
        factory = self._factories.get(resolved)
        if factory is None:
            msg = f"Language '{resolved.value}' is not enabled"
            raise UnsupportedLanguageError(msg)

        cache = self._thread_cache()
        cached = cache.get(resolved)
        if cached is not None and cached[0] is factory:
            return cached[1]

        adapter = factory()
        cache[resolved] = (factory, adapter)
        logger.debug("Created %s adapter for thread %s", resolved.value, threading.current_thread().name)
        return adapter

    def clear(self) -> None:
        """Drop the calling thread's cached adapters."""
        self._thread_cache().clear()


_default_registry = AdapterRegistry()


def get_adapter(language: Language | str) -> GrammarAdapter:
    """Return the calling thread's adapter for a language from the default registry."""
    return _default_registry.get_adapter(language)


def clear_adapter_cache() -> None:
    """Clear the calling thread's cached adapters (useful for testing)."""
    _default_registry.clear()


def locate_enclosing_context(
    language: Language | str, file_text: str, line_start: int, line_end: int
) -> EnclosingContext | None:
    """Locate the enclosing context of a line range using the default registry."""
    return get_adapter(language).locate_enclosing_context(file_text, line_start, line_end)


def check_syntax(language: Language | str, file_text: str) -> ValidityResult:
    """Check the syntax of file_text using the default registry."""
    return get_adapter(language).check_syntax(file_text)
