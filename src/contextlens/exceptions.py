"""Custom exception hierarchy for contextlens."""


class ContextLensError(Exception):
    """Base exception for all contextlens errors."""


class ConfigError(ContextLensError):
    """Configuration-related errors."""


class UnsupportedLanguageError(ContextLensError):
    """Programming language not supported or its grammar is not installed."""
