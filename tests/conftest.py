"""Shared pytest configuration and fixtures."""

import pytest


@pytest.fixture
def sample_valid_config_toml() -> str:
    """Return valid TOML config string."""
    return """
enabled_languages = ["python", "javascript"]
"""


@pytest.fixture
def sample_encoding_config_toml() -> str:
    """Return TOML setting a source encoding, which is not configurable."""
    return """
source_encoding = "utf-16"
"""


@pytest.fixture
def sample_invalid_syntax_toml() -> str:
    """Return TOML with invalid syntax."""
    return """
key = "unclosed string
"""


@pytest.fixture
def sample_unknown_language_toml() -> str:
    """Return TOML enabling a language without an adapter."""
    return """
enabled_languages = ["python", "cobol"]
"""


@pytest.fixture
def sample_wrong_type_toml() -> str:
    """Return TOML with wrong type for a field."""
    return """
enabled_languages = "python"
"""


@pytest.fixture
def sample_unknown_field_toml() -> str:
    """Return TOML with unknown field."""
    return """
unknown_field = "value"
"""


@pytest.fixture
def sample_comments_only_toml() -> str:
    """Return TOML with only comments."""
    return """
# This is a comment
# Another comment

    # Indented comment
"""
