"""Configuration management for contextlens."""

import tomllib
from pathlib import Path
from typing import Self

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from contextlens.ast.languages import Language
from contextlens.exceptions import ConfigError

CONFIG_FILENAME = ".contextlens.toml"


class ContextLensConfig(BaseModel):
    """Configuration for the grammar adapter registry."""

    model_config = {"extra": "ignore"}

    enabled_languages: list[str] = Field(
        default_factory=lambda: [language.value for language in Language],
        description="Language tags for which adapters may be created",
    )

    @field_validator("enabled_languages")
    @classmethod
    def validate_enabled_languages(cls, value: list[str]) -> list[str]:
        """Normalize language tags and reject unknown ones."""
        known = {language.value for language in Language}
        normalized = [tag.strip().lower() for tag in value]
        unknown = [tag for tag in normalized if tag not in known]
        if unknown:
            msg = f"unknown language tags {unknown}; supported: {sorted(known)}"
            raise ValueError(msg)
        return list(dict.fromkeys(normalized))

    @model_validator(mode="after")
    def validate_languages_not_empty(self) -> Self:
        """At least one language must stay enabled."""
        if not self.enabled_languages:
            msg = "enabled_languages cannot be empty"
            raise ValueError(msg)
        return self


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Find .contextlens.toml by walking up the directory tree.

    Args:
        start_path: Starting directory. Defaults to current working directory.

    Returns:
        Path to config file if found, None otherwise.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while True:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(config_path: Path | None = None, start_path: Path | None = None) -> ContextLensConfig:
    """Load configuration from a .contextlens.toml file.

    Args:
        config_path: Explicit path to config file. If None, searches for it.
        start_path: Starting directory for config file search. Defaults to cwd.

    Returns:
        ContextLensConfig instance with loaded or default values.

    Raises:
        ConfigError: If config file has invalid TOML syntax, invalid values,
            or cannot be read due to permissions.
    """
    if config_path is None:
        config_path = find_config_file(start_path)

    if config_path is None:
        return ContextLensConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
    except PermissionError as e:
        msg = f"Cannot read config file '{config_path}': permission denied"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Cannot read config file '{config_path}': {e}"
        raise ConfigError(msg) from e

    if not content.strip():
        return ContextLensConfig()

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in '{config_path}': {e}"
        raise ConfigError(msg) from e

    if not data:
        return ContextLensConfig()

    try:
        return ContextLensConfig(**data)
    except ValidationError as e:
        errors = e.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error["loc"])
            error_type = first_error["type"]
            error_msg = first_error["msg"]
            msg = f"Invalid config value for '{field}': {error_msg} (type: {error_type})"
        else:
            msg = f"Invalid config values: {e}"
        raise ConfigError(msg) from e
