"""emoji-linter Configuration System.

Loads and validates configuration from a JSON file in the project root.
Uses Pydantic for schema validation with defaults applied field by field.

The persisted document uses camelCase keys (``includeShortcodes``,
``maxTextLength``, ...); snake_case keys are accepted as well.

Usage:
    from emoji_linter.config import load_config

    config = load_config()
    print(config.detection.max_text_length)
    print(config.ignore.emojis)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
)
from pydantic.alias_generators import to_camel

from emoji_linter.errors import ConfigurationError, ErrorCode

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (
    ".emoji-linter.config.json",
    ".emoji-linter.json",
    "emoji-linter.config.json",
)

DEFAULT_MAX_TEXT_LENGTH = 1_000_000
DEFAULT_MAX_SHORTCODE_LENGTH = 50


class _ConfigSection(BaseModel):
    """Shared model settings for every config section."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class DetectionConfig(_ConfigSection):
    """Detection engine settings.

    Attributes:
        include_shortcodes: Report textual shortcodes such as ``:rocket:``.
        max_text_length: Longest buffer the engine accepts, in characters.
        max_shortcode_length: Longest shortcode name, excluding the colons.
        case_sensitive: When True, only lower-case shortcodes are recognized.
    """

    include_shortcodes: StrictBool = Field(
        default=True,
        validation_alias=AliasChoices("includeShortcodes", "include_shortcodes", "shortcodes"),
    )
    max_text_length: StrictInt = Field(default=DEFAULT_MAX_TEXT_LENGTH, gt=0)
    max_shortcode_length: StrictInt = Field(default=DEFAULT_MAX_SHORTCODE_LENGTH, gt=0)
    case_sensitive: StrictBool = True


class IgnoreConfig(_ConfigSection):
    """What the linter should skip.

    Attributes:
        files: Glob patterns (``*``, ``**``, ``?``) of paths to skip.
        emojis: Exact emoji texts that are never reported.
        patterns: Regular expressions; findings on matching lines are dropped.
    """

    files: list[StrictStr] = Field(default_factory=list)
    emojis: list[StrictStr] = Field(default_factory=list)
    patterns: list[StrictStr] = Field(default_factory=list)


class OutputConfig(_ConfigSection):
    """Report formatting preferences."""

    format: Literal["table", "json", "minimal"] = "table"
    show_context: StrictBool = True


class CleanupConfig(_ConfigSection):
    """Fix command preferences."""

    create_backup: StrictBool = False


class LinterConfig(_ConfigSection):
    """emoji-linter configuration schema.

    Attributes:
        detection: Detection engine settings.
        ignore: Files, emojis and line patterns to skip.
        output: Report formatting preferences.
        cleanup: Fix command preferences.
    """

    detection: DetectionConfig = Field(default_factory=DetectionConfig)
    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    cleanup: CleanupConfig = Field(default_factory=CleanupConfig)


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find the first known config file name in a directory.

    Args:
        directory: Directory to search. Defaults to the current directory.

    Returns:
        Path to the config file, or None if none exists.
    """
    base = directory or Path.cwd()
    for filename in CONFIG_FILENAMES:
        candidate = base / filename
        if candidate.is_file():
            return candidate
    return None


def parse_config(data: Any, source: str | None = None) -> LinterConfig:
    """Validate raw configuration data.

    Args:
        data: Decoded JSON document.
        source: Where the data came from, for error messages.

    Returns:
        Validated LinterConfig.

    Raises:
        ConfigurationError: If the document is not an object or fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration must be a JSON object",
            config_path=source,
        )
    try:
        return LinterConfig.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first["loc"])
        raise ConfigurationError(
            f"Invalid configuration value for '{key}': {first['msg']}",
            config_key=key,
            config_path=source,
            cause=e,
        ) from e


def load_config(config_path: Path | str | None = None) -> LinterConfig:
    """Load configuration from file.

    An explicitly requested file must exist. When no path is given the
    current directory is searched and defaults are used if nothing is found.

    Args:
        config_path: Optional explicit path to a config file.

    Returns:
        LinterConfig with loaded or default values.

    Raises:
        ConfigurationError: If an explicit file is missing, or any file holds
            invalid JSON or invalid values.
    """
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(
                f"Config file not found: {path}",
                config_path=str(path),
                code=ErrorCode.CFG_MISSING,
            )
        if not path.is_file():
            raise ConfigurationError(
                f"Config path is not a file: {path}",
                config_path=str(path),
            )
    else:
        found = find_config_file()
        if found is None:
            logger.debug("No config file found, using defaults")
            return LinterConfig()
        path = found

    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in config file {path}: {e}",
            config_path=str(path),
            cause=e,
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file {path}: {e}",
            config_path=str(path),
            cause=e,
        ) from e

    config = parse_config(data, source=str(path))
    logger.debug(f"Loaded configuration from {path}")
    return config


def save_config(config: LinterConfig, config_path: Path) -> bool:
    """Save configuration to file with camelCase keys.

    Args:
        config: Configuration to save.
        config_path: Destination path.

    Returns:
        True if saved successfully, False otherwise.
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with config_path.open("w", encoding="utf-8") as f:
            json.dump(config.model_dump(by_alias=True), f, indent=2)
            f.write("\n")
        logger.debug(f"Configuration saved to {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save config to {config_path}: {e}")
        return False
