"""
Tool settings for reading and writing config.xml documents.

Provides the settings schema, validation and JSON loading.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import codecs
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from .constants import DEFAULT_ENCODING, DEFAULT_INDENT
from .exceptions import SettingsError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ToolSettings(BaseModel):
    """Settings shared by the loader, the writer and the CLI."""

    model_config = {"extra": "forbid"}  # Reject unknown fields

    indent: int = Field(
        default=DEFAULT_INDENT, description="Spaces per nesting level when writing"
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING, description="Text encoding used to read and write"
    )
    xml_declaration: bool = Field(
        default=True, description="Start written documents with an XML declaration"
    )
    atomic_write: bool = Field(
        default=True,
        description="Write to a temporary file and replace the target atomically",
    )
    log_level: str = Field(default="WARNING", description="Log level for the CLI")
    log_file: Optional[str] = Field(
        default=None, description="Path to log file (stderr if not set)"
    )

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v: int) -> int:
        """Validate indentation width."""
        if v < 0:
            raise ValueError(f"indent must be >= 0, got: {v}")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that the encoding is a known codec."""
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got: {v}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def validate_settings(
    settings_path: Path,
) -> tuple[bool, Optional[str], Optional[ToolSettings]]:
    """
    Validate settings file.

    Args:
        settings_path: Path to JSON settings file

    Returns:
        Tuple of (is_valid, error_message, settings_object)
    """
    try:
        if not settings_path.exists():
            return False, f"Settings file not found: {settings_path}", None

        with open(settings_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            return False, "Settings file must contain a JSON object", None

        return True, None, ToolSettings(**data)

    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {str(e)}", None
    except PydanticValidationError as e:
        return False, f"Validation error: {str(e)}", None
    except OSError as e:
        return False, f"Cannot read settings file: {str(e)}", None


def load_settings(settings_path: Optional[Path] = None) -> ToolSettings:
    """
    Load and validate settings.

    Args:
        settings_path: Path to JSON settings file; defaults are returned if None

    Returns:
        ToolSettings object

    Raises:
        SettingsError: If the settings file is missing or invalid
    """
    if settings_path is None:
        return ToolSettings()
    is_valid, error, settings = validate_settings(Path(settings_path))
    if not is_valid or settings is None:
        raise SettingsError(
            error or "Invalid settings", details={"path": str(settings_path)}
        )
    return settings
