"""
Base exception hierarchy for config.xml operations.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Optional, Tuple


class ConfigXmlError(Exception):
    """Base exception for config.xml operations."""

    def __init__(self, message: str, code: str = None, details: dict = None):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class SchemaError(ConfigXmlError):
    """Raised when the document root is not the expected element."""

    def __init__(
        self,
        message: str,
        file_path: str = None,
        expected: str = None,
        actual: str = None,
        details: dict = None,
    ):
        """
        Initialize schema error.

        Args:
            message: Error message
            file_path: Path of the offending document
            expected: Expected root tag
            actual: Root tag found in the document
            details: Optional additional details
        """
        super().__init__(message, code="SCHEMA_ERROR", details=details)
        self.file_path = file_path
        self.expected = expected
        self.actual = actual


class ParseError(ConfigXmlError):
    """Raised when markup cannot be parsed."""

    def __init__(
        self,
        message: str,
        file_path: str = None,
        position: Optional[Tuple[int, int]] = None,
        details: dict = None,
    ):
        """
        Initialize parse error.

        Args:
            message: Error message
            file_path: Optional path of the document being parsed
            position: Optional (line, column) reported by the parser
            details: Optional additional details
        """
        super().__init__(message, code="PARSE_ERROR", details=details)
        self.file_path = file_path
        self.position = position


class ValidationError(ConfigXmlError):
    """Raised when validation fails."""

    def __init__(
        self, message: str, field: str = None, value=None, details: dict = None
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Optional field name that failed validation
            value: Optional rejected value
            details: Optional additional details
        """
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field
        self.value = value


class StorageError(ConfigXmlError):
    """Raised when reading or writing the document file fails."""

    def __init__(
        self,
        message: str,
        file_path: str = None,
        operation: str = None,
        details: dict = None,
    ):
        """
        Initialize storage error.

        Args:
            message: Error message
            file_path: Path that could not be read or written
            operation: "read" or "write"
            details: Optional additional details
        """
        super().__init__(message, code="STORAGE_ERROR", details=details)
        self.file_path = file_path
        self.operation = operation


class PathSyntaxError(ConfigXmlError, ValueError):
    """Raised when a node path expression cannot be parsed."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        super().__init__(message, code="PATH_SYNTAX_ERROR", details=details)
        self.path = path


class SettingsError(ConfigXmlError):
    """Raised when tool settings are invalid."""

    def __init__(self, message: str, config_key: str = None, details: dict = None):
        """
        Initialize settings error.

        Args:
            message: Error message
            config_key: Optional settings key that is invalid
            details: Optional additional details
        """
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
        self.config_key = config_key
