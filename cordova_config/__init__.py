"""
Cordova Config

Read, edit and write Cordova config.xml application manifests: identity and
version fields, platform preferences, access origins, hooks and raw XML.

Can be used as a library or via the `cordova-config` CLI.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

__version__ = "1.0.0"
__author__ = "Vasiliy Zdanovskiy"
__email__ = "vasilyvz@gmail.com"

from .core import (
    HOOK_TYPES,
    ROOT_TAG,
    ConfigDocument,
    ConfigXmlError,
    ElementTreeStore,
    NodeStore,
    ParseError,
    PathSyntaxError,
    SchemaError,
    SettingsError,
    StorageError,
    ToolSettings,
    ValidationError,
    WidgetConfig,
    load_document,
    load_document_from_string,
    load_settings,
)

__all__ = [
    "HOOK_TYPES",
    "ROOT_TAG",
    "ConfigDocument",
    "ConfigXmlError",
    "ElementTreeStore",
    "NodeStore",
    "ParseError",
    "PathSyntaxError",
    "SchemaError",
    "SettingsError",
    "StorageError",
    "ToolSettings",
    "ValidationError",
    "WidgetConfig",
    "load_document",
    "load_document_from_string",
    "load_settings",
]
