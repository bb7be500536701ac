"""
Core functionality for config.xml editing.

This module contains the document loader, the node store contract and its
ElementTree implementation, validation, the writer and the WidgetConfig
mutation API.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from .constants import HOOK_TYPES, ROOT_TAG
from .exceptions import (
    ConfigXmlError,
    ParseError,
    PathSyntaxError,
    SchemaError,
    SettingsError,
    StorageError,
    ValidationError,
)
from .config import ToolSettings, load_settings
from .node_store import NodeStore
from .etree_store import ElementTreeStore
from .document import ConfigDocument, load_document, load_document_from_string
from .writer import serialize_document, write_document, write_document_sync
from .widget_config import WidgetConfig

__all__ = [
    "HOOK_TYPES",
    "ROOT_TAG",
    "ConfigXmlError",
    "ParseError",
    "PathSyntaxError",
    "SchemaError",
    "SettingsError",
    "StorageError",
    "ValidationError",
    "ToolSettings",
    "load_settings",
    "NodeStore",
    "ElementTreeStore",
    "ConfigDocument",
    "load_document",
    "load_document_from_string",
    "serialize_document",
    "write_document",
    "write_document_sync",
    "WidgetConfig",
]
