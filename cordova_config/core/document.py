"""
Config document model and loader.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .config import ToolSettings
from .constants import ROOT_TAG
from .etree_store import ElementTreeStore
from .exceptions import ParseError, SchemaError, StorageError
from .node_store import NodeStore

logger = logging.getLogger(__name__)


@dataclass
class ConfigDocument:
    """
    A parsed config.xml document.

    The root node belongs to `store`; every mutation goes through it.
    """

    file_path: str
    root: Any
    store: NodeStore

    @property
    def root_tag(self) -> str:
        return self.store.tag(self.root)


def load_document(
    file_path: Union[str, Path],
    store: Optional[NodeStore] = None,
    settings: Optional[ToolSettings] = None,
) -> ConfigDocument:
    """
    Read and parse a config.xml file.

    Args:
        file_path: Path to the document
        store: NodeStore to parse with (ElementTreeStore by default)
        settings: Tool settings (encoding)

    Returns:
        ConfigDocument with its root verified to be <widget>

    Raises:
        StorageError: If the file cannot be read
        ParseError: If the markup is malformed
        SchemaError: If the root element is not <widget>
    """
    settings = settings or ToolSettings()
    path = str(file_path)
    try:
        contents = Path(path).read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(
            f"Failed to read {path}: {e}", file_path=path, operation="read"
        ) from e

    return load_document_from_string(contents, file_path=path, store=store, settings=settings)


def load_document_from_string(
    contents: str,
    file_path: Union[str, Path] = "config.xml",
    store: Optional[NodeStore] = None,
    settings: Optional[ToolSettings] = None,
) -> ConfigDocument:
    """
    Parse config.xml markup held in memory.

    `file_path` is where the document will be written and is used in errors.
    """
    settings = settings or ToolSettings()
    store = store or ElementTreeStore(encoding=settings.encoding)
    path = str(file_path)

    if contents:
        # Skip a byte order mark or anything else before the first tag.
        start = contents.find("<")
        if start > 0:
            contents = contents[start:]

    try:
        root = store.parse_document(contents)
    except ParseError as e:
        raise ParseError(
            f"Failed to parse {path}: {e.message}",
            file_path=path,
            position=e.position,
        ) from e

    tag = store.tag(root)
    if tag != ROOT_TAG:
        raise SchemaError(
            f'{path} has incorrect root node name (expected "{ROOT_TAG}", was "{tag}")',
            file_path=path,
            expected=ROOT_TAG,
            actual=tag,
        )

    logger.debug(f"Loaded {path}")
    return ConfigDocument(file_path=path, root=root, store=store)
