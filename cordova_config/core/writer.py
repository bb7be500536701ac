"""
Config document writer - serialize the tree and save it to its file.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .config import ToolSettings
from .document import ConfigDocument
from .exceptions import StorageError

logger = logging.getLogger(__name__)


def serialize_document(
    document: ConfigDocument, settings: Optional[ToolSettings] = None
) -> str:
    """Render the document as markup text with the configured indentation."""
    settings = settings or ToolSettings()
    return document.store.serialize(
        document.root,
        indent=settings.indent,
        xml_declaration=settings.xml_declaration,
    )


def write_document_sync(
    document: ConfigDocument, settings: Optional[ToolSettings] = None
) -> None:
    """
    Overwrite the document's file with its current state.

    Raises:
        StorageError: If the file cannot be written
    """
    settings = settings or ToolSettings()
    text = serialize_document(document, settings)
    try:
        _write_text(Path(document.file_path), text, settings)
    except OSError as e:
        raise StorageError(
            f"Failed to write {document.file_path}: {e}",
            file_path=document.file_path,
            operation="write",
        ) from e
    logger.debug(f"Wrote {document.file_path} ({len(text)} chars)")


async def write_document(
    document: ConfigDocument, settings: Optional[ToolSettings] = None
) -> None:
    """
    Asynchronous variant of write_document_sync.

    The tree is serialized before suspending, so the written content is the
    state at call time. The file write itself runs in a worker thread.
    """
    settings = settings or ToolSettings()
    text = serialize_document(document, settings)
    try:
        await asyncio.to_thread(_write_text, Path(document.file_path), text, settings)
    except OSError as e:
        raise StorageError(
            f"Failed to write {document.file_path}: {e}",
            file_path=document.file_path,
            operation="write",
        ) from e
    logger.debug(f"Wrote {document.file_path} ({len(text)} chars)")


def _write_text(target_path: Path, text: str, settings: ToolSettings) -> None:
    """Write text to target_path, atomically via os.replace when configured."""
    data = text.encode(settings.encoding)
    if not settings.atomic_write:
        target_path.write_bytes(data)
        return

    directory = target_path.parent if str(target_path.parent) else Path(".")
    temp_fd, temp_path_str = tempfile.mkstemp(
        suffix=".xml", prefix=".config_save_", dir=directory
    )
    temp_file: Optional[Path] = Path(temp_path_str)
    try:
        with os.fdopen(temp_fd, "wb") as f:
            f.write(data)
        if target_path.exists():
            # Keep the permissions of the file being replaced.
            os.chmod(temp_file, target_path.stat().st_mode & 0o7777)
        os.replace(str(temp_file), str(target_path))
        temp_file = None  # File was moved, don't delete it
    finally:
        if temp_file is not None and temp_file.exists():
            try:
                temp_file.unlink()
            except OSError as e:
                logger.warning(f"Failed to delete temporary file {temp_file}: {e}")
