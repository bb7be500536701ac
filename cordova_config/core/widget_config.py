"""
Widget config - typed, validated mutations of a config.xml document.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..xpath import fix_absolute_xpath
from .config import ToolSettings
from .constants import (
    ATTR_ANDROID_VERSION_CODE,
    ATTR_ID,
    ATTR_IOS_BUNDLE_VERSION,
    ATTR_VERSION,
    HOOK_TYPES,
    TAG_ACCESS,
    TAG_HOOK,
    TAG_PLATFORM,
    TAG_PREFERENCE,
)
from .document import ConfigDocument, load_document
from .exceptions import ValidationError
from .node_store import NodeStore
from .validation import validate_field
from .writer import serialize_document, write_document, write_document_sync

logger = logging.getLogger(__name__)


def to_attribute_value(value: Any) -> str:
    """Convert a value to the string stored in an attribute."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class WidgetConfig:
    """
    Editor for a config.xml file.

    All mutations are synchronous and in memory; nothing reaches the file
    until write() or write_sync() is called. A WidgetConfig owns its document
    and is not safe to share between threads.
    """

    def __init__(
        self,
        file_path: Union[str, Path],
        store: Optional[NodeStore] = None,
        settings: Optional[ToolSettings] = None,
    ) -> None:
        """
        Load the document at file_path.

        Raises:
            StorageError, ParseError, SchemaError: see load_document
        """
        self._settings = settings or ToolSettings()
        self._doc = load_document(file_path, store=store, settings=self._settings)

    @classmethod
    def from_document(
        cls, document: ConfigDocument, settings: Optional[ToolSettings] = None
    ) -> WidgetConfig:
        """Wrap an already loaded document."""
        instance = cls.__new__(cls)
        instance._settings = settings or ToolSettings()
        instance._doc = document
        return instance

    @property
    def file_path(self) -> str:
        return self._doc.file_path

    @property
    def document(self) -> ConfigDocument:
        return self._doc

    @property
    def root(self) -> Any:
        return self._doc.root

    @property
    def settings(self) -> ToolSettings:
        return self._settings

    @property
    def _store(self) -> NodeStore:
        return self._doc.store

    # ------------------------------------------------------------------
    # Root attributes
    # ------------------------------------------------------------------

    def set_id(self, id: str) -> None:
        """Set the widget id (reverse-domain style identifier)."""
        self._set_root_attribute(ATTR_ID, validate_field("id", id))

    def set_version(self, version: str) -> None:
        """Set the MAJOR.MINOR.PATCH widget version."""
        self._set_root_attribute(ATTR_VERSION, validate_field("version", version))

    def set_android_version_code(self, version_code: Union[int, str]) -> None:
        """Set android-versionCode; digits only."""
        value = validate_field("android-version-code", version_code)
        self._set_root_attribute(ATTR_ANDROID_VERSION_CODE, value)

    def set_ios_bundle_version(self, version: str) -> None:
        """Set ios-CFBundleVersion; one to three dot-separated numbers."""
        value = validate_field("ios-bundle-version", version)
        self._set_root_attribute(ATTR_IOS_BUNDLE_VERSION, value)

    def _set_root_attribute(self, key: str, value: str) -> None:
        self._store.set_attribute(self.root, key, value)
        logger.debug(f"Set root attribute {key}={value!r}")

    # ------------------------------------------------------------------
    # Named elements
    # ------------------------------------------------------------------

    def set_element(
        self,
        tag: str,
        text: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Create or update the first <tag> child of the root.

        The text is set ("" when not given) and the attribute set is replaced
        entirely by `attributes`.

        Returns:
            The updated node
        """
        store = self._store
        node = store.find_child(self.root, tag)
        if node is None:
            node = store.create_node(tag)
            store.append(self.root, node)

        store.set_text(node, to_attribute_value(text) if text is not None else "")
        store.replace_attributes(
            node, {k: to_attribute_value(v) for k, v in (attributes or {}).items()}
        )
        logger.debug(f"Set element <{tag}>")
        return node

    def set_name(self, name: str) -> None:
        self.set_element("name", name)

    def set_description(self, description: str) -> None:
        self.set_element("description", description)

    def set_author(
        self, name: str, email: Optional[str] = None, website: Optional[str] = None
    ) -> None:
        """Set the <author> element; email and website become attributes."""
        attributes = {}
        if email:
            attributes["email"] = email
        if website:
            attributes["href"] = website
        self.set_element("author", name, attributes)

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------

    def set_preference(self, name: str, value: Any, platform: Optional[str] = None) -> None:
        """
        Add or replace a preference.

        Args:
            name: Preference name
            value: Preference value (converted to string)
            platform: Optional platform (e.g. 'ios' or 'android') the preference
                applies to; a <platform> element is created when missing
        """
        store = self._store
        name = to_attribute_value(name)
        scope = self.root
        if platform:
            platform = to_attribute_value(platform)
            scope = store.find_child(self.root, TAG_PLATFORM, name=platform)
            if scope is None:
                scope = store.create_node(TAG_PLATFORM, {"name": platform})
                store.append(self.root, scope)

        existing = store.find_child(scope, TAG_PREFERENCE, name=name)
        if existing is not None:
            store.remove(scope, existing)

        store.append(
            scope,
            store.create_node(
                TAG_PREFERENCE, {"name": name, "value": to_attribute_value(value)}
            ),
        )
        logger.debug(f"Set preference {name!r} (platform={platform!r})")

    # ------------------------------------------------------------------
    # Access origins
    # ------------------------------------------------------------------

    def remove_access_origins(self) -> None:
        """Remove every <access> element."""
        store = self._store
        removed = 0
        for node in store.find_all(self.root, "./" + TAG_ACCESS):
            store.remove(self.root, node)
            removed += 1
        logger.debug(f"Removed {removed} access origin(s)")

    def remove_access_origin(self, origin: str) -> None:
        """Remove the <access> element for origin if it exists."""
        store = self._store
        origin = to_attribute_value(origin)
        node = store.find_child(self.root, TAG_ACCESS, origin=origin)
        if node is not None:
            store.remove(self.root, node)
            logger.debug(f"Removed access origin {origin!r}")

    def set_access_origin(
        self, origin: str, options: Optional[Mapping[str, Any]] = None
    ) -> None:
        """
        Add an <access> element, replacing an existing one for the same origin.

        Args:
            origin: The origin of the access tag
            options: Extra attributes for the access tag (e.g. subdomains)
        """
        store = self._store
        origin = to_attribute_value(origin)
        attributes = {"origin": origin}
        for key, value in (options or {}).items():
            attributes[key] = to_attribute_value(value)

        self.remove_access_origin(origin)
        store.append(self.root, store.create_node(TAG_ACCESS, attributes))
        logger.debug(f"Set access origin {origin!r}")

    # ------------------------------------------------------------------
    # Hooks and raw XML
    # ------------------------------------------------------------------

    def add_hook(self, type: str, src: str) -> None:
        """
        Append a <hook> for a Cordova lifecycle event.

        Hooks are never deduplicated.

        Raises:
            ValidationError: If type is not a known hook type
        """
        if type not in HOOK_TYPES:
            raise ValidationError(
                "Please provide a valid hook target", field="type", value=type
            )
        store = self._store
        store.append(
            self.root, store.create_node(TAG_HOOK, {"type": type, "src": to_attribute_value(src)})
        )
        logger.debug(f"Added hook {type} -> {src}")

    def add_raw_xml(
        self,
        raw: str,
        at_xpath: Optional[str] = None,
        if_xpath_does_not_exist: Optional[str] = None,
    ) -> bool:
        """
        Append raw XML to the document.

        Args:
            raw: Markup of a single element
            at_xpath: Path of the parent; the first match is used. The root is
                the parent when omitted. Nothing is added when it matches nothing.
            if_xpath_does_not_exist: Nothing is added when this path matches a
                node, which makes repeated calls idempotent.

        Returns:
            True if the fragment was appended

        Raises:
            ParseError: If raw is not a single well-formed element
            PathSyntaxError: If a path is malformed
        """
        store = self._store
        root_tag = store.tag(self.root)
        at_xpath = fix_absolute_xpath(at_xpath, root_tag)
        if_xpath_does_not_exist = fix_absolute_xpath(if_xpath_does_not_exist, root_tag)

        parent = store.find_first(self.root, at_xpath) if at_xpath else self.root
        already_exists = bool(if_xpath_does_not_exist) and (
            store.find_first(self.root, if_xpath_does_not_exist) is not None
        )

        if parent is None or already_exists:
            logger.debug(
                f"Raw XML skipped (parent found: {parent is not None}, "
                f"already exists: {already_exists})"
            )
            return False

        node = store.parse_fragment(raw, store.namespace_declarations(self.root))
        store.append(parent, node)
        logger.debug(f"Added raw <{store.tag(node)}> under <{store.tag(parent)}>")
        return True

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """Serialized document as it would be written."""
        return serialize_document(self._doc, self._settings)

    async def write(self) -> None:
        """
        Write the document to its file.

        Raises:
            StorageError: If the file cannot be written
        """
        await write_document(self._doc, self._settings)

    def write_sync(self) -> None:
        """The same as write() but blocking."""
        write_document_sync(self._doc, self._settings)
