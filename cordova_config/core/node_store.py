"""
Node store contract.

The mutation engine never touches a tree library directly. It goes through a
NodeStore, which owns parsing, serialization and the node primitives. Path
lookups are implemented once here on top of those primitives.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from ..xpath.executor import select


class NodeStore(ABC):
    """Base class for tree implementations backing a config document."""

    @abstractmethod
    def parse_document(self, text: str) -> Any:
        """
        Parse markup text and return the root node.

        Raises:
            ParseError: If the markup is malformed
        """
        ...

    @abstractmethod
    def parse_fragment(self, raw: str, namespaces: Optional[Mapping[str, str]] = None) -> Any:
        """
        Parse a standalone fragment holding exactly one element.

        Args:
            raw: Markup of the fragment
            namespaces: prefix -> URI declarations in scope ("" for the default)

        Raises:
            ParseError: If the fragment is malformed or not a single element
        """
        ...

    @abstractmethod
    def serialize(self, root: Any, indent: int = 4, xml_declaration: bool = True) -> str:
        """Serialize the tree below root to markup text."""
        ...

    @abstractmethod
    def tag(self, node: Any) -> str:
        ...

    @abstractmethod
    def children(self, node: Any) -> List[Any]:
        """Element children of node, in document order."""
        ...

    @abstractmethod
    def create_node(self, tag: str, attributes: Optional[Mapping[str, str]] = None) -> Any:
        ...

    @abstractmethod
    def append(self, parent: Any, child: Any) -> None:
        ...

    @abstractmethod
    def remove(self, parent: Any, child: Any) -> None:
        ...

    @abstractmethod
    def get_attribute(self, node: Any, key: str) -> Optional[str]:
        ...

    @abstractmethod
    def set_attribute(self, node: Any, key: str, value: str) -> None:
        ...

    @abstractmethod
    def attributes(self, node: Any) -> Dict[str, str]:
        """Copy of the node's attributes, in order."""
        ...

    @abstractmethod
    def replace_attributes(self, node: Any, attributes: Mapping[str, str]) -> None:
        """Drop every attribute of node and set the given ones."""
        ...

    @abstractmethod
    def get_text(self, node: Any) -> Optional[str]:
        ...

    @abstractmethod
    def set_text(self, node: Any, text: Optional[str]) -> None:
        ...

    def find_all(self, node: Any, path: str) -> List[Any]:
        """All nodes matching path relative to node."""
        return select(self, node, path)

    def find_first(self, node: Any, path: str) -> Optional[Any]:
        """First node matching path relative to node, or None."""
        matches = select(self, node, path)
        return matches[0] if matches else None

    def find_child(self, parent: Any, tag: str, **attributes: str) -> Optional[Any]:
        """
        First direct child of parent with tag and the given attribute values.

        Unlike find_first this takes values verbatim, so origins or names
        containing quotes need no escaping.
        """
        for child in self.children(parent):
            if self.tag(child) != tag:
                continue
            if all(self.get_attribute(child, k) == v for k, v in attributes.items()):
                return child
        return None

    def namespace_declarations(self, node: Any) -> Dict[str, str]:
        """prefix -> URI for the xmlns attributes written on node."""
        out: Dict[str, str] = {}
        for key, value in self.attributes(node).items():
            if key == "xmlns":
                out[""] = value
            elif key.startswith("xmlns:"):
                out[key[len("xmlns:"):]] = value
        return out
