"""
NodeStore implementation on xml.etree.ElementTree.

Names are kept exactly as written in the source: a default namespace does not
turn ``widget`` into ``{http://www.w3.org/ns/widgets}widget``, prefixed names
stay ``android:name`` and the xmlns declarations remain ordinary attributes.
Comments and processing instructions inside the root are preserved.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import copy
import logging
import re
import xml.etree.ElementTree as ET
from typing import Any, Dict, List, Mapping, Optional
from xml.sax.saxutils import quoteattr

from .constants import DEFAULT_ENCODING, DEFAULT_INDENT
from .exceptions import ParseError
from .node_store import NodeStore

logger = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"

_FRAGMENT_TAG = "cordova-config-fragment"
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")


class _LiteralNameBuilder(ET.TreeBuilder):
    """TreeBuilder that maps expanded {uri}local names back to prefix:local."""

    def __init__(self) -> None:
        super().__init__(insert_comments=True, insert_pis=True)
        self._pending: Dict[str, str] = {}
        # prefix -> uri in scope, most recent declaration last
        self._scopes: List[Dict[str, str]] = [{"xml": XML_NAMESPACE}]

    def start_ns(self, prefix: str, uri: str) -> None:
        self._pending[prefix] = uri

    def start(self, tag: str, attrs: Dict[str, str]) -> ET.Element:
        scope = dict(self._scopes[-1])
        literal: Dict[str, str] = {}
        for prefix, uri in self._pending.items():
            scope.pop(prefix, None)
            scope[prefix] = uri
            literal["xmlns:" + prefix if prefix else "xmlns"] = uri
        self._pending = {}
        self._scopes.append(scope)
        for key, value in attrs.items():
            literal[_literal_name(key, scope, attribute=True)] = value
        return super().start(_literal_name(tag, scope), literal)

    def end(self, tag: str) -> ET.Element:
        scope = self._scopes.pop()
        return super().end(_literal_name(tag, scope))


def _literal_name(name: str, scope: Mapping[str, str], attribute: bool = False) -> str:
    """
    Rebuild the source spelling of an expanded name.

    Elements in the default namespace stay unprefixed even when a prefix is
    bound to the same URI. Attributes never use the default namespace.
    """
    if name[:1] != "{":
        return name
    uri, local = name[1:].split("}", 1)
    if not attribute and scope.get("") == uri:
        return local
    for prefix in reversed(list(scope)):
        if prefix and scope[prefix] == uri:
            return f"{prefix}:{local}"
    return local


def _parse(text: str) -> ET.Element:
    parser = ET.XMLParser(target=_LiteralNameBuilder())
    try:
        parser.feed(text)
        return parser.close()
    except ET.ParseError as e:
        raise ParseError(str(e), position=getattr(e, "position", None)) from e


class ElementTreeStore(NodeStore):
    """NodeStore backed by xml.etree.ElementTree elements."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding

    def parse_document(self, text: str) -> ET.Element:
        return _parse(text)

    def parse_fragment(
        self, raw: str, namespaces: Optional[Mapping[str, str]] = None
    ) -> ET.Element:
        body = _XML_DECLARATION_RE.sub("", raw, count=1)
        declarations = "".join(
            f" xmlns:{prefix}={quoteattr(uri)}" if prefix else f" xmlns={quoteattr(uri)}"
            for prefix, uri in (namespaces or {}).items()
        )
        wrapper = _parse(f"<{_FRAGMENT_TAG}{declarations}>{body}</{_FRAGMENT_TAG}>")
        elements = self.children(wrapper)
        if len(elements) != 1:
            raise ParseError(
                f"Raw XML must contain exactly one root element, found {len(elements)}"
            )
        element = elements[0]
        element.tail = None
        return element

    def serialize(
        self, root: ET.Element, indent: int = DEFAULT_INDENT, xml_declaration: bool = True
    ) -> str:
        clone = copy.deepcopy(root)
        if indent > 0:
            ET.indent(clone, space=" " * indent)
        text = ET.tostring(clone, encoding="unicode")
        if xml_declaration:
            text = f'<?xml version="1.0" encoding="{self.encoding}"?>\n' + text
        return text + "\n"

    def tag(self, node: ET.Element) -> str:
        return node.tag

    def children(self, node: ET.Element) -> List[ET.Element]:
        # Comments and PIs carry a factory function as their tag.
        return [child for child in node if isinstance(child.tag, str)]

    def create_node(
        self, tag: str, attributes: Optional[Mapping[str, str]] = None
    ) -> ET.Element:
        return ET.Element(tag, dict(attributes or {}))

    def append(self, parent: ET.Element, child: ET.Element) -> None:
        parent.append(child)

    def remove(self, parent: ET.Element, child: ET.Element) -> None:
        parent.remove(child)

    def get_attribute(self, node: ET.Element, key: str) -> Optional[str]:
        return node.get(key)

    def set_attribute(self, node: ET.Element, key: str, value: str) -> None:
        node.set(key, value)

    def attributes(self, node: ET.Element) -> Dict[str, str]:
        return dict(node.attrib)

    def replace_attributes(self, node: ET.Element, attributes: Mapping[str, str]) -> None:
        node.attrib.clear()
        node.attrib.update(attributes)

    def get_text(self, node: ET.Element) -> Optional[str]:
        return node.text

    def set_text(self, node: ET.Element, text: Optional[str]) -> None:
        node.text = text
