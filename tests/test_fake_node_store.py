"""
Tests that WidgetConfig works against any NodeStore.

FakeStore is a small in-memory tree with no markup support beyond what the
tests need; it checks that the engine only goes through the store.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from typing import Dict, List, Optional

import pytest

from cordova_config.core.document import ConfigDocument
from cordova_config.core.exceptions import ParseError, ValidationError
from cordova_config.core.node_store import NodeStore
from cordova_config.core.widget_config import WidgetConfig


class FakeNode:
    def __init__(self, tag: str, attributes: Optional[Dict[str, str]] = None) -> None:
        self.tag = tag
        self.attributes: Dict[str, str] = dict(attributes or {})
        self.text: Optional[str] = None
        self.children: List["FakeNode"] = []


class FakeStore(NodeStore):
    """Tree of FakeNode objects; fragments are looked up in a canned table."""

    def __init__(self, fragments: Optional[Dict[str, FakeNode]] = None) -> None:
        self.fragments = fragments or {}
        self.calls: List[str] = []

    def parse_document(self, text):
        raise NotImplementedError

    def parse_fragment(self, raw, namespaces=None):
        self.calls.append("parse_fragment")
        if raw not in self.fragments:
            raise ParseError(f"unknown fragment {raw!r}")
        return self.fragments[raw]

    def serialize(self, root, indent=4, xml_declaration=True):
        return repr(_dump(root))

    def tag(self, node):
        return node.tag

    def children(self, node):
        return list(node.children)

    def create_node(self, tag, attributes=None):
        self.calls.append("create_node")
        return FakeNode(tag, attributes)

    def append(self, parent, child):
        self.calls.append("append")
        parent.children.append(child)

    def remove(self, parent, child):
        self.calls.append("remove")
        parent.children.remove(child)

    def get_attribute(self, node, key):
        return node.attributes.get(key)

    def set_attribute(self, node, key, value):
        node.attributes[key] = value

    def attributes(self, node):
        return dict(node.attributes)

    def replace_attributes(self, node, attributes):
        node.attributes = dict(attributes)

    def get_text(self, node):
        return node.text

    def set_text(self, node, text):
        node.text = text


def _dump(node: FakeNode):
    return (node.tag, node.attributes, node.text, [_dump(c) for c in node.children])


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore({"<feature/>": FakeNode("feature", {"name": "F"})})


@pytest.fixture
def fake_config(fake_store) -> WidgetConfig:
    root = FakeNode("widget", {"id": "com.example.fake"})
    doc = ConfigDocument(file_path="fake.xml", root=root, store=fake_store)
    return WidgetConfig.from_document(doc)


def test_root_attributes(fake_config) -> None:
    fake_config.set_version("1.0.0")
    fake_config.set_android_version_code("7")
    assert fake_config.root.attributes == {
        "id": "com.example.fake",
        "version": "1.0.0",
        "android-versionCode": "7",
    }
    with pytest.raises(ValidationError):
        fake_config.set_id("")


def test_preferences_and_platforms(fake_config) -> None:
    fake_config.set_preference("a", 1)
    fake_config.set_preference("a", 2)
    fake_config.set_preference("a", 3, "ios")
    root = fake_config.root
    assert [c.tag for c in root.children] == ["preference", "platform"]
    assert root.children[0].attributes == {"name": "a", "value": "2"}
    platform = root.children[1]
    assert platform.attributes == {"name": "ios"}
    assert [c.attributes for c in platform.children] == [{"name": "a", "value": "3"}]


def test_access_and_hooks(fake_config) -> None:
    fake_config.set_access_origin("*")
    fake_config.set_access_origin("https://x.org", {"subdomains": False})
    fake_config.set_access_origin("*")
    fake_config.add_hook("after_build", "hooks/done.js")
    origins = [c.attributes.get("origin") for c in fake_config.root.children if c.tag == "access"]
    assert origins == ["https://x.org", "*"]
    fake_config.remove_access_origins()
    assert [c.tag for c in fake_config.root.children] == ["hook"]


def test_named_element(fake_config) -> None:
    fake_config.set_author("Me", website="https://me.example")
    fake_config.set_author("You")
    authors = [c for c in fake_config.root.children if c.tag == "author"]
    assert len(authors) == 1
    assert authors[0].text == "You"
    assert authors[0].attributes == {}


def test_raw_xml_goes_through_store(fake_config, fake_store) -> None:
    assert fake_config.add_raw_xml("<feature/>", if_xpath_does_not_exist='/widget/feature[@name="F"]')
    assert fake_config.add_raw_xml("<feature/>", if_xpath_does_not_exist='/widget/feature[@name="F"]') is False
    assert fake_store.calls.count("parse_fragment") == 1
    assert [c.tag for c in fake_config.root.children] == ["feature"]


def test_raw_xml_parent_lookup(fake_config) -> None:
    fake_config.set_preference("x", "y", "android")
    assert fake_config.add_raw_xml("<feature/>", "./platform[@name='android']")
    platform = fake_config.root.children[0]
    assert [c.tag for c in platform.children] == ["preference", "feature"]


def test_to_string_uses_store_serializer(fake_config) -> None:
    assert fake_config.to_string() == repr(("widget", {"id": "com.example.fake"}, None, []))
