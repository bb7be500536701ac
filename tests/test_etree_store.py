"""
Tests for the ElementTree node store.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from cordova_config.core.exceptions import ParseError
from tests.samples import SAMPLE_XML, tree_signature


def test_prefixed_attributes_stay_literal(store) -> None:
    root = store.parse_document(
        '<widget xmlns:android="http://schemas.android.com/apk/res/android">'
        '<uses-permission android:name="android.permission.CAMERA"/></widget>'
    )
    child = store.children(root)[0]
    assert store.tag(child) == "uses-permission"
    assert store.get_attribute(child, "android:name") == "android.permission.CAMERA"


def test_xml_lang_attribute(store) -> None:
    root = store.parse_document('<widget><description xml:lang="fr">Bonjour</description></widget>')
    child = store.children(root)[0]
    assert store.get_attribute(child, "xml:lang") == "fr"


def test_serialize_round_trip_keeps_namespaces_and_comments(store) -> None:
    root = store.parse_document(SAMPLE_XML)
    text = store.serialize(root)
    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>\n<widget ')
    assert 'xmlns="http://www.w3.org/ns/widgets"' in text
    assert "ns0:" not in text
    assert "<!-- Allow everything -->" in text
    assert text.endswith("</widget>\n")
    again = store.parse_document(text)
    assert tree_signature(store, again) == tree_signature(store, root)


def test_serialize_indents_with_four_spaces(store) -> None:
    root = store.parse_document("<widget><platform name='ios'><preference name='a' value='b'/></platform></widget>")
    text = store.serialize(root, indent=4, xml_declaration=False)
    assert text == (
        '<widget>\n'
        '    <platform name="ios">\n'
        '        <preference name="a" value="b" />\n'
        '    </platform>\n'
        '</widget>\n'
    )


def test_serialize_does_not_touch_the_tree(store) -> None:
    root = store.parse_document("<widget><name>x</name></widget>")
    store.serialize(root)
    assert root.text is None
    assert store.children(root)[0].tail is None


def test_parse_fragment_single_element(store) -> None:
    node = store.parse_fragment('<feature name="Camera"><param name="ios-package" value="CDVCamera"/></feature>')
    assert store.tag(node) == "feature"
    assert len(store.children(node)) == 1


def test_parse_fragment_uses_declared_namespaces(store) -> None:
    node = store.parse_fragment(
        '<uses-permission android:name="x"/>',
        {"android": "http://schemas.android.com/apk/res/android", "": "http://www.w3.org/ns/widgets"},
    )
    assert store.tag(node) == "uses-permission"
    assert store.attributes(node) == {"android:name": "x"}


def test_parse_fragment_strips_xml_declaration(store) -> None:
    node = store.parse_fragment('<?xml version="1.0"?>\n<icon src="a.png"/>')
    assert store.get_attribute(node, "src") == "a.png"


@pytest.mark.parametrize("raw", ["<a><b></a>", "<a/><b/>", "just text", ""])
def test_parse_fragment_rejects_invalid(store, raw) -> None:
    with pytest.raises(ParseError):
        store.parse_fragment(raw)


def test_find_child_matches_verbatim_values(store) -> None:
    root = store.parse_document("""<widget><access origin='say "hi"'/></widget>""")
    assert store.find_child(root, "access", origin='say "hi"') is not None
    assert store.find_child(root, "access", origin="other") is None


def test_namespace_declarations(store) -> None:
    root = store.parse_document(SAMPLE_XML)
    assert store.namespace_declarations(root) == {
        "": "http://www.w3.org/ns/widgets",
        "android": "http://schemas.android.com/apk/res/android",
    }


def test_default_namespace_aliased_by_prefix(store) -> None:
    root = store.parse_document(
        '<widget xmlns="http://www.w3.org/ns/widgets" xmlns:w="http://www.w3.org/ns/widgets" id="a.b">'
        '<name>App</name><w:author w:role="lead">Me</w:author></widget>'
    )
    assert store.tag(root) == "widget"
    assert [store.tag(c) for c in store.children(root)] == ["name", "author"]
    # A prefixed attribute is namespaced, so it keeps its prefix.
    assert store.attributes(store.children(root)[1]) == {"w:role": "lead"}


def test_prefix_kept_when_default_namespace_is_redeclared(store) -> None:
    root = store.parse_document(
        '<widget xmlns="urn:u" xmlns:u="urn:u">'
        '<platform xmlns="urn:v"><u:hook type="before_build"/></platform></widget>'
    )
    platform = store.children(root)[0]
    assert store.tag(platform) == "platform"
    assert store.tag(store.children(platform)[0]) == "u:hook"
