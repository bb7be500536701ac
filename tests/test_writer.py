"""
Tests for serializing and writing config documents.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from cordova_config.core.config import ToolSettings
from cordova_config.core.document import load_document, load_document_from_string
from cordova_config.core.exceptions import StorageError
from cordova_config.core.widget_config import WidgetConfig
from cordova_config.core.writer import serialize_document, write_document, write_document_sync
from tests.samples import SAMPLE_XML, tree_signature


def test_serialize_has_declaration_and_indent() -> None:
    doc = load_document_from_string('<widget id="a.b"><name>X</name></widget>')
    text = serialize_document(doc)
    assert text == (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<widget id="a.b">\n'
        "    <name>X</name>\n"
        "</widget>\n"
    )


def test_serialize_custom_indent_without_declaration() -> None:
    doc = load_document_from_string('<widget id="a.b"><name>X</name></widget>')
    settings = ToolSettings(indent=2, xml_declaration=False)
    assert serialize_document(doc, settings) == '<widget id="a.b">\n  <name>X</name>\n</widget>\n'


def test_serialize_does_not_mutate_tree() -> None:
    doc = load_document_from_string('<widget id="a.b"><name>X</name></widget>')
    serialize_document(doc)
    name = doc.store.find_first(doc.root, "./name")
    assert name.tail is None


def test_write_sync_round_trip(widget, config_file, store) -> None:
    widget.set_version("1.2.3")
    widget.set_preference("Orientation", "portrait", "ios")
    widget.write_sync()

    reloaded = load_document(config_file)
    assert tree_signature(store, reloaded.root) == tree_signature(store, widget.root)
    assert reloaded.store.get_attribute(reloaded.root, "version") == "1.2.3"


def test_rewrite_is_stable(widget, config_file) -> None:
    widget.write_sync()
    first = config_file.read_text(encoding="utf-8")
    WidgetConfig(config_file).write_sync()
    assert config_file.read_text(encoding="utf-8") == first


def test_written_file_keeps_namespaces_and_comments(widget, config_file) -> None:
    widget.write_sync()
    text = config_file.read_text(encoding="utf-8")
    assert 'xmlns="http://www.w3.org/ns/widgets"' in text
    assert 'xmlns:android="http://schemas.android.com/apk/res/android"' in text
    assert "<!-- Allow everything -->" in text
    assert "<widget " in text
    assert "ns0:" not in text


def test_nothing_written_before_write(widget, config_file) -> None:
    widget.set_name("Changed")
    assert config_file.read_text(encoding="utf-8") == SAMPLE_XML


@pytest.mark.asyncio
async def test_write_async(widget, config_file) -> None:
    widget.set_id("com.example.async")
    await widget.write()
    reloaded = load_document(config_file)
    assert reloaded.store.get_attribute(reloaded.root, "id") == "com.example.async"


@pytest.mark.asyncio
async def test_write_async_snapshots_state_at_call_time(widget, config_file) -> None:
    widget.set_name("First")
    pending = write_document(widget.document, widget.settings)
    await pending
    widget.set_name("Second")
    text = config_file.read_text(encoding="utf-8")
    assert "<name>First</name>" in text
    assert "Second" not in text


@pytest.mark.parametrize("atomic", [True, False])
def test_write_to_missing_directory_fails(tmp_path, atomic) -> None:
    target = tmp_path / "missing" / "config.xml"
    doc = load_document_from_string('<widget id="a.b"/>', file_path=target)
    with pytest.raises(StorageError) as exc_info:
        write_document_sync(doc, ToolSettings(atomic_write=atomic))
    assert exc_info.value.operation == "write"
    assert exc_info.value.file_path == str(target)


@pytest.mark.asyncio
async def test_write_async_to_missing_directory_fails(tmp_path) -> None:
    doc = load_document_from_string('<widget id="a.b"/>', file_path=tmp_path / "no" / "c.xml")
    with pytest.raises(StorageError):
        await write_document(doc)


def test_atomic_write_leaves_no_temp_files(widget, config_file) -> None:
    widget.write_sync()
    assert sorted(p.name for p in config_file.parent.iterdir()) == ["config.xml"]


def test_non_atomic_write(config_file) -> None:
    settings = ToolSettings(atomic_write=False)
    config = WidgetConfig(config_file, settings=settings)
    config.set_version("3.0.0")
    config.write_sync()
    assert 'version="3.0.0"' in config_file.read_text(encoding="utf-8")


def test_write_with_other_encoding(tmp_path) -> None:
    target = tmp_path / "config.xml"
    settings = ToolSettings(encoding="latin-1")
    doc = load_document_from_string('<widget id="a.b"/>', file_path=target, settings=settings)
    config = WidgetConfig.from_document(doc, settings=settings)
    config.set_name("Café")
    config.write_sync()
    raw = target.read_bytes()
    assert raw.startswith(b'<?xml version="1.0" encoding="latin-1"?>')
    assert "Café".encode("latin-1") in raw
