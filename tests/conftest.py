"""
Pytest fixtures for config.xml tests.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from pathlib import Path

import pytest

from cordova_config.core.etree_store import ElementTreeStore
from cordova_config.core.widget_config import WidgetConfig
from tests.samples import MINIMAL_XML, SAMPLE_XML


@pytest.fixture
def store():
    """ElementTree-backed node store."""
    return ElementTreeStore()


@pytest.fixture
def config_file(tmp_path) -> Path:
    """Sample config.xml written to a temporary directory."""
    path = tmp_path / "config.xml"
    path.write_text(SAMPLE_XML, encoding="utf-8")
    return path


@pytest.fixture
def minimal_file(tmp_path) -> Path:
    """config.xml with an empty widget root."""
    path = tmp_path / "minimal.xml"
    path.write_text(MINIMAL_XML, encoding="utf-8")
    return path


@pytest.fixture
def widget(config_file) -> WidgetConfig:
    """WidgetConfig over the sample document."""
    return WidgetConfig(config_file)


@pytest.fixture
def minimal(minimal_file) -> WidgetConfig:
    """WidgetConfig over the minimal document."""
    return WidgetConfig(minimal_file)
