"""Shared fixtures for the trademark extractor tests."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from trademark_extractor.field_selectors import NAMESPACES

DATA_DIR = Path(__file__).parent / "data"
SAMPLE_XML_PATH = DATA_DIR / "tsdr_status_87654321.xml"

NS_DECLARATIONS = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in NAMESPACES.items())


def wrap(body: str, root: str = "Trademark", prefix: str = "") -> str:
    """Build a small document around an XML fragment, declaring every known prefix."""
    tag = f"{prefix}{root}"
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<{tag} {NS_DECLARATIONS}>{body}</{tag}>'


def element(body: str, root: str = "Trademark") -> ET.Element:
    """Parse a fragment into an element for unit-testing individual extractors."""
    return ET.fromstring(wrap(body, root=root))


@pytest.fixture
def sample_xml_path() -> Path:
    return SAMPLE_XML_PATH


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_XML_PATH.read_text(encoding="utf-8")


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test reconfigures it."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)
