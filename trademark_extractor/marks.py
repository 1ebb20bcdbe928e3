"""
Mark representation and goods/services extraction.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional
import logging

from .field_selectors import FieldId, resolve_all, resolve_element, resolve_flag, resolve_text
from .models import GoodsServiceEntry, MarkDescriptor

logger = logging.getLogger(__name__)

PRIMARY_KIND = 'Primary'
NICE_KIND = 'Nice'
DOMESTIC_KIND = 'Domestic'


def extract_mark(context: ET.Element) -> Optional[MarkDescriptor]:
    """Extract the mark text and its descriptive fields."""
    logger.debug("Extracting mark information")

    mark_rep = resolve_element(context, FieldId.MARK_REPRESENTATION)
    if mark_rep is None:
        logger.debug("No mark representation found")
        return None

    return MarkDescriptor(
        text=resolve_text(mark_rep, FieldId.MARK_TEXT),
        is_standard_character=resolve_flag(mark_rep, FieldId.STANDARD_CHARACTER),
        description=resolve_text(mark_rep, FieldId.MARK_DESCRIPTION),
        disclaimer=resolve_text(mark_rep, FieldId.MARK_DISCLAIMER),
        significant_text=resolve_text(mark_rep, FieldId.MARK_SIGNIFICANT_TEXT),
    )


def _find_kind(classifications: List[ET.Element], kind: str) -> Optional[ET.Element]:
    for classification in classifications:
        if resolve_text(classification, FieldId.CLASSIFICATION_KIND) == kind:
            return classification
    return None


def _extract_entry(goods_services: ET.Element) -> GoodsServiceEntry:
    classifications = resolve_all(goods_services, FieldId.CLASSIFICATION)

    primary = _find_kind(classifications, PRIMARY_KIND)
    if primary is None and classifications:
        primary = classifications[0]

    nice = _find_kind(classifications, NICE_KIND)

    domestic_classes = []
    for classification in classifications:
        if resolve_text(classification, FieldId.CLASSIFICATION_KIND) != DOMESTIC_KIND:
            continue
        national = resolve_text(classification, FieldId.NATIONAL_CLASS_NUMBER)
        if national:
            domestic_classes.append(national)

    # Description lives in the first ClassDescription; some documents put it
    # straight under GoodsServices
    description_elem = resolve_element(goods_services, FieldId.CLASS_DESCRIPTION)
    if description_elem is None:
        description_elem = goods_services

    return GoodsServiceEntry(
        class_number=resolve_text(primary, FieldId.CLASS_NUMBER),
        nice_class=resolve_text(nice, FieldId.CLASS_NUMBER),
        description=resolve_text(description_elem, FieldId.GOODS_SERVICES_DESCRIPTION),
        domestic_classes=tuple(domestic_classes),
    )


def extract_goods_services(context: ET.Element) -> List[GoodsServiceEntry]:
    """
    Extract one entry per goods/services container, in document order.

    Containers without any usable classification still produce an entry, so
    the result always has as many entries as the document has containers.
    """
    logger.debug("Extracting goods and services")

    containers = resolve_all(context, FieldId.GOODS_SERVICES)
    if not containers:
        logger.debug("No goods and services found")
        return []

    logger.debug(f"Found {len(containers)} goods/services elements")
    return [_extract_entry(gs) for gs in containers]
