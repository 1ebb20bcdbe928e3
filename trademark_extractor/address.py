"""
Postal address extraction, shared by every party extractor.
"""

import xml.etree.ElementTree as ET
from typing import Optional

from .field_selectors import FieldId, element_text, resolve_all, resolve_element, resolve_text
from .models import Address


def extract_address(node: Optional[ET.Element]) -> Optional[Address]:
    """
    Extract the postal address found under a party element.

    Args:
        node: Party element (owner, correspondent, ...)

    Returns:
        Address, or None when the party has no address container
    """
    address = resolve_element(node, FieldId.POSTAL_ADDRESS)
    if address is None:
        return None

    lines = []
    for line_elem in resolve_all(address, FieldId.ADDRESS_LINE):
        line = element_text(line_elem).strip()
        if line:
            lines.append(line)

    return Address(
        lines=tuple(lines),
        city=resolve_text(address, FieldId.CITY),
        state_or_region=resolve_text(address, FieldId.REGION),
        country=resolve_text(address, FieldId.COUNTRY),
        postal_code=resolve_text(address, FieldId.POSTAL_CODE),
    )
