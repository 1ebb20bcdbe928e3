"""
Filing basis extraction.
"""

import xml.etree.ElementTree as ET
from typing import Optional
import logging

from .field_selectors import FieldId, resolve_element, resolve_flag
from .models import BasisFlags, FilingBasis

logger = logging.getLogger(__name__)


def _extract_flags(basis: Optional[ET.Element]) -> Optional[BasisFlags]:
    if basis is None:
        return None

    return BasisFlags(
        use=resolve_flag(basis, FieldId.BASIS_USE),
        intent_to_use=resolve_flag(basis, FieldId.BASIS_INTENT_TO_USE),
        foreign=resolve_flag(basis, FieldId.BASIS_FOREIGN_REGISTRATION),
        foreign_application=resolve_flag(basis, FieldId.BASIS_FOREIGN_APPLICATION),
    )


def extract_filing_basis(context: ET.Element) -> Optional[FilingBasis]:
    """
    Extract the current and original filing basis.

    CurrentBasis and FilingBasis are distinct elements inside the container,
    not namespace variants of one another.
    """
    logger.debug("Extracting filing basis")

    container = resolve_element(context, FieldId.FILING_BASIS)
    if container is None:
        logger.debug("No filing basis found")
        return None

    return FilingBasis(
        current=_extract_flags(resolve_element(container, FieldId.CURRENT_BASIS)),
        original=_extract_flags(resolve_element(container, FieldId.ORIGINAL_BASIS)),
    )
