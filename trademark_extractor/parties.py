"""
Owner, correspondent and attorney extraction.

TSDR documents carry no structured role attribute on applicants: the current
owner is only recognizable from descriptive text inside the Applicant entry.
"""

import xml.etree.ElementTree as ET
from typing import List, Optional
import logging

from .address import extract_address
from .field_selectors import FieldId, attribute, element_text, resolve_all, resolve_element, resolve_text
from .models import Attorney, Correspondent, Owner

logger = logging.getLogger(__name__)

# Case-sensitive markers that identify the owner among several applicants
OWNER_ROLE_MARKERS = ('ORIGINAL REGISTRANT', 'OWNER')

MAIN_EMAIL_PURPOSE = 'Main'


def select_owner(applicants: List[ET.Element]) -> Optional[ET.Element]:
    """
    Pick the owner among applicant entries.

    The first applicant whose text contains a role marker wins; otherwise the
    first applicant in document order. Other phrasings are not recognized and
    fall through to the first entry.
    """
    for applicant in applicants:
        text = element_text(applicant)
        if any(marker in text for marker in OWNER_ROLE_MARKERS):
            return applicant

    return applicants[0] if applicants else None


def extract_owner(context: ET.Element) -> Optional[Owner]:
    """Extract the owner/applicant information."""
    logger.debug("Extracting owner information")

    applicants = resolve_all(context, FieldId.APPLICANT)
    owner = select_owner(applicants)
    if owner is None:
        logger.debug("No owner information found")
        return None

    logger.debug(f"Selected owner among {len(applicants)} applicant(s)")
    return Owner(
        name=resolve_text(owner, FieldId.ENTITY_NAME),
        legal_entity_name=resolve_text(owner, FieldId.LEGAL_ENTITY_NAME),
        incorporation_state=resolve_text(owner, FieldId.INCORPORATION_STATE),
        incorporation_country=resolve_text(owner, FieldId.INCORPORATION_COUNTRY),
        address=extract_address(owner),
    )


def _extract_email(correspondent: ET.Element) -> Optional[str]:
    """Main e-mail address when one is flagged, else the first non-empty one."""
    emails = resolve_all(correspondent, FieldId.EMAIL)

    for email in emails:
        if attribute(email, 'emailAddressPurposeCategory') == MAIN_EMAIL_PURPOSE:
            text = element_text(email).strip()
            if text:
                return text

    for email in emails:
        text = element_text(email).strip()
        if text:
            return text

    return None


def extract_correspondent(context: ET.Element) -> Optional[Correspondent]:
    """Extract the correspondent information."""
    logger.debug("Extracting correspondent information")

    correspondent = resolve_element(context, FieldId.CORRESPONDENT)
    if correspondent is None:
        logger.debug("No correspondent information found")
        return None

    return Correspondent(
        name=resolve_text(correspondent, FieldId.PERSON_NAME),
        organization=resolve_text(correspondent, FieldId.ORGANIZATION_NAME),
        email=_extract_email(correspondent),
        phone=resolve_text(correspondent, FieldId.PHONE),
        fax=resolve_text(correspondent, FieldId.FAX),
        address=extract_address(correspondent),
    )


def extract_attorney(context: ET.Element) -> Optional[Attorney]:
    """Extract the attorney of record. No address is kept for attorneys."""
    logger.debug("Extracting attorney information")

    attorney = resolve_element(context, FieldId.ATTORNEY)
    if attorney is None:
        logger.debug("No attorney information found")
        return None

    return Attorney(
        name=resolve_text(attorney, FieldId.PERSON_NAME),
        docket_number=resolve_text(attorney, FieldId.DOCKET),
        comment=resolve_text(attorney, FieldId.COMMENT),
    )
