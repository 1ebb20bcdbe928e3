"""
Field selector table and lookup routines for USPTO TSDR trademark XML.

TSDR documents use ST.96 elements under several namespace prefixes, and many
real documents drop the prefixes entirely. Every semantic field is mapped to an
ordered list of element names. Single values walk the ElementTree paths built
from those names and the first candidate with content wins; repeated elements
are collected across every namespace form of a name.
"""

import xml.etree.ElementTree as ET
from enum import Enum
from typing import Dict, List, Optional, Tuple


# XML namespaces seen in TSDR status documents
NAMESPACES = {
    'ns1': 'http://www.wipo.int/standards/XMLSchema/ST96/Common',
    'ns2': 'http://www.wipo.int/standards/XMLSchema/ST96/Trademark',
    'ns3': 'urn:us:gov:doc:uspto:trademark',
}

# Prefix order used when expanding a tag into candidates
PREFIX_ORDER = ('ns2', 'ns1', 'ns3')


class FieldId(Enum):
    """Semantic fields the extractors ask for."""
    # Root
    TRADEMARK = "trademark"

    # Basic info
    REGISTRATION_NUMBER = "registration_number"
    APPLICATION_NUMBER = "application_number"
    REGISTRATION_OFFICE = "registration_office"
    FILING_PLACE = "filing_place"
    MARK_CATEGORY = "mark_category"

    # Dates
    APPLICATION_DATE = "application_date"
    REGISTRATION_DATE = "registration_date"
    PUBLICATION = "publication"
    PUBLICATION_DATE = "publication_date"
    FIRST_USE_DATE = "first_use_date"
    FIRST_USE_COMMERCE_DATE = "first_use_commerce_date"

    # Address
    POSTAL_ADDRESS = "postal_address"
    ADDRESS_LINE = "address_line"
    CITY = "city"
    REGION = "region"
    COUNTRY = "country"
    POSTAL_CODE = "postal_code"

    # Parties
    APPLICANT = "applicant"
    ENTITY_NAME = "entity_name"
    LEGAL_ENTITY_NAME = "legal_entity_name"
    INCORPORATION_STATE = "incorporation_state"
    INCORPORATION_COUNTRY = "incorporation_country"
    CORRESPONDENT = "correspondent"
    PERSON_NAME = "person_name"
    ORGANIZATION_NAME = "organization_name"
    EMAIL = "email"
    PHONE = "phone"
    FAX = "fax"
    ATTORNEY = "attorney"
    DOCKET = "docket"
    COMMENT = "comment"

    # Mark
    MARK_REPRESENTATION = "mark_representation"
    MARK_TEXT = "mark_text"
    MARK_SIGNIFICANT_TEXT = "mark_significant_text"
    STANDARD_CHARACTER = "standard_character"
    MARK_DESCRIPTION = "mark_description"
    MARK_DISCLAIMER = "mark_disclaimer"

    # Goods and services
    GOODS_SERVICES = "goods_services"
    CLASSIFICATION = "classification"
    CLASSIFICATION_KIND = "classification_kind"
    CLASS_NUMBER = "class_number"
    NATIONAL_CLASS_NUMBER = "national_class_number"
    CLASS_DESCRIPTION = "class_description"
    GOODS_SERVICES_DESCRIPTION = "goods_services_description"

    # Filing basis
    FILING_BASIS = "filing_basis"
    CURRENT_BASIS = "current_basis"
    ORIGINAL_BASIS = "original_basis"
    BASIS_USE = "basis_use"
    BASIS_INTENT_TO_USE = "basis_intent_to_use"
    BASIS_FOREIGN_REGISTRATION = "basis_foreign_registration"
    BASIS_FOREIGN_APPLICATION = "basis_foreign_application"

    # History and status
    MARK_EVENT = "mark_event"
    EVENT_DATE = "event_date"
    EVENT_CODE = "event_code"
    EVENT_DESCRIPTION = "event_description"
    EVENT_ENTRY_NUMBER = "event_entry_number"
    EVENT_CATEGORY = "event_category"
    EVENT_ADDITIONAL_TEXT = "event_additional_text"
    STATUS_CODE = "status_code"
    STATUS_DATE = "status_date"
    STATUS_DESCRIPTION = "status_description"

    # Associated marks
    ASSOCIATED_MARK = "associated_mark"
    ASSOCIATION_CATEGORY = "association_category"
    ASSOCIATED_APPLICATION = "associated_application"
    ASSOCIATED_APPLICATION_NUMBER = "associated_application_number"
    INTERNATIONAL_NUMBER = "international_number"


def _variants(*tags: str) -> Tuple[str, ...]:
    """
    Expand element names into descendant paths, one tag at a time:
    bare name, each known prefix, then any namespace.
    """
    paths = []
    for tag in tags:
        paths.append(f'.//{tag}')
        for prefix in PREFIX_ORDER:
            paths.append(f'.//{prefix}:{tag}')
        paths.append(f'.//{{*}}{tag}')
    return tuple(paths)


FIELD_TAGS: Dict[FieldId, Tuple[str, ...]] = {
    FieldId.TRADEMARK: ('Trademark',),

    FieldId.REGISTRATION_NUMBER: ('RegistrationNumber',),
    FieldId.APPLICATION_NUMBER: ('ApplicationNumberText', 'ApplicationNumber'),
    FieldId.REGISTRATION_OFFICE: ('RegistrationOfficeCode',),
    FieldId.FILING_PLACE: ('FilingPlace',),
    FieldId.MARK_CATEGORY: ('MarkCategory',),

    FieldId.APPLICATION_DATE: ('ApplicationDate',),
    FieldId.REGISTRATION_DATE: ('RegistrationDate',),
    FieldId.PUBLICATION: ('Publication',),
    FieldId.PUBLICATION_DATE: ('PublicationDate',),
    FieldId.FIRST_USE_DATE: ('FirstUsedDate',),
    FieldId.FIRST_USE_COMMERCE_DATE: ('FirstUsedCommerceDate',),

    FieldId.POSTAL_ADDRESS: ('PostalStructuredAddress', 'Address'),
    FieldId.ADDRESS_LINE: ('AddressLineText',),
    FieldId.CITY: ('CityName',),
    FieldId.REGION: ('GeographicRegionName',),
    FieldId.COUNTRY: ('CountryCode',),
    FieldId.POSTAL_CODE: ('PostalCode',),

    FieldId.APPLICANT: ('Applicant',),
    FieldId.ENTITY_NAME: ('EntityName', 'OrganizationStandardName', 'PersonFullName'),
    FieldId.LEGAL_ENTITY_NAME: ('LegalEntityName',),
    FieldId.INCORPORATION_STATE: ('IncorporationState',),
    FieldId.INCORPORATION_COUNTRY: ('IncorporationCountryCode',),
    FieldId.CORRESPONDENT: ('NationalCorrespondent', 'Correspondent'),
    FieldId.PERSON_NAME: ('PersonFullName',),
    FieldId.ORGANIZATION_NAME: ('OrganizationStandardName',),
    FieldId.EMAIL: ('EmailAddressText',),
    FieldId.PHONE: ('PhoneNumber',),
    FieldId.FAX: ('FaxNumber',),
    FieldId.ATTORNEY: ('RecordAttorney', 'Attorney'),
    FieldId.DOCKET: ('DocketText',),
    FieldId.COMMENT: ('CommentText',),

    FieldId.MARK_REPRESENTATION: ('MarkRepresentation',),
    FieldId.MARK_TEXT: ('MarkVerbalElementText',),
    FieldId.MARK_SIGNIFICANT_TEXT: ('MarkSignificantVerbalElementText',),
    FieldId.STANDARD_CHARACTER: ('MarkStandardCharacterIndicator',),
    FieldId.MARK_DESCRIPTION: ('MarkDescriptionText',),
    FieldId.MARK_DISCLAIMER: ('MarkDisclaimerText',),

    FieldId.GOODS_SERVICES: ('GoodsServices',),
    FieldId.CLASSIFICATION: ('GoodsServicesClassification', 'Classification'),
    FieldId.CLASSIFICATION_KIND: ('ClassificationKindCode',),
    FieldId.CLASS_NUMBER: ('ClassNumber',),
    FieldId.NATIONAL_CLASS_NUMBER: ('NationalClassNumber',),
    FieldId.CLASS_DESCRIPTION: ('ClassDescription',),
    FieldId.GOODS_SERVICES_DESCRIPTION: ('GoodsServicesDescriptionText',),

    FieldId.FILING_BASIS: ('NationalFilingBasis', 'FilingBasis'),
    FieldId.CURRENT_BASIS: ('CurrentBasis',),
    FieldId.ORIGINAL_BASIS: ('FilingBasis',),
    FieldId.BASIS_USE: ('BasisUseIndicator',),
    FieldId.BASIS_INTENT_TO_USE: ('BasisIntentToUseIndicator',),
    FieldId.BASIS_FOREIGN_REGISTRATION: ('BasisForeignRegistrationIndicator',),
    FieldId.BASIS_FOREIGN_APPLICATION: ('BasisForeignApplicationIndicator',),

    FieldId.MARK_EVENT: ('MarkEvent', 'Event'),
    FieldId.EVENT_DATE: ('MarkEventDate', 'EventDate'),
    FieldId.EVENT_CODE: ('MarkEventCode', 'EventCode'),
    FieldId.EVENT_DESCRIPTION: ('MarkEventDescriptionText', 'EventDescription'),
    FieldId.EVENT_ENTRY_NUMBER: ('MarkEventEntryNumber', 'EntryNumber'),
    FieldId.EVENT_CATEGORY: ('MarkEventCategory',),
    FieldId.EVENT_ADDITIONAL_TEXT: ('MarkEventAdditionalText',),
    FieldId.STATUS_CODE: ('MarkCurrentStatusCode',),
    FieldId.STATUS_DATE: ('MarkCurrentStatusDate',),
    FieldId.STATUS_DESCRIPTION: ('MarkCurrentStatusExternalDescriptionText',),

    FieldId.ASSOCIATED_MARK: ('AssociatedMark',),
    FieldId.ASSOCIATION_CATEGORY: ('AssociationCategory',),
    FieldId.ASSOCIATED_APPLICATION: ('ApplicationNumber',),
    FieldId.ASSOCIATED_APPLICATION_NUMBER: ('ApplicationNumberText',),
    FieldId.INTERNATIONAL_NUMBER: ('InternationalApplicationNumber',),
}


# Candidate paths for single-value lookups, in priority order
SELECTORS: Dict[FieldId, Tuple[str, ...]] = {
    field: _variants(*tags) for field, tags in FIELD_TAGS.items()
}


def element_text(elem: Optional[ET.Element]) -> str:
    """Full text content of an element and its descendants."""
    if elem is None:
        return ''
    return ''.join(elem.itertext())


def attribute(elem: ET.Element, name: str) -> Optional[str]:
    """Attribute value by local name, with or without a namespace."""
    value = elem.get(name)
    if value is not None:
        return value
    for key, value in elem.attrib.items():
        if key.endswith('}' + name):
            return value
    return None


def resolve_all(context: Optional[ET.Element], field: FieldId) -> List[ET.Element]:
    """
    Return every element carrying the field's first tag name that occurs.

    All namespace forms of a tag are collected together, so a document that
    mixes prefixed and bare copies of an element loses none of them. Tag
    names keep their priority: a later name is only tried when no element
    carries an earlier one.

    Args:
        context: Element whose descendants are searched
        field: Semantic field to look up

    Returns:
        Matching elements in document order, or an empty list
    """
    if context is None:
        return []

    for tag in FIELD_TAGS[field]:
        # {*} matches any namespace as well as none
        elements = context.findall(f'.//{{*}}{tag}')
        if elements:
            return elements

    return []


def resolve_element(context: Optional[ET.Element], field: FieldId) -> Optional[ET.Element]:
    """Return the first element matched for a field, or None."""
    elements = resolve_all(context, field)
    return elements[0] if elements else None


def resolve_text(context: Optional[ET.Element], field: FieldId) -> Optional[str]:
    """
    Return the trimmed text of the first candidate with non-empty content.

    Args:
        context: Element whose descendants are searched
        field: Semantic field to look up

    Returns:
        Trimmed text content, or None when no candidate has any
    """
    if context is None:
        return None

    for path in SELECTORS[field]:
        elem = context.find(path, NAMESPACES)
        if elem is None:
            continue
        text = element_text(elem).strip()
        if text:
            return text

    return None


def resolve_flag(context: Optional[ET.Element], field: FieldId) -> bool:
    """True only when the field's text is exactly the literal 'true'."""
    return resolve_text(context, field) == 'true'
