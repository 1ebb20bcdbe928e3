"""
XML Parser module for USPTO TSDR trademark status documents.
Turns one ST.96 trademark document into a normalized TrademarkRecord.
"""

import xml.etree.ElementTree as ET
from typing import Union
from pathlib import Path
import logging

from .dates import normalize_date
from .field_selectors import FieldId, resolve_element, resolve_text
from .filing_basis import extract_filing_basis
from .history import extract_international_associations, extract_prosecution_history, extract_status
from .marks import extract_goods_services, extract_mark
from .models import BasicInfo, DateSet, TrademarkRecord
from .parties import extract_attorney, extract_correspondent, extract_owner

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Base class for trademark document parsing errors."""


class MalformedXMLError(ParseError):
    """The document is not well-formed XML."""

    def __init__(self, detail: str):
        super().__init__(f"XML parsing error: {detail}")
        self.detail = detail


class TrademarkXMLParser:
    """
    Parser for USPTO TSDR trademark XML documents.

    Holds no per-document state; one instance can be shared freely.
    """

    def parse(self, xml: Union[str, bytes]) -> TrademarkRecord:
        """
        Parse a TSDR XML document.

        Args:
            xml: XML document text or bytes

        Returns:
            The extracted record, possibly sparse

        Raises:
            MalformedXMLError: if the document is not well-formed XML
        """
        logger.debug("Starting USPTO trademark XML parsing")

        try:
            root = ET.fromstring(self._clean_xml(xml))
        except ET.ParseError as e:
            logger.error(f"XML parsing error: {e}")
            raise MalformedXMLError(str(e)) from e

        # Document-level node, so the root element itself can be matched
        document = ET.Element('document')
        document.append(root)

        trademark = resolve_element(document, FieldId.TRADEMARK)
        if trademark is None:
            logger.warning("No trademark element found, extracting from document root")
            record = self._extract_record(document, fallback_mode=True)
        else:
            record = self._extract_record(trademark, fallback_mode=False)

        logger.info(
            f"Parsed trademark record: application {record.basic_info.application_number}, "
            f"registration {record.basic_info.registration_number}"
        )
        return record

    def parse_file(self, xml_path: Union[str, Path]) -> TrademarkRecord:
        """
        Parse a TSDR XML file from disk.

        Args:
            xml_path: Path to the XML file

        Returns:
            The extracted record
        """
        xml_path = Path(xml_path)
        logger.info(f"Parsing XML file: {xml_path}")
        with open(xml_path, 'rb') as f:
            return self.parse(f.read())

    def _clean_xml(self, xml: Union[str, bytes]) -> Union[str, bytes]:
        """Drop a byte order mark and leading whitespace before the prolog."""
        if isinstance(xml, bytes):
            if xml.startswith(b'\xef\xbb\xbf'):
                xml = xml[3:]
            return xml.lstrip()
        if xml.startswith('\ufeff'):
            xml = xml[1:]
        return xml.lstrip()

    def _extract_record(self, context: ET.Element, fallback_mode: bool) -> TrademarkRecord:
        return TrademarkRecord(
            basic_info=self._extract_basic_info(context),
            dates=self._extract_dates(context),
            owner=extract_owner(context),
            correspondent=extract_correspondent(context),
            attorney=extract_attorney(context),
            mark=extract_mark(context),
            goods_services=tuple(extract_goods_services(context)),
            filing_basis=extract_filing_basis(context),
            international_associations=tuple(extract_international_associations(context)),
            prosecution_history=tuple(extract_prosecution_history(context)),
            status=extract_status(context),
            fallback_mode=fallback_mode,
        )

    def _extract_basic_info(self, context: ET.Element) -> BasicInfo:
        logger.debug("Extracting basic info")
        return BasicInfo(
            registration_number=resolve_text(context, FieldId.REGISTRATION_NUMBER),
            application_number=resolve_text(context, FieldId.APPLICATION_NUMBER),
            registration_office=resolve_text(context, FieldId.REGISTRATION_OFFICE),
            filing_place=resolve_text(context, FieldId.FILING_PLACE),
            mark_category=resolve_text(context, FieldId.MARK_CATEGORY),
        )

    def _extract_dates(self, context: ET.Element) -> DateSet:
        logger.debug("Extracting dates")

        publication = resolve_element(context, FieldId.PUBLICATION)
        publication_date = None
        if publication is not None:
            publication_date = normalize_date(resolve_text(publication, FieldId.PUBLICATION_DATE))

        return DateSet(
            application_date=normalize_date(resolve_text(context, FieldId.APPLICATION_DATE)),
            registration_date=normalize_date(resolve_text(context, FieldId.REGISTRATION_DATE)),
            status_date=normalize_date(resolve_text(context, FieldId.STATUS_DATE)),
            publication_date=publication_date,
            first_use_date=normalize_date(resolve_text(context, FieldId.FIRST_USE_DATE)),
            first_use_in_commerce_date=normalize_date(resolve_text(context, FieldId.FIRST_USE_COMMERCE_DATE)),
        )


def parse_trademark_xml(xml: Union[str, bytes]) -> TrademarkRecord:
    """
    Parse a TSDR trademark XML document.

    Args:
        xml: XML document text or bytes

    Returns:
        The extracted record

    Raises:
        MalformedXMLError: if the document is not well-formed XML
    """
    return TrademarkXMLParser().parse(xml)
